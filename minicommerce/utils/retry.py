# minicommerce/utils/retry.py
from sqlalchemy.exc import OperationalError
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type

from minicommerce.utils.settings import DB_INIT_ATTEMPTS


#baza w kontenerze moze jeszcze wstawac, create_all probujemy kilka razy
def db_retry(attempts: int = DB_INIT_ATTEMPTS):
    return retry(
        reraise=True,
        stop=stop_after_attempt(attempts),
        wait=wait_exponential(multiplier=0.5, min=0.5, max=5),
        retry=retry_if_exception_type(OperationalError),
    )
