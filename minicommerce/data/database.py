# minicommerce/data/database.py
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from minicommerce.utils.settings import DATABASE_URL, SQL_ECHO


class Base(DeclarativeBase):
    pass


def build_engine(url: str = DATABASE_URL, **kwargs) -> Engine:
    is_sqlite = url.startswith("sqlite")
    if is_sqlite:
        kwargs.setdefault("connect_args", {"check_same_thread": False})

    engine = create_engine(url, echo=SQL_ECHO, **kwargs)

    if is_sqlite:
        #sqlite domyslnie ignoruje klucze obce (ON DELETE SET NULL / CASCADE)
        @event.listens_for(engine, "connect")
        def _enable_foreign_keys(dbapi_connection, _record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


engine = build_engine()
SessionLocal = sessionmaker(bind=engine, autoflush=False)


def get_db() -> Iterator[Session]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def unit_of_work(db: Session) -> Iterator[Session]:
    """Wszystko albo nic: commit na koniec bloku, rollback przy dowolnym wyjatku."""
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
