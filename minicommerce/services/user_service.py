# minicommerce/services/user_service.py
from typing import List

from sqlalchemy.orm import Session

from minicommerce.data.database import unit_of_work
from minicommerce.data.models.user import UserModel
from minicommerce.domain.errors import ConflictError, NotFoundError
from minicommerce.domain.schemas import UserCreate, UserRead, UserUpdate
from minicommerce.repos.user_repo import UserRepo
from minicommerce.utils.logging import get_logger

logger = get_logger(__name__)


def normalize_email(email: str | None) -> str:
    return "" if email is None else email.strip().lower()


class UserService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = UserRepo(db)

    def create_user(self, payload: UserCreate) -> UserRead:
        email = normalize_email(payload.email)

        with unit_of_work(self.db):
            if self.repo.email_taken(email):
                raise ConflictError("Email already exists")

            created = self.repo.add_user(UserModel(name=payload.name.strip(), email=email))

        logger.info(f"User {created.id} registered")
        return UserRead.model_validate(created)

    def list_users(self) -> List[UserRead]:
        return [UserRead.model_validate(u) for u in self.repo.list_users()]

    def get_user(self, user_id: int) -> UserRead:
        return UserRead.model_validate(self._require(user_id))

    def update_user(self, user_id: int, payload: UserUpdate) -> UserRead:
        email = normalize_email(payload.email)

        with unit_of_work(self.db):
            user = self._require(user_id)
            if self.repo.email_taken(email, exclude_id=user.id):
                raise ConflictError("Email already exists")

            user.name = payload.name.strip()
            user.email = email

        logger.info(f"User {user_id} updated")
        return UserRead.model_validate(user)

    def delete_user(self, user_id: int) -> None:
        with unit_of_work(self.db):
            self.repo.delete_user(self._require(user_id))

        logger.info(f"User {user_id} deleted")

    def _require(self, user_id: int) -> UserModel:
        user = self.repo.get_user(user_id)
        if not user:
            raise NotFoundError("User not found")
        return user
