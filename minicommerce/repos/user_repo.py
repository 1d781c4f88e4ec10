# minicommerce/repos/user_repo.py
from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session

from minicommerce.data.models.user import UserModel


class UserRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_user(self, user_id: int) -> UserModel | None:
        return self.db.get(UserModel, user_id)

    def list_users(self) -> List[UserModel]:
        return list(self.db.execute(select(UserModel).order_by(UserModel.id)).scalars())

    def email_taken(self, email: str, exclude_id: int | None = None) -> bool:
        stmt = select(UserModel.id).where(UserModel.email == email)
        if exclude_id is not None:
            stmt = stmt.where(UserModel.id != exclude_id)
        return self.db.execute(select(stmt.exists())).scalar()

    def add_user(self, user: UserModel) -> UserModel:
        self.db.add(user)
        self.db.flush()
        return user

    def delete_user(self, user: UserModel) -> None:
        self.db.delete(user)
        self.db.flush()
