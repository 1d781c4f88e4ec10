# minicommerce/api/routers/users.py
from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from minicommerce.data.database import get_db
from minicommerce.domain.schemas import UserCreate, UserRead, UserUpdate
from minicommerce.services.user_service import UserService

router = APIRouter(prefix="/api/users", tags=["users"])


def get_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(db)


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def create_user(payload: UserCreate, response: Response, svc: UserService = Depends(get_service)):
    created = svc.create_user(payload)
    response.headers["Location"] = f"/api/users/{created.id}"
    return created


@router.get("", response_model=List[UserRead])
def list_users(svc: UserService = Depends(get_service)):
    return svc.list_users()


@router.get("/{user_id}", response_model=UserRead)
def get_user(user_id: int, svc: UserService = Depends(get_service)):
    return svc.get_user(user_id)


@router.put("/{user_id}", response_model=UserRead)
def update_user(user_id: int, payload: UserUpdate, svc: UserService = Depends(get_service)):
    return svc.update_user(user_id, payload)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(user_id: int, svc: UserService = Depends(get_service)):
    svc.delete_user(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
