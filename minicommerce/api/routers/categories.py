# minicommerce/api/routers/categories.py
from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from minicommerce.data.database import get_db
from minicommerce.domain.schemas import CategoryCreate, CategoryRead, CategoryUpdate
from minicommerce.services.category_service import CategoryService

router = APIRouter(prefix="/api/categories", tags=["categories"])


def get_service(db: Session = Depends(get_db)) -> CategoryService:
    return CategoryService(db)


@router.post("", response_model=CategoryRead, status_code=status.HTTP_201_CREATED)
def create_category(payload: CategoryCreate, response: Response, svc: CategoryService = Depends(get_service)):
    created = svc.create_category(payload)
    response.headers["Location"] = f"/api/categories/{created.id}"
    return created


@router.get("", response_model=List[CategoryRead])
def list_categories(svc: CategoryService = Depends(get_service)):
    return svc.list_categories()


@router.get("/{category_id}", response_model=CategoryRead)
def get_category(category_id: int, svc: CategoryService = Depends(get_service)):
    return svc.get_category(category_id)


@router.put("/{category_id}", response_model=CategoryRead)
def update_category(category_id: int, payload: CategoryUpdate, svc: CategoryService = Depends(get_service)):
    return svc.update_category(category_id, payload)


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_category(category_id: int, svc: CategoryService = Depends(get_service)):
    """
    Usuwa kategorię. 409 jeśli kategoria ma jeszcze produkty.
    """
    svc.delete_category(category_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
