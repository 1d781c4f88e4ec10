# minicommerce/api/routers/products.py
from typing import List

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from minicommerce.data.database import get_db
from minicommerce.domain.schemas import ProductCreate, ProductPatch, ProductRead, ProductUpdate
from minicommerce.services.product_service import ProductService

router = APIRouter(prefix="/api/products", tags=["products"])


def get_service(db: Session = Depends(get_db)) -> ProductService:
    return ProductService(db)


@router.post("", response_model=ProductRead, status_code=status.HTTP_201_CREATED)
def create_product(payload: ProductCreate, response: Response, svc: ProductService = Depends(get_service)):
    created = svc.create_product(payload)
    response.headers["Location"] = f"/api/products/{created.id}"
    return created


@router.get("", response_model=List[ProductRead])
def list_products(
    category_id: int | None = Query(None, alias="categoryId"),
    svc: ProductService = Depends(get_service),
):
    return svc.list_products(category_id)


@router.get("/{product_id}", response_model=ProductRead)
def get_product(product_id: int, svc: ProductService = Depends(get_service)):
    return svc.get_product(product_id)


@router.put("/{product_id}", response_model=ProductRead)
def update_product(product_id: int, payload: ProductUpdate, svc: ProductService = Depends(get_service)):
    return svc.update_product(product_id, payload)


@router.patch("/{product_id}", response_model=ProductRead)
def patch_product(product_id: int, payload: ProductPatch, svc: ProductService = Depends(get_service)):
    return svc.patch_product(product_id, payload)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(product_id: int, svc: ProductService = Depends(get_service)):
    svc.delete_product(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
