# minicommerce/api/routers/orders.py
from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from minicommerce.data.database import get_db
from minicommerce.domain.schemas import OrderCreate, OrderOut, OrderStatusPatch
from minicommerce.services.order_service import OrderService

router = APIRouter(prefix="/api/orders", tags=["orders"])


def get_service(db: Session = Depends(get_db)) -> OrderService:
    return OrderService(db)


@router.post("", response_model=OrderOut, status_code=status.HTTP_201_CREATED)
def create_order(payload: OrderCreate, response: Response, svc: OrderService = Depends(get_service)):
    """
    Tworzy zamówienie i zdejmuje stan magazynowy produktów.
    Wszystko albo nic: brak towaru na jednej pozycji cofa całe zamówienie.
    """
    created = svc.create_order(payload.user_id, payload.items)
    response.headers["Location"] = f"/api/orders/{created.id}"
    return created


@router.get("", response_model=List[OrderOut])
def list_orders(svc: OrderService = Depends(get_service)):
    return svc.list_orders()


@router.get("/{order_id}", response_model=OrderOut)
def get_order(order_id: int, svc: OrderService = Depends(get_service)):
    return svc.get_order(order_id)


@router.patch("/{order_id}", response_model=OrderOut)
def patch_order_status(order_id: int, payload: OrderStatusPatch, svc: OrderService = Depends(get_service)):
    """
    CREATED -> PAID albo CANCELLED. Później status się już nie zmienia (409).
    """
    return svc.patch_status(order_id, payload.status)


@router.delete("/{order_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_order(order_id: int, svc: OrderService = Depends(get_service)):
    svc.delete_order(order_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
