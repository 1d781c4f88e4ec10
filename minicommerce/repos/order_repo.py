# minicommerce/repos/order_repo.py
from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from minicommerce.data.models.order import OrderModel


class OrderRepo:
    def __init__(self, db: Session):
        self.db = db

    def add_order(self, order: OrderModel) -> OrderModel:
        self.db.add(order)
        self.db.flush()
        return order

    def get_order(self, order_id: int) -> OrderModel | None:
        return self.db.get(OrderModel, order_id, options=[selectinload(OrderModel.lines)])

    def list_orders(self) -> List[OrderModel]:
        stmt = select(OrderModel).options(selectinload(OrderModel.lines)).order_by(OrderModel.id)
        return list(self.db.execute(stmt).scalars())

    def update_order_status(self, order: OrderModel, status: str) -> OrderModel:
        order.status = status
        self.db.flush()
        return order

    def delete_order(self, order: OrderModel) -> None:
        self.db.delete(order)
        self.db.flush()
