# minicommerce/services/order_service.py
from decimal import Decimal
from typing import List

from sqlalchemy.orm import Session

from minicommerce.data.database import unit_of_work
from minicommerce.data.models.order import OrderModel
from minicommerce.data.models.order_line import OrderLineModel
from minicommerce.domain.errors import BadRequestError, ConflictError, NotFoundError
from minicommerce.domain.schemas import OrderItemIn, OrderLineOut, OrderOut
from minicommerce.domain.status import OrderStatus
from minicommerce.repos.order_repo import OrderRepo
from minicommerce.repos.product_repo import ProductRepo
from minicommerce.repos.user_repo import UserRepo
from minicommerce.utils.logging import get_logger

logger = get_logger(__name__)


class OrderService:
    """
    Serwis odpowiedzialny za domenę zamówień.
    commands (create, patch_status, delete) w jednej transakcji,
    query (get, list) tylko odczyt
    """

    def __init__(self, db: Session):
        self.db = db
        self.repo = OrderRepo(db)
        self.products = ProductRepo(db)
        self.users = UserRepo(db)

    # =====================================================
    # QUERY
    # =====================================================
    def list_orders(self) -> List[OrderOut]:
        return [self._to_response(o) for o in self.repo.list_orders()]

    def get_order(self, order_id: int) -> OrderOut:
        return self._to_response(self._require(order_id))

    # =====================================================
    # COMMANDS
    # =====================================================
    def create_order(self, user_id: int, items: List[OrderItemIn]) -> OrderOut:
        """
        Use Case: Tworzenie zamówienia.

        1. Weryfikuje użytkownika
        2. Dla każdej pozycji: produkt istnieje, ilość >= 1, stan wystarcza
        3. Zdejmuje stan magazynowy, zamraża cenę jednostkową
        4. Liczy total i zapisuje zamówienie w statusie CREATED

        Błąd na dowolnej pozycji wycofuje całą transakcję,
        łącznie ze stanem zdjętym dla wcześniejszych pozycji.
        """
        with unit_of_work(self.db):
            user = self.users.get_user(user_id)
            if not user:
                raise NotFoundError("User not found")

            order = OrderModel(user_id=user.id, status=OrderStatus.CREATED.value)
            total = Decimal("0.00")

            for item in items:
                line = self._reserve_line(item.product_id, item.quantity)
                total += line.line_total
                order.lines.append(line)

            order.total = total
            created = self.repo.add_order(order)

        logger.info(
            f"Order {created.id} created for user {user_id}: "
            f"{len(created.lines)} line(s), total {created.total}"
        )
        return self._to_response(created)

    def patch_status(self, order_id: int, raw_status: str) -> OrderOut:
        # CREATED -> PAID / CANCELLED, potem stan koncowy
        with unit_of_work(self.db):
            order = self._require(order_id)

            try:
                target = OrderStatus.parse(raw_status)
            except ValueError:
                raise BadRequestError(f"Invalid status. Allowed: {OrderStatus.allowed()}")

            current = OrderStatus(order.status)
            if current.is_terminal:
                raise ConflictError(f"Order status cannot be changed after it is {current.value}")
            if target is OrderStatus.CREATED:
                raise BadRequestError("Order is already CREATED")

            self.repo.update_order_status(order, target.value)

        logger.info(f"Order {order_id} status {current.value} -> {target.value}")
        return self._to_response(order)

    def delete_order(self, order_id: int) -> None:
        with unit_of_work(self.db):
            order = self._require(order_id)
            self.repo.delete_order(order)

        logger.info(f"Order {order_id} deleted")

    # =====================================================
    # HELPERS
    # =====================================================
    def _reserve_line(self, product_id: int, quantity: int) -> OrderLineModel:
        product = self.products.get_product(product_id)
        if not product:
            raise NotFoundError(f"Product not found: {product_id}")

        if quantity <= 0:
            raise BadRequestError("Quantity must be >= 1")

        if product.stock < quantity:
            logger.warning(f"Insufficient stock for product {product_id}: {product.stock} < {quantity}")
            raise BadRequestError(f"Insufficient stock for product {product_id}")

        # warunkowy update, drugi rownolegly request nie zejdzie ponizej zera
        if self.products.decrement_stock(product_id, quantity) == 0:
            logger.warning(f"Stock of product {product_id} changed concurrently")
            raise BadRequestError(f"Insufficient stock for product {product_id}")

        self.db.refresh(product)

        unit_price = product.price
        return OrderLineModel(
            product_id=product.id,
            product_name=product.name,
            quantity=quantity,
            unit_price=unit_price,
            line_total=unit_price * quantity,
        )

    def _require(self, order_id: int) -> OrderModel:
        order = self.repo.get_order(order_id)
        if not order:
            raise NotFoundError("Order not found")
        return order

    @staticmethod
    def _to_response(order: OrderModel) -> OrderOut:
        return OrderOut(
            id=order.id,
            user_id=order.user_id,
            status=order.status,
            total=order.total,
            created_at=order.created_at,
            items=[OrderLineOut.model_validate(line) for line in order.lines],
        )
