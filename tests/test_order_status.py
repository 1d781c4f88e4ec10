# tests/test_order_status.py
import pytest

from minicommerce.domain.errors import BadRequestError, ConflictError, NotFoundError
from minicommerce.domain.schemas import OrderItemIn
from minicommerce.domain.status import OrderStatus
from minicommerce.services.order_service import OrderService


@pytest.fixture
def order(db, user, make_product):
    product = make_product()
    return OrderService(db).create_order(user.id, [OrderItemIn(product_id=product.id, quantity=1)])


@pytest.mark.parametrize("target", ["PAID", "CANCELLED"])
def test_created_moves_to_terminal_state(db, order, target):
    patched = OrderService(db).patch_status(order.id, target)
    assert patched.status == target


@pytest.mark.parametrize("first, second", [("PAID", "CANCELLED"), ("CANCELLED", "PAID"), ("PAID", "PAID")])
def test_terminal_state_cannot_change(db, order, first, second):
    svc = OrderService(db)
    svc.patch_status(order.id, first)

    with pytest.raises(ConflictError, match=f"Order status cannot be changed after it is {first}"):
        svc.patch_status(order.id, second)


def test_status_is_trimmed_and_case_insensitive(db, order):
    assert OrderService(db).patch_status(order.id, "  paid ").status == "PAID"


def test_unknown_status_is_bad_request(db, order):
    with pytest.raises(BadRequestError, match="Invalid status. Allowed: CREATED, PAID, CANCELLED"):
        OrderService(db).patch_status(order.id, "SHIPPED")


def test_created_to_created_is_bad_request(db, order):
    with pytest.raises(BadRequestError, match="Order is already CREATED"):
        OrderService(db).patch_status(order.id, "CREATED")
    assert OrderService(db).get_order(order.id).status == "CREATED"


def test_invalid_status_checked_before_terminal_state(db, order):
    svc = OrderService(db)
    svc.patch_status(order.id, "CANCELLED")

    with pytest.raises(BadRequestError, match="Invalid status"):
        svc.patch_status(order.id, "nope")


def test_patch_missing_order(db):
    with pytest.raises(NotFoundError):
        OrderService(db).patch_status(123, "PAID")


def test_state_machine_edges():
    assert OrderStatus.CREATED.can_transition_to(OrderStatus.PAID)
    assert OrderStatus.CREATED.can_transition_to(OrderStatus.CANCELLED)
    assert not OrderStatus.CREATED.can_transition_to(OrderStatus.CREATED)
    for terminal in (OrderStatus.PAID, OrderStatus.CANCELLED):
        assert terminal.is_terminal
        assert not any(terminal.can_transition_to(s) for s in OrderStatus)
