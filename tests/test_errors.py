# tests/test_errors.py
from fastapi.testclient import TestClient

from minicommerce.api.errors import STATUS_BY_KIND
from minicommerce.api.routers import orders
from minicommerce.domain.errors import (
    BadRequestError,
    ConflictError,
    DomainError,
    ErrorKind,
    NotFoundError,
)


def test_error_kinds():
    assert NotFoundError("x").kind is ErrorKind.NOT_FOUND
    assert ConflictError("x").kind is ErrorKind.CONFLICT
    assert BadRequestError("x").kind is ErrorKind.BAD_REQUEST
    assert isinstance(ConflictError("x"), DomainError)
    assert ConflictError("boom").message == "boom"


def test_every_kind_maps_to_a_status():
    assert {k: int(v) for k, v in STATUS_BY_KIND.items()} == {
        ErrorKind.NOT_FOUND: 404,
        ErrorKind.CONFLICT: 409,
        ErrorKind.BAD_REQUEST: 400,
    }


def test_not_found_body(client):
    resp = client.get("/api/users/42")

    assert resp.status_code == 404
    body = resp.json()
    assert body["status"] == 404
    assert body["error"] == "Not Found"
    assert body["message"] == "User not found"
    assert body["path"] == "/api/users/42"
    assert "timestamp" in body
    assert "violations" not in body


def test_validation_failure_lists_violations(client):
    resp = client.post("/api/orders", json={"user_id": 1, "items": []})

    assert resp.status_code == 400
    body = resp.json()
    assert body["message"] == "Validation failed"
    assert body["error"] == "Bad Request"
    assert [v["field"] for v in body["violations"]] == ["items"]


def test_validation_failure_for_product_fields(client):
    resp = client.post(
        "/api/products",
        json={"name": " ", "sku": "A", "price": "0", "stock": -1, "category_id": 1},
    )

    assert resp.status_code == 400
    fields = {v["field"] for v in resp.json()["violations"]}
    assert fields == {"name", "price", "stock"}


def test_validation_failure_for_review_rating_and_comment(client):
    resp = client.post(
        "/api/reviews",
        json={"user_id": 1, "product_id": 1, "rating": 6, "comment": "x" * 601},
    )

    assert resp.status_code == 400
    assert {v["field"] for v in resp.json()["violations"]} == {"rating", "comment"}


def test_invalid_email_is_rejected(client):
    resp = client.post("/api/users", json={"name": "Jan", "email": "not-an-email"})

    assert resp.status_code == 400
    assert resp.json()["violations"][0]["field"] == "email"


def test_order_quantity_below_one_is_rejected(client):
    resp = client.post("/api/orders", json={"user_id": 1, "items": [{"product_id": 1, "quantity": 0}]})

    assert resp.status_code == 400
    assert resp.json()["violations"][0]["field"] == "items.0.quantity"


def test_unknown_route_uses_error_body(client):
    resp = client.get("/api/nothing-here")

    assert resp.status_code == 404
    assert resp.json()["path"] == "/api/nothing-here"
    assert "violations" not in resp.json()


def test_unexpected_error_is_500(app):
    def broken_service():
        raise RuntimeError("database exploded")

    app.dependency_overrides[orders.get_service] = broken_service
    client = TestClient(app, raise_server_exceptions=False)

    resp = client.get("/api/orders")

    assert resp.status_code == 500
    assert resp.json()["message"] == "Unexpected error"
    assert resp.json()["error"] == "Internal Server Error"
