# tests/conftest.py
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from minicommerce.data import models  # noqa: F401
from minicommerce.data.database import Base, build_engine, get_db
from minicommerce.domain.schemas import CategoryCreate, ProductCreate, UserCreate
from minicommerce.main import create_app
from minicommerce.services.category_service import CategoryService
from minicommerce.services.product_service import ProductService
from minicommerce.services.user_service import UserService


@pytest.fixture
def engine():
    #jedno polaczenie in-memory wspoldzielone przez wszystkie sesje
    engine = build_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def app(session_factory):
    app = create_app()

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    return app


@pytest.fixture
def client(app):
    return TestClient(app)


# =====================================================
# dane testowe
# =====================================================
@pytest.fixture
def user(db):
    return UserService(db).create_user(UserCreate(name="Jan Kowalski", email="jan@example.com"))


@pytest.fixture
def category(db):
    return CategoryService(db).create_category(CategoryCreate(name="Electronics"))


@pytest.fixture
def make_product(db, category):
    def _make(sku: str = "SKU-1", stock: int = 10, price: str = "250.00", name: str | None = None):
        return ProductService(db).create_product(
            ProductCreate(
                name=name or f"Product {sku}",
                sku=sku,
                price=Decimal(price),
                stock=stock,
                category_id=category.id,
            )
        )

    return _make
