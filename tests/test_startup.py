# tests/test_startup.py
from sqlalchemy import inspect
from sqlalchemy.pool import StaticPool

from minicommerce.data.database import build_engine
from minicommerce.main import init_db
from minicommerce.utils.logging import get_logger


def test_init_db_creates_all_tables():
    engine = build_engine("sqlite://", poolclass=StaticPool)

    init_db(engine)

    assert set(inspect(engine).get_table_names()) == {
        "users",
        "categories",
        "products",
        "orders",
        "order_lines",
        "reviews",
    }
    engine.dispose()


def test_sqlite_foreign_keys_enabled():
    engine = build_engine("sqlite://", poolclass=StaticPool)

    with engine.connect() as conn:
        assert conn.exec_driver_sql("PRAGMA foreign_keys").scalar() == 1
    engine.dispose()


def test_loggers_live_under_package_root():
    assert get_logger("minicommerce.services.x").name == "minicommerce.services.x"
    assert get_logger("tests").name == "minicommerce.tests"
    assert get_logger("minicommerce").handlers
