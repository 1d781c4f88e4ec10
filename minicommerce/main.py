# minicommerce/main.py
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from sqlalchemy.engine import Engine

from minicommerce.api.errors import register_error_handlers
from minicommerce.api.routers import categories, health, orders, products, reviews, users
from minicommerce.data import models  # noqa: F401  rejestruje modele w Base.metadata
from minicommerce.data.database import Base, engine
from minicommerce.utils.logging import get_logger
from minicommerce.utils.retry import db_retry
from minicommerce.utils.settings import APP_HOST, APP_PORT

logger = get_logger(__name__)


@db_retry()
def init_db(bind: Engine = engine) -> None:
    logger.info(f"Creating tables: {sorted(Base.metadata.tables.keys())}")
    Base.metadata.create_all(bind=bind)
    logger.info("Database tables ready")


@asynccontextmanager
async def lifespan(_app: FastAPI):
    init_db()
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="Mini Commerce API",
        version="1.0.0",
        lifespan=lifespan,
    )

    register_error_handlers(app)

    # Include routers
    app.include_router(health.router)
    app.include_router(users.router)
    app.include_router(categories.router)
    app.include_router(products.router)
    app.include_router(orders.router)
    app.include_router(reviews.router)

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host=APP_HOST, port=APP_PORT)
