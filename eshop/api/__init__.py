# eshop/api/__init__.py
from contextlib import asynccontextmanager

from fastapi import FastAPI

from eshop.api.errors import register_exception_handlers
from eshop.api.routers import carts, health, products, users
from eshop.data.database import create_schema, init_engine
from eshop.utils.logging import get_logger
from eshop.utils.settings import Settings, load_settings

logger = get_logger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or load_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Initializing database")
        engine = init_engine(settings)
        create_schema(engine, attempts=settings.db_connect_attempts)
        yield
        engine.dispose()

    app = FastAPI(
        title="E-Shop API",
        version="1.0.0",
        description="A simple e-commerce API for managing products and shopping carts",
        lifespan=lifespan,
    )
    app.state.settings = settings

    register_exception_handlers(app)

    # Include routers
    app.include_router(health.router)
    app.include_router(users.router)
    app.include_router(products.router)
    app.include_router(carts.router)

    return app
