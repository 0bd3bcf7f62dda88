from contextlib import asynccontextmanager
from typing import Optional

import structlog
import uvicorn
from fastapi import FastAPI

from app.core.config import settings
from app.core.errors import register_exception_handlers
from app.core.logging import configure_logging
from app.database.connection import Base, engine
from app.middleware.access_log import AccessLogMiddleware
from app.routes import system
from app.routes.products import router as product_router
from app.services.discount_client import DiscountClient
from app.services.status_translator import StatusTranslator

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.LOG_LEVEL, settings.ACCESS_LOG_PATH)
    Base.metadata.create_all(bind=engine)
    logger.info("startup_complete", database_url=settings.DATABASE_URL)
    yield
    app.state.discount_client.close()


def create_app(
    discount_client: Optional[DiscountClient] = None,
    status_translator: Optional[StatusTranslator] = None,
) -> FastAPI:
    app = FastAPI(
        title="Product API",
        version="1.0.0",
        description="API documentation for product management",
        docs_url="/api-docs",
        lifespan=lifespan,
    )

    # built once, read-only afterwards
    app.state.status_translator = status_translator or StatusTranslator.default()
    app.state.discount_client = discount_client or DiscountClient(
        settings.DISCOUNT_API_URL, timeout=settings.DISCOUNT_API_TIMEOUT
    )

    app.add_middleware(AccessLogMiddleware)
    register_exception_handlers(app)

    app.include_router(product_router)
    app.include_router(system.router)
    return app


app = create_app()


def run():
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
