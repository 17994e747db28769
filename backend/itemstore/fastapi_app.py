"""
FastAPI Application Factory.
Creates and configures the FastAPI application with routers, middleware, and DI.

Endpoints:
- GET /items, POST /items, GET /items/user/{email}
- GET /requests
- GET /, GET /health
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from dishka.integrations.fastapi import setup_dishka

from itemstore.config.logging_config import setup_logging
from itemstore.config.settings import Config, StoreSettings
from itemstore.domain.exceptions import DomainValidationError
from itemstore.domain.ports.repositories import DocumentStore
from itemstore.presentation.api import health_router, items_router, requests_router
from itemstore.presentation.errors import (
    RouteError,
    http_exception_handler,
    request_validation_handler,
    route_error_handler,
    unhandled_exception_handler,
    validation_error_handler,
)
from itemstore.presentation.middleware import (
    CorrelationIdMiddleware,
    RequestAuditMiddleware,
)
from itemstore.setup.ioc.container import create_container

# Setup logging
setup_logging(Config.LOG_LEVEL, Config.LOG_PATH)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI lifespan context manager.

    - Startup: create data directories and seed missing documents
    - Shutdown: close the DI container
    """
    container = app.state.dishka_container
    store = await container.get(DocumentStore)
    settings = await container.get(StoreSettings)
    await store.initialize()
    logger.info(f"[App] Data directory: {settings.base_dir}")
    yield
    await container.close()
    logger.info("[App] Shutdown complete. DI container closed.")


def create_fastapi_app(settings: Optional[StoreSettings] = None) -> FastAPI:
    """
    Application factory for creating FastAPI app.

    Args:
        settings: Store configuration (default: built from Config)

    Returns:
        FastAPI application instance
    """
    settings = settings or StoreSettings.from_config(Config)

    app = FastAPI(
        title="Item Store API",
        description="JSON record store with request audit log",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Setup Dishka BEFORE app starts (must add middleware before startup)
    setup_dishka(create_container(settings), app)

    if settings.request_log_enabled:
        app.add_middleware(RequestAuditMiddleware)

    # Correlation ID middleware wraps audit so audit logs carry the id
    app.add_middleware(CorrelationIdMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=Config.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(DomainValidationError, validation_error_handler)
    app.add_exception_handler(RouteError, route_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(health_router)
    app.include_router(items_router)  # GET/POST /items, GET /items/user/{email}
    app.include_router(requests_router)  # GET /requests

    return app


# Create the app instance
app = create_fastapi_app()
