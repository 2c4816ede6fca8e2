"""Orders API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map OrdersAPIError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database handle acquired on startup and disposed on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - create_app() factory plus module-level app: uvicorn serves orders_api.main:app,
      tests may build a fresh instance
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from orders_api.api.error_handlers import register_error_handlers
from orders_api.api.routes import health, orders
from orders_api.config import get_settings
from orders_api.infrastructure.database import close_db, init_db
from orders_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_create_tables:
        await manager.create_tables()
    logger.info("Orders API started")
    try:
        yield
    finally:
        logger.info("Orders API shutting down")
        await close_db()


def create_app() -> FastAPI:
    """Build the FastAPI app with middleware, routes and error handlers."""
    settings = get_settings()
    app = FastAPI(
        title=settings.api_title, version=settings.api_version,
        lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(health.router)
    app.include_router(orders.router)
    register_error_handlers(app)
    return app


app = create_app()
