"""Items API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ItemsApiError and routing misses to {"error": ...} bodies
    - The record store is built once in the lifespan, kept on app.state, and
      reached by routes only through the get_item_store dependency
    - Schema bootstrap runs on every startup (idempotent)
    - The HTTP surface is exactly the /items routes: no docs/openapi routes,
      no trailing-slash redirects

Design Decisions:
    - create_app() factory so tests and alternate settings get an isolated app;
      module-level `app` serves `uvicorn items_api.main:app`
    - Lifespan over @app.on_event: engine disposed on shutdown
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from items_api.api.error_handlers import register_error_handlers
from items_api.api.routes import items
from items_api.config import Settings, get_settings
from items_api.infrastructure.database import DatabaseSessionManager
from items_api.infrastructure.item_store import SqlItemStore
from items_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application for the given settings."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        db_manager = DatabaseSessionManager(
            settings.database_url, echo=settings.database_echo,
        )
        store = SqlItemStore(db_manager)
        await store.create_schema()
        app.state.item_store = store
        logger.info(f"Server running on http://{settings.host}:{settings.port}")
        try:
            yield
        finally:
            logger.info("Items API shutting down")
            app.state.item_store = None
            await db_manager.dispose()

    app = FastAPI(
        title="Items API",
        version="1.0.0",
        lifespan=lifespan,
        redirect_slashes=False,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    register_error_handlers(app)
    app.include_router(items.router)
    return app


app = create_app()


def run() -> None:
    """Console entry point: serve `app` on the configured host and port."""
    settings = get_settings()
    uvicorn.run(
        "items_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
