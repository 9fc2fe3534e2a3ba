"""Error Handlers: global exception handlers for the Items API.

Invariants:
    - ItemsApiError -> {"error": <fixed message>} with the error's status
    - Starlette routing misses (404, and 405 for a known path) -> 404 "Route not found"
    - Exception (catch-all) -> 500 "Database error", never leaks internal details;
      every request does at most one store call, so an unhandled failure is
      reported with the store-failure message
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from items_api.core.errors import DatabaseError, ItemsApiError, RouteNotFoundError

logger = logging.getLogger(__name__)

ROUTING_MISS_STATUSES = (
    status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED,
)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_items_error_handler(app)
    _register_routing_miss_handler(app)
    _register_generic_error_handler(app)


def _register_items_error_handler(app: FastAPI) -> None:

    @app.exception_handler(ItemsApiError)
    async def items_error_handler(request: Request, exc: ItemsApiError):
        """Handle all domain/infrastructure errors."""
        level = logging.ERROR if exc.http_status >= 500 else logging.WARNING
        logger.log(
            level,
            f"{type(exc).__name__}: {exc.message}",
            extra={
                **exc.log_extra(),
                "method": request.method,
                "path": request.url.path,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_routing_miss_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def routing_miss_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        """Unmatched method + path pairs all answer 404 "Route not found"."""
        if exc.status_code not in ROUTING_MISS_STATUSES:
            return await http_exception_handler(request, exc)
        error = RouteNotFoundError()
        logger.info(
            f"No route for {request.method} {request.url.path}",
            extra={
                "error_code": error.code,
                "method": request.method,
                "path": request.url.path,
            },
        )
        return JSONResponse(
            status_code=error.http_status, content=error.to_response(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"method": request.method, "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=DatabaseError("unhandled", type(exc).__name__).to_response(),
        )
