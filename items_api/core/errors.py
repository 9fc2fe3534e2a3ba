"""Error Hierarchy: typed, categorized exceptions for every Items API failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400/404) are recoverable; DatabaseError (500) is critical
    - to_response() produces the wire envelope {"error": <fixed message>}
    - User-facing messages are fixed strings; driver detail stays in ErrorContext

Design Decisions:
    - Single hierarchy with ItemsApiError base: one FastAPI handler catches all
    - ErrorContext carries observability fields (item_id, operation, detail)
      that are logged but never serialized into the response body
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories, one per row of the error taxonomy."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    ROUTE_NOT_FOUND = "route_not_found"
    DATABASE = "database"


@dataclass
class ErrorContext:
    """Observability context attached to an error (logged, not returned)."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    item_id: int | None = None
    operation: str | None = None
    debug_info: dict[str, Any] | None = None


class ItemsApiError(Exception):
    """Base exception for all Items API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the REST error body."""
        return {"error": self.message}

    def log_extra(self) -> dict:
        """Fields for structured logging (see infrastructure/observability.py)."""
        return {
            "error_code": self.code,
            "item_id": self.context.item_id,
            "operation": self.context.operation,
        }


# --- Client Errors (400/404) -------------------------------------------------

class NameRequiredError(ItemsApiError):
    """Request body has no usable `name` (absent, empty, not a string)."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Name is required", "NAME_REQUIRED", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


class InvalidJsonError(ItemsApiError):
    """Request body is not parseable JSON."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Invalid JSON", "INVALID_JSON", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


class ItemNotFoundError(ItemsApiError):
    """No item with the requested id."""
    def __init__(self, item_id: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.item_id = item_id
        super().__init__(
            "Item not found", "ITEM_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 404,
        )
        self.item_id = item_id


class RouteNotFoundError(ItemsApiError):
    """Method + path pair matches no route."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Route not found", "ROUTE_NOT_FOUND", ErrorCategory.ROUTE_NOT_FOUND,
            ErrorSeverity.INFO, context, 404,
        )


# --- Infrastructure Errors (500) ---------------------------------------------

class DatabaseError(ItemsApiError):
    """Store operation failed. Cause is logged, never returned."""
    def __init__(
        self, operation: str, reason: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.operation = operation
        ctx.debug_info = {"reason": reason}
        super().__init__(
            "Database error", "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.operation = operation
        self.reason = reason
