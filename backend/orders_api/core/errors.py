"""Error Hierarchy — typed, categorized exceptions for all Orders API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Each order operation surfaces exactly one kind: Conflict, NotFound, StoreFailure or InputError
    - to_response() produces the REST envelope {"error": {...}}
    - No internal details leaked in user-facing messages (driver errors stay in logs)

Design Decisions:
    - Single hierarchy with OrdersAPIError base: FastAPI global handler catches all (ADR: uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
    - InvalidDateError is its own 400 kind instead of collapsing into a 500 store failure
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    order_id: str | None = None
    operation: str | None = None
    debug_info: dict[str, Any] | None = None


class OrdersAPIError(Exception):
    """Base exception for all Orders API errors."""

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
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "order_id": self.context.order_id,
                    "operation": self.context.operation,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class InvalidDateError(OrdersAPIError):
    """Date string is not a Y/M/D value the normalizer can pad."""
    def __init__(self, raw_date: object, context: ErrorContext | None = None):
        super().__init__(
            "Invalid date. Expected format YYYY/M/D.",
            "INVALID_DATE", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.raw_date = raw_date


class OrderNotFoundError(OrdersAPIError):
    """No order stored under the requested order_id."""
    def __init__(self, order_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.order_id = order_id
        super().__init__(
            "Order not found.",
            "ORDER_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.order_id = order_id


class DuplicateOrderError(OrdersAPIError):
    """An order with the same order_id already exists."""
    def __init__(self, order_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.order_id = order_id
        super().__init__(
            "Duplicate Order. Order already exists.",
            "DUPLICATE_ORDER", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, ctx, 409,
        )
        self.order_id = order_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

# operation -> user-facing message
_STORE_FAILURE_MESSAGES: dict[str, str] = {
    "create": "Failed to create order.",
    "update": "Failed to update order.",
    "list": "Failed to retrieve orders.",
    "search": "Failed to search for order.",
    "delete": "Failed to delete order.",
}


class OrderStoreError(OrdersAPIError):
    """Backing store failed (connectivity, constraint, driver)."""
    def __init__(
        self,
        operation: str,
        order_id: str | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.operation = operation
        if order_id is not None:
            ctx.order_id = order_id
        super().__init__(
            _STORE_FAILURE_MESSAGES.get(operation, "Order store operation failed."),
            "ORDER_STORE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.operation = operation
