"""Error Hierarchy — typed, categorized exceptions for every Chirpy failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (4xx) carry their message to the client verbatim
    - Server errors (5xx) never leak detail: to_response() substitutes INTERNAL_SERVER_MESSAGE
    - to_response() produces the {"error": "<message>"} envelope

Design Decisions:
    - Single hierarchy with ChirpyError base: one FastAPI handler catches all
    - ErrorContext as dataclass: observability fields live next to the error,
      the logging framework stays out of core/
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

INTERNAL_SERVER_MESSAGE = "Something went wrong"


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    FORBIDDEN = "forbidden"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"


@dataclass
class ErrorContext:
    """Context attached to an error for logging."""
    resource_id: str | None = None
    debug_info: dict[str, Any] | None = None


class ChirpyError(Exception):
    """Base exception for all Chirpy errors."""

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

    @property
    def public_message(self) -> str:
        """Message safe to send to the client."""
        if self.http_status >= 500:
            return INTERNAL_SERVER_MESSAGE
        return self.message

    def to_response(self) -> dict:
        """Convert to the error envelope."""
        return {"error": self.public_message}


# ─── Client Errors (4xx) ────────────────────────────────────────

class ChirpTooLongError(ChirpyError):
    """Chirp body exceeds the maximum length."""
    def __init__(self, length: int, limit: int, context: ErrorContext | None = None):
        super().__init__(
            "Chirp is too long", "CHIRP_TOO_LONG", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.length = length
        self.limit = limit


class InvalidIdentityError(ChirpyError):
    """A client-supplied id does not parse as a UUID."""
    def __init__(self, field: str, raw_value: str, context: ErrorContext | None = None):
        super().__init__(
            f"Invalid {field}", "INVALID_IDENTITY", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.field = field
        self.raw_value = raw_value


class ForbiddenError(ChirpyError):
    """Operation is not permitted in the current deployment."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "FORBIDDEN", ErrorCategory.FORBIDDEN,
            ErrorSeverity.WARNING, context, 403,
        )


class ResourceNotFoundError(ChirpyError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource_id = resource_id
        super().__init__(
            f"{resource_type} not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.resource_type = resource_type


# ─── Infrastructure Errors (5xx) ────────────────────────────────

class DatabaseError(ChirpyError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation
