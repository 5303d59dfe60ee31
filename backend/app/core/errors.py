"""Error Hierarchy — typed, categorized exceptions for all failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST envelope
    - No internal details leaked in user-facing messages
    - Authorization failures on items are NOT errors: they are AccessOutcome redirects

Design Decisions:
    - Single hierarchy with TodoError base: FastAPI global handler catches all (uniform error shape)
    - ErrorContext as dataclass: carries the error timestamp without coupling to logging
"""

from dataclasses import dataclass, field
from enum import Enum
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
    AUTHENTICATION = "authentication"
    DATABASE = "database"
    INTERNAL = "internal"
    CONFLICT = "conflict"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class TodoError(Exception):
    """Base exception for all application errors."""

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
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class ItemValidationError(TodoError):
    """Submitted item data failed validation."""
    def __init__(
        self,
        message: str,
        field: str,
        details: list[dict] | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field
        self.details = details or []

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["details"] = self.details
        return response


class InvalidCredentialsError(TodoError):
    """Sign-in attempted with an unknown email or wrong password."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Invalid email or password.",
            "INVALID_CREDENTIALS", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class EmailTakenError(TodoError):
    """Registration attempted with an email that already has an account."""
    def __init__(self, email: str, context: ErrorContext | None = None):
        super().__init__(
            f"An account for '{email}' already exists.",
            "EMAIL_TAKEN", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 409,
        )
        self.email = email


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(TodoError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
