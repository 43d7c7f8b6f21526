"""Error Hierarchy — typed, categorized exceptions for all Exercise Tracker failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Expected failures (missing field, unknown user) answer with HTTP 200;
      unexpected failures (malformed id, database) answer with HTTP 500
    - to_response() always produces the flat envelope {"error": <message>}

Design Decisions:
    - Single hierarchy with ExerciseTrackerError base: FastAPI global handler catches all
      (ADR: uniform error shape)
    - Expected failures keep a success status: API clients read the body, not the status
      (ADR: wire compatibility with the existing frontend)
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
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    debug_info: dict[str, Any] | None = None


class ExerciseTrackerError(Exception):
    """Base exception for all Exercise Tracker errors."""

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
    def expected(self) -> bool:
        """True for failures the client caused (reported with a success status)."""
        return self.http_status < 400

    def to_response(self) -> dict:
        """Convert to the REST error envelope."""
        return {"error": self.message}


# ─── Expected Errors (reported with HTTP 200) ───────────────────

class FieldRequiredError(ExerciseTrackerError):
    """A required body field is missing or empty."""
    def __init__(self, field: str, context: ErrorContext | None = None):
        super().__init__(
            f"{field.capitalize()} is required",
            "FIELD_REQUIRED", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 200,
        )
        self.field = field


class InvalidFieldError(ExerciseTrackerError):
    """A field is present but cannot be interpreted."""
    def __init__(self, field: str, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_FIELD", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 200,
        )
        self.field = field


class ResourceNotFoundError(ExerciseTrackerError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.debug_info = {"resource_id": resource_id}
        super().__init__(
            f"{resource_type} not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 200,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Unexpected Errors (reported with HTTP 500) ─────────────────

class MalformedIdError(ExerciseTrackerError):
    """Path identifier is not a valid record id, so the lookup itself fails."""
    def __init__(self, raw_id: str, context: ErrorContext | None = None):
        super().__init__(
            f"Cast to id failed for value '{raw_id}'",
            "MALFORMED_ID", ErrorCategory.INTERNAL,
            ErrorSeverity.ERROR, context, 500,
        )
        self.raw_id = raw_id


class DatabaseError(ExerciseTrackerError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation
