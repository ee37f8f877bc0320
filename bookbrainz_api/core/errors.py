"""Error Hierarchy — typed, categorized exceptions for all lookup failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - EntityNotFoundError is the only error intercepted inside the lookup pipeline
    - DatabaseError and EntityNotFoundError never stand in for one another
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with BookBrainzError base: FastAPI global handler catches all
    - EntityNotFoundError renders the bare {"message": ...} body the public API
      has always returned for unknown BBIDs
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
    entity_kind: str | None = None
    bbid: str | None = None
    relation_path: str | None = None
    debug_info: dict[str, Any] | None = None


class BookBrainzError(Exception):
    """Base exception for all lookup API errors."""

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


# ─── Lookup Errors (400-level) ──────────────────────────────────

class EntityNotFoundError(BookBrainzError):
    """No entity of the expected kind exists for the requested BBID."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, context, 404,
        )

    def to_response(self) -> dict:
        return {"message": self.message}


# ─── Programming Errors ─────────────────────────────────────────

class InvalidRelationRequestError(BookBrainzError):
    """A relation was read that the entity was not resolved with,
    or a relation path names something that is not a relationship."""
    def __init__(self, relation_path: str, reason: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.relation_path = relation_path
        super().__init__(
            f"Invalid relation request '{relation_path}': {reason}",
            "INVALID_RELATION_REQUEST", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.relation_path = relation_path


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(BookBrainzError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
