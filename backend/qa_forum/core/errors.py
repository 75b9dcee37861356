"""Forum Errors — the closed set of failures a question handler may surface.

Invariants:
    - Handlers surface exactly two kinds: ResourceNotFoundError and DatabaseError
      (AuthenticationRequiredError is raised by the API layer, before any handler runs)
    - code / category / severity / http_status are class-level facts, not per-instance arguments
    - to_response() is the only REST envelope; it never carries driver text

Design Decisions:
    - ErrorContext travels with the error so the envelope and the log line agree
      on question_id / operation
    - Severity kept separate from HTTP status: a 404 is routine, a 503 pages someone
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class ErrorSeverity(str, Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Where a failure happened: which question, which caller, which operation."""
    question_id: int | None = None
    user_id: int | None = None
    operation: str | None = None
    occurred_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def public(self) -> dict:
        # user_id stays in the logs only
        return {"question_id": self.question_id, "operation": self.operation}


class ForumError(Exception):
    """Base of every error the forum API answers with a structured body."""

    code = "INTERNAL_ERROR"
    category = ErrorCategory.INTERNAL
    severity = ErrorSeverity.ERROR
    http_status = 500

    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(message)
        self.message = message
        self.context = context or ErrorContext()

    def to_response(self) -> dict:
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.occurred_at.isoformat(),
                "context": self.context.public(),
            }
        }


class ResourceNotFoundError(ForumError):
    """A question (or the tag / answer it references) does not exist."""

    code = "RESOURCE_NOT_FOUND"
    category = ErrorCategory.RESOURCE_NOT_FOUND
    http_status = 404

    def __init__(
        self, resource_type: str, resource_id: object,
        context: ErrorContext | None = None,
    ):
        super().__init__(f"{resource_type} '{resource_id}' not found", context)
        self.resource_type = resource_type
        self.resource_id = resource_id


class AuthenticationRequiredError(ForumError):
    code = "UNAUTHORIZED"
    category = ErrorCategory.AUTHENTICATION
    severity = ErrorSeverity.WARNING
    http_status = 401

    def __init__(self, context: ErrorContext | None = None):
        super().__init__("You must be logged in to perform this action", context)


class DatabaseError(ForumError):
    """Any non-forum failure raised while a handler talked to the store."""

    code = "DATABASE_ERROR"
    category = ErrorCategory.DATABASE
    severity = ErrorSeverity.CRITICAL
    http_status = 503

    def __init__(
        self, message: str, operation: str, context: ErrorContext | None = None,
    ):
        super().__init__(f"Database {operation} failed: {message}", context)
        self.operation = operation
