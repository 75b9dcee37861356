"""Error Boundary — canonicalizes service failures into the forum error taxonomy.

Invariants:
    - ForumError instances pass through unchanged (a NotFound stays a NotFound)
    - Every other exception becomes DatabaseError; the original is chained as __cause__
    - Each failure is logged once, here, with operation and error_code extras

Design Decisions:
    - One async context manager applied at every handler call site instead of
      per-handler try/except blocks (ADR: uniform error normalization)
    - User-facing messages are generic; driver text goes to the log only
"""

import logging
from contextlib import asynccontextmanager
from dataclasses import replace
from typing import AsyncGenerator

from sqlalchemy.exc import DBAPIError, IntegrityError, OperationalError

from qa_forum.core.errors import (
    DatabaseError, ErrorContext, ForumError, ResourceNotFoundError,
)

logger = logging.getLogger(__name__)


def throw_db_error(
    error: Exception, operation: str = "query", context: ErrorContext | None = None,
) -> ForumError:
    """Map a raw failure to the error the caller should raise."""
    if isinstance(error, ForumError):
        return error

    if isinstance(error, IntegrityError):
        message = "Integrity constraint violated"
    elif isinstance(error, OperationalError):
        message = "Connection or operational error"
    elif isinstance(error, DBAPIError):
        message = "Database driver error"
    else:
        message = "An unexpected error occurred, please try again later"

    ctx = replace(context or ErrorContext(), operation=operation)
    logger.error(
        f"Database {operation} failed: {error}",
        exc_info=error,
        extra={
            "operation": operation,
            "error_code": "DATABASE_ERROR",
            "question_id": ctx.question_id,
            "user_id": ctx.user_id,
        },
    )
    return DatabaseError(message, operation, ctx)


def throw_not_found_error(
    resource_type: str = "Question",
    resource_id: object = None,
    context: ErrorContext | None = None,
) -> ResourceNotFoundError:
    return ResourceNotFoundError(resource_type, resource_id, context)


@asynccontextmanager
async def db_error_boundary(
    operation: str, context: ErrorContext | None = None,
) -> AsyncGenerator[None, None]:
    """Run the enclosed service call; re-raise failures as forum errors."""
    try:
        yield
    except ForumError:
        raise
    except Exception as e:
        raise throw_db_error(e, operation, context) from e
