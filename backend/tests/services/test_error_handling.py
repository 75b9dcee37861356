"""Error Boundary — verifies failure canonicalization.

Tests cover:
    - ForumError passes through throw_db_error unchanged
    - SQLAlchemy and arbitrary exceptions become DatabaseError
    - db_error_boundary re-raises NotFound untouched and chains the original cause
"""

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from qa_forum.core.errors import (
    DatabaseError, ErrorContext, ResourceNotFoundError,
)
from qa_forum.services.error_handling import (
    db_error_boundary, throw_db_error, throw_not_found_error,
)


def test_forum_error_passes_through():
    err = ResourceNotFoundError("Question", 1)
    assert throw_db_error(err) is err


def test_integrity_error_becomes_database_error():
    raw = IntegrityError("INSERT INTO tags", {}, Exception("duplicate key"))
    err = throw_db_error(raw, "upsert_question")
    assert isinstance(err, DatabaseError)
    assert err.operation == "upsert_question"
    assert "Integrity constraint violated" in err.message
    assert "duplicate key" not in err.message


def test_operational_error_becomes_database_error():
    raw = OperationalError("SELECT 1", {}, Exception("connection refused"))
    err = throw_db_error(raw, "get_questions")
    assert isinstance(err, DatabaseError)
    assert "Connection" in err.message


def test_unknown_error_becomes_database_error():
    err = throw_db_error(RuntimeError("boom"), "delete_question")
    assert isinstance(err, DatabaseError)
    assert "boom" not in err.message


def test_context_records_operation_on_a_copy():
    ctx = ErrorContext(question_id=4, user_id=9)
    err = throw_db_error(RuntimeError("boom"), "set_question_answer", ctx)
    assert err.context is not ctx
    assert err.context.operation == "set_question_answer"
    assert err.context.question_id == 4
    assert err.context.user_id == 9
    assert ctx.operation is None


def test_throw_not_found_error_defaults_to_question():
    err = throw_not_found_error(resource_id=12)
    assert isinstance(err, ResourceNotFoundError)
    assert err.resource_type == "Question"
    assert err.resource_id == 12


async def test_boundary_wraps_and_chains():
    original = RuntimeError("socket closed")
    with pytest.raises(DatabaseError) as info:
        async with db_error_boundary("get_questions"):
            raise original
    assert info.value.__cause__ is original


async def test_boundary_keeps_not_found():
    with pytest.raises(ResourceNotFoundError):
        async with db_error_boundary("get_question_detail"):
            raise ResourceNotFoundError("Question", 1)


async def test_boundary_is_transparent_on_success():
    async with db_error_boundary("get_questions"):
        value = 1
    assert value == 1
