"""Error Hierarchy — verifies codes, statuses and the REST envelope."""

from qa_forum.core.errors import (
    AuthenticationRequiredError, DatabaseError, ErrorCategory, ErrorContext,
    ForumError, ResourceNotFoundError,
)


def test_not_found_is_404():
    err = ResourceNotFoundError("Question", 7)
    assert err.http_status == 404
    assert err.code == "RESOURCE_NOT_FOUND"
    assert err.message == "Question '7' not found"
    assert isinstance(err, ForumError)


def test_database_error_is_503_and_keeps_operation():
    err = DatabaseError("Integrity constraint violated", "upsert_question")
    assert err.http_status == 503
    assert err.category == ErrorCategory.DATABASE
    assert err.operation == "upsert_question"
    assert "upsert_question" in err.message


def test_authentication_required_is_401():
    assert AuthenticationRequiredError().http_status == 401


def test_to_response_envelope():
    err = ResourceNotFoundError(
        "Question", 3, ErrorContext(question_id=3, operation="get_question_detail"),
    )
    body = err.to_response()["error"]
    assert body["code"] == "RESOURCE_NOT_FOUND"
    assert body["category"] == "resource_not_found"
    assert body["severity"] == "error"
    assert body["context"] == {
        "question_id": 3, "operation": "get_question_detail",
    }
    assert "timestamp" in body


def test_to_response_omits_caller_identity():
    err = DatabaseError(
        "Connection or operational error", "delete_question",
        ErrorContext(question_id=3, user_id=42),
    )
    body = err.to_response()["error"]
    assert "user_id" not in body["context"]
    assert body["severity"] == "critical"
