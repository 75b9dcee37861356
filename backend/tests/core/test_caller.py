"""Caller Identity — verifies anonymous and authenticated contexts."""

from qa_forum.core.caller import AuthenticatedContext, CallerContext, SessionUser
from qa_forum.core.domain_types import UserId


def test_anonymous_context_has_no_user_id():
    assert CallerContext().user_id is None


def test_context_exposes_user_id():
    assert CallerContext(user=SessionUser(id=UserId(5))).user_id == 5


def test_authenticated_context_user_id():
    ctx = AuthenticatedContext(user=SessionUser(id=UserId(42)))
    assert ctx.user_id == 42
