"""API Dependencies — caller identity and handler wiring for route functions.

Invariants:
    - Caller identity comes from the X-User-Id header set by the authenticating gateway
    - require_caller never returns a context without a user

Design Decisions:
    - Header over session cookies: authentication lives in front of this service
      (ADR: auth is out of scope here; identity is trusted, not verified)
"""

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from qa_forum.core.caller import AuthenticatedContext, CallerContext, SessionUser
from qa_forum.core.domain_types import UserId
from qa_forum.core.errors import AuthenticationRequiredError
from qa_forum.infrastructure.database import get_db
from qa_forum.services.handle_questions import QuestionHandlers


async def get_caller_context(
    x_user_id: int | None = Header(None, alias="X-User-Id", gt=0),
) -> CallerContext:
    if x_user_id is None:
        return CallerContext()
    return CallerContext(user=SessionUser(id=UserId(x_user_id)))


async def require_caller(
    ctx: CallerContext = Depends(get_caller_context),
) -> AuthenticatedContext:
    if ctx.user is None:
        raise AuthenticationRequiredError()
    return AuthenticatedContext(user=ctx.user)


async def get_question_handlers(
    db: AsyncSession = Depends(get_db),
) -> QuestionHandlers:
    return QuestionHandlers(db)
