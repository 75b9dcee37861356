"""Caller Identity — who is making the request, as seen by the handlers.

Invariants:
    - CallerContext.user is None for anonymous callers
    - AuthenticatedContext.user is never None (enforced where it is built, not by handlers)

Design Decisions:
    - Two types instead of one nullable field: handlers that need a caller take
      AuthenticatedContext, so the precondition is part of the signature
"""

from dataclasses import dataclass

from qa_forum.core.domain_types import UserId


@dataclass(frozen=True)
class SessionUser:
    """Identity of the requesting user, as asserted by the gateway."""
    id: UserId


@dataclass(frozen=True)
class CallerContext:
    """Request context with an optional user."""
    user: SessionUser | None = None

    @property
    def user_id(self) -> UserId | None:
        return self.user.id if self.user else None


@dataclass(frozen=True)
class AuthenticatedContext:
    """Request context whose user is known."""
    user: SessionUser

    @property
    def user_id(self) -> UserId:
        return self.user.id
