"""Comment ORM — comments and their attachment to questions.

Invariants:
    - CommentV2 is authored by a User
    - QuestionComment links one comment to one question; the API only ever
      sees the inner comment

Design Decisions:
    - Join entity instead of a question_id column on CommentV2: the same comment
      model is reused by other commentable entities
"""

from datetime import datetime, timezone

from sqlalchemy import Boolean, Text, Integer, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from qa_forum.db.base import Base


class CommentV2(Base):
    """A comment body."""
    __tablename__ = "comments_v2"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=False,
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)
    nsfw: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    tos_violation: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    user: Mapped["User"] = relationship("User")


class QuestionComment(Base):
    """Join entity between Question and CommentV2."""
    __tablename__ = "question_comments"

    question_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("questions.id", ondelete="CASCADE"), primary_key=True,
    )
    comment_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("comments_v2.id", ondelete="CASCADE"), primary_key=True,
    )

    question: Mapped["Question"] = relationship(
        "Question", back_populates="comments",
    )
    comment: Mapped["CommentV2"] = relationship("CommentV2")
