"""QuestionReaction ORM — one emoji/vote marker by one user on one question.

Invariants:
    - reaction is a ReviewReaction value
    - A user holds each reaction kind at most once per question
"""

from datetime import datetime, timezone

from sqlalchemy import String, Integer, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from qa_forum.db.base import Base


class QuestionReaction(Base):
    """User reaction on a question."""
    __tablename__ = "question_reactions"
    __table_args__ = (
        UniqueConstraint(
            "question_id", "user_id", "reaction",
            name="uq_question_reactions_question_user_reaction",
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    question_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("questions.id", ondelete="CASCADE"), nullable=False,
    )
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False,
    )
    reaction: Mapped[str] = mapped_column(String(20), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    question: Mapped["Question"] = relationship(
        "Question", back_populates="reactions",
    )
