"""Question ORM — the aggregate root of the Q&A feature.

Invariants:
    - Always owned by a User (user_id FK)
    - selected_answer_id, when set, points at an Answer of this question
      (checked by the service; no FK because answers reference questions)
    - Tags attach through TagsOnQuestions; at most one link per (question, tag)
    - At most one QuestionRank row per question

Design Decisions:
    - Relationships default to lazy loading; every query states what it needs
      through loader options (ADR: no implicit IO in async context)
    - cascade delete for tag links, rank, reactions, comment links and answers
"""

from datetime import datetime, timezone

from sqlalchemy import String, Text, Integer, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from qa_forum.db.base import Base


class Question(Base):
    """Question aggregate root — owns tags links, rank, reactions, comments, answers."""
    __tablename__ = "questions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=False, index=True,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False, default="")
    selected_answer_id: Mapped[int | None] = mapped_column(
        Integer, nullable=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    # Relationships
    user: Mapped["User"] = relationship("User")
    tags: Mapped[list["TagsOnQuestions"]] = relationship(
        "TagsOnQuestions", back_populates="question",
        cascade="all, delete-orphan",
    )
    rank: Mapped["QuestionRank"] = relationship(
        "QuestionRank", back_populates="question", uselist=False,
        cascade="all, delete-orphan",
    )
    reactions: Mapped[list["QuestionReaction"]] = relationship(
        "QuestionReaction", back_populates="question",
        cascade="all, delete-orphan",
    )
    comments: Mapped[list["QuestionComment"]] = relationship(
        "QuestionComment", back_populates="question",
        cascade="all, delete-orphan",
    )
    answers: Mapped[list["Answer"]] = relationship(
        "Answer", back_populates="question",
        cascade="all, delete-orphan",
    )


class TagsOnQuestions(Base):
    """Join entity between Question and Tag."""
    __tablename__ = "tags_on_questions"

    question_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("questions.id", ondelete="CASCADE"), primary_key=True,
    )
    tag_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("tags.id", ondelete="CASCADE"), primary_key=True,
    )

    question: Mapped["Question"] = relationship(
        "Question", back_populates="tags",
    )
    tag: Mapped["Tag"] = relationship("Tag")
