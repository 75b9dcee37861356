"""QuestionRank ORM — denormalized popularity aggregates, one row per question.

Invariants:
    - Primary key is question_id (one rank row per question)
    - Every MetricTimeframe has a heart_count_<period> and answer_count_<period> column
      (see core.domain_types.RANK_COLUMNS)

Design Decisions:
    - Written by the ranking job, read-only for the API
    - Wide table over (question, period) rows: list queries order by one column
"""

from sqlalchemy import Integer, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from qa_forum.db.base import Base


class QuestionRank(Base):
    """Per-period heart and answer counts for a question."""
    __tablename__ = "question_ranks"

    question_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("questions.id", ondelete="CASCADE"), primary_key=True,
    )

    heart_count_day: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    heart_count_week: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    heart_count_month: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    heart_count_year: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    heart_count_all_time: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0,
    )

    answer_count_day: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    answer_count_week: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    answer_count_month: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    answer_count_year: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    answer_count_all_time: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0,
    )

    question: Mapped["Question"] = relationship(
        "Question", back_populates="rank",
    )
