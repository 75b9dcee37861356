"""Forum Vocabulary — ids, sort and filter enums, and the rank column table.

Invariants:
    - QuestionId, AnswerId, UserId, TagId, CommentId wrap ints — never use bare int in domain logic
    - Every MetricTimeframe has exactly one RankColumns entry
    - Detail views never carry more than QUESTION_DETAIL_COMMENT_LIMIT comments

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
    - Rank storage columns resolved through a lookup table, not string concatenation
      (ADR: every period is spelled out once; a typo fails at import, not at query time)
"""

from enum import Enum
from typing import NamedTuple, NewType


# ─── Identity Types ──────────────────────────────────────────────

QuestionId = NewType("QuestionId", int)
AnswerId = NewType("AnswerId", int)
UserId = NewType("UserId", int)
TagId = NewType("TagId", int)
CommentId = NewType("CommentId", int)


# ─── Limits ──────────────────────────────────────────────────────

QUESTION_DETAIL_COMMENT_LIMIT = 5


# ─── Enums ───────────────────────────────────────────────────────

class MetricTimeframe(str, Enum):
    """Time window used to pick which rank aggregate to read."""
    DAY = "Day"
    WEEK = "Week"
    MONTH = "Month"
    YEAR = "Year"
    ALL_TIME = "AllTime"


class QuestionSort(str, Enum):
    """List ordering — MostLiked reads the period's heart count."""
    MOST_LIKED = "MostLiked"
    NEWEST = "Newest"


class QuestionStatus(str, Enum):
    """Answered = a selected answer is set."""
    ANSWERED = "Answered"
    PENDING = "Pending"


class ReviewReaction(str, Enum):
    """Per-user reaction markers on a question."""
    LIKE = "Like"
    DISLIKE = "Dislike"
    LAUGH = "Laugh"
    CRY = "Cry"
    HEART = "Heart"


# ─── Rank Columns ────────────────────────────────────────────────

class RankColumns(NamedTuple):
    """Storage attribute names of the two rank aggregates for one period."""
    heart_count: str
    answer_count: str


RANK_COLUMNS: dict[MetricTimeframe, RankColumns] = {
    MetricTimeframe.DAY: RankColumns("heart_count_day", "answer_count_day"),
    MetricTimeframe.WEEK: RankColumns("heart_count_week", "answer_count_week"),
    MetricTimeframe.MONTH: RankColumns("heart_count_month", "answer_count_month"),
    MetricTimeframe.YEAR: RankColumns("heart_count_year", "answer_count_year"),
    MetricTimeframe.ALL_TIME: RankColumns(
        "heart_count_all_time", "answer_count_all_time",
    ),
}


def rank_columns_for(period: MetricTimeframe) -> RankColumns:
    """Storage columns holding the rank aggregates for `period`."""
    return RANK_COLUMNS[MetricTimeframe(period)]
