"""Question Shaping — turns loaded records into API-friendly mappings.

Invariants:
    - Join wrappers (tag-on-question, comment-on-question) never reach the API;
      only their payload does
    - Rank keys are always heart_count / answer_count, whatever the period
    - A missing rank row yields None for both counts, never a missing key

Design Decisions:
    - Pure functions over attribute access: works on ORM rows and on plain
      stand-ins alike, no session or IO needed
"""

from typing import Any, Iterable

from qa_forum.core.domain_types import MetricTimeframe, rank_columns_for


def unwrap(joins: Iterable[Any], attribute: str) -> list[Any]:
    """Replace each join row with the payload stored under `attribute`."""
    return [getattr(join, attribute) for join in joins]


def project_tag(tag: Any) -> dict:
    return {"id": tag.id, "name": tag.name}


def flatten_tags(tag_joins: Iterable[Any]) -> list[dict]:
    """Tag-on-question rows -> [{id, name}]."""
    return [project_tag(tag) for tag in unwrap(tag_joins, "tag")]


def canonical_rank(rank: Any | None, period: MetricTimeframe) -> dict:
    """Read the period-suffixed rank columns under period-agnostic keys."""
    columns = rank_columns_for(period)
    if rank is None:
        return {"heart_count": None, "answer_count": None}
    return {
        "heart_count": getattr(rank, columns.heart_count),
        "answer_count": getattr(rank, columns.answer_count),
    }


def project_reaction(reaction: Any) -> dict:
    return {
        "id": reaction.id,
        "user_id": reaction.user_id,
        "reaction": reaction.reaction,
    }
