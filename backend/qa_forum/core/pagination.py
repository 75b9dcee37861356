"""Pagination — page/limit arithmetic shared by list endpoints.

Invariants:
    - page is 1-based; skip = (page - 1) * limit
    - total_pages is ceil(total_items / limit), 0 when there are no items
"""

import math
from typing import Any


def get_pagination(limit: int, page: int | None) -> tuple[int, int]:
    """Return (take, skip) for a 1-based page."""
    take = limit
    skip = (page - 1) * limit if page else 0
    return take, skip


def get_paging_data(
    items: list[Any], total_items: int, limit: int, page: int | None,
) -> dict:
    return {
        "items": items,
        "total_items": total_items,
        "current_page": page or 1,
        "page_size": limit,
        "total_pages": math.ceil(total_items / limit) if limit else 0,
    }
