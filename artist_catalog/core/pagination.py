"""Pagination — pure page/offset arithmetic for list responses.

Invariants:
    - page and limit are >= 1 (enforced at the API boundary)
    - offset = (page - 1) * limit
    - total_pages = ceil(total / limit); 0 when total is 0
    - has_next iff total > page * limit; has_prev iff page > 1
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class PageSummary:
    page: int
    limit: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool


def page_offset(page: int, limit: int) -> int:
    return (page - 1) * limit


def summarize_page(page: int, limit: int, total: int) -> PageSummary:
    """Build the navigation summary for one page of a filtered set."""
    total_pages = math.ceil(total / limit) if total else 0
    return PageSummary(
        page=page,
        limit=limit,
        total=total,
        total_pages=total_pages,
        has_next=total > page * limit,
        has_prev=page > 1,
    )
