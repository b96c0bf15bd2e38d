"""
Page/limit windowing over an in-memory record list.

Page numbers are 1-based. Degenerate inputs never raise:
- limit <= 0 returns every record as a single page 1
- page <= 0 is treated as page 1
- a page past the end returns an empty data list
"""

from __future__ import annotations

import math
from typing import Any, Sequence

from src.integrations.contracts.reviews import PaginatedResult


def paginate(records: Sequence[Any], page: int, limit: int) -> PaginatedResult:
    total_items = len(records)

    if limit <= 0:
        return PaginatedResult(
            total_items=total_items,
            total_pages=1 if total_items else 0,
            current_page=1,
            data=list(records),
        )

    page = max(page, 1)
    start = (page - 1) * limit
    end = min(total_items, start + limit)

    return PaginatedResult(
        total_items=total_items,
        total_pages=math.ceil(total_items / limit),
        current_page=page,
        data=list(records[start:end]),
    )
