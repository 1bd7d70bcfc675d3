from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from storefront.utils.grouping import field_getter

_weight = field_getter("weight")
_quantity = field_getter("quantity")


def calculate_total_weight(items: Iterable[Any]) -> float:
    """Total cart weight in kg; a missing or null weight counts as zero."""
    total = 0
    for item in items:
        total += (_weight(item) or 0) * (_quantity(item) or 0)
    return total


def calculate_discount_percentage(original_price: float, discounted_price: float) -> int:
    if original_price <= 0:
        return 0
    pct = (original_price - discounted_price) / original_price * 100
    # half-up, so 12.5 -> 13 and -12.5 -> -12
    return math.floor(pct + 0.5)


@dataclass(frozen=True)
class PaginationInfo:
    page: int
    limit: int
    total: int
    total_pages: int
    has_more: bool
    has_previous: bool
    start_index: int
    end_index: int

    def to_dict(self) -> dict:
        return {
            "page": self.page,
            "limit": self.limit,
            "total": self.total,
            "totalPages": self.total_pages,
            "hasMore": self.has_more,
            "hasPrevious": self.has_previous,
            "startIndex": self.start_index,
            "endIndex": self.end_index,
        }


def get_pagination_info(page: int, limit: int, total: int) -> PaginationInfo:
    # No validation of page/limit; a non-positive limit just means zero pages.
    total_pages = math.ceil(total / limit) if limit > 0 else 0
    return PaginationInfo(
        page=page,
        limit=limit,
        total=total,
        total_pages=total_pages,
        has_more=page < total_pages,
        has_previous=page > 1,
        start_index=(page - 1) * limit + 1,
        end_index=min(page * limit, total),
    )


def _int_arg(raw, default: int) -> int:
    try:
        v = int(str(raw).strip())
    except (TypeError, ValueError):
        return default
    return v if v > 0 else default


def parse_pagination_args(args: Mapping[str, Any], default_limit: int = 20, max_limit: int = 100) -> tuple[int, int]:
    """Read ?page=&limit= from a query mapping, with defaults and a limit cap."""
    page = _int_arg(args.get("page"), 1)
    limit = _int_arg(args.get("limit"), default_limit)
    return page, min(limit, max_limit)
