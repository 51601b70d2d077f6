"""Pagination - page/limit normalization and page metadata. Pure, no IO.

Invariants:
    - page and limit are always positive integers after normalization
    - Invalid or missing values are replaced by defaults, never rejected
    - last_page == ceil(total / limit); total=0 gives last_page=0
"""

import math
from dataclasses import dataclass

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10


@dataclass(frozen=True)
class PageRequest:
    page: int
    limit: int

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit

    @property
    def take(self) -> int:
        return self.limit


@dataclass(frozen=True)
class PageMeta:
    total: int
    page: int
    limit: int
    last_page: int

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "page": self.page,
            "limit": self.limit,
            "lastPage": self.last_page,
        }


def _positive_or(value: object, default: int) -> int:
    # bool is an int subclass; True must not become page 1
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        return default
    return value


def normalize_page(
    page: object = None, limit: object = None, default_limit: int = DEFAULT_LIMIT,
) -> PageRequest:
    """Coerce raw page/limit input into a valid PageRequest."""
    return PageRequest(
        page=_positive_or(page, DEFAULT_PAGE),
        limit=_positive_or(limit, default_limit),
    )


def build_page_meta(total: int, request: PageRequest) -> PageMeta:
    return PageMeta(
        total=total,
        page=request.page,
        limit=request.limit,
        last_page=math.ceil(total / request.limit),
    )
