"""Filter Composer - folds independent predicate terms into one conjunctive query filter.

Invariants:
    - PURE: builds a store-agnostic description; infrastructure/ translates it to SQL
    - ActiveTerm(True) is always present for list queries
    - An absent input contributes no term (no vacuous true/false terms)
    - Terms are deduplicated; the filter is the AND of its distinct terms
    - The explicit group filter and the resolved scope are both applied as
      GroupTerms, so a forced ADMIN scope can only narrow, never widen, a query
    - Ordering defaults to newest first (created_at DESC)

Design Decisions:
    - Frozen term dataclasses: hashable, so dedup is structural and a LEADER's
      scope (equal to its explicit filter) collapses into one term
    - Builder accumulates then folds once in build()
"""

from dataclasses import dataclass
from typing import Union

from neighborhood.core.domain_types import GroupId
from neighborhood.core.pagination import PageRequest, normalize_page, DEFAULT_LIMIT
from neighborhood.core.scope_resolver import GroupScope


# ─── Terms ───────────────────────────────────────────────────────

@dataclass(frozen=True)
class ActiveTerm:
    is_active: bool = True


@dataclass(frozen=True)
class SearchTerm:
    """Case-insensitive substring match on full name OR email."""
    text: str


@dataclass(frozen=True)
class RoleTerm:
    role_name: str


@dataclass(frozen=True)
class GroupTerm:
    group_id: GroupId


FilterTerm = Union[ActiveTerm, SearchTerm, RoleTerm, GroupTerm]


@dataclass(frozen=True)
class QueryFilter:
    terms: tuple[FilterTerm, ...]

    def of_type(self, term_type: type) -> list:
        return [t for t in self.terms if isinstance(t, term_type)]


@dataclass(frozen=True)
class OrderBy:
    field: str = "created_at"
    descending: bool = True


NEWEST_FIRST = OrderBy()


@dataclass(frozen=True)
class ComposedQuery:
    filter: QueryFilter
    page: PageRequest
    order_by: OrderBy = NEWEST_FIRST


# ─── Builder ─────────────────────────────────────────────────────

class FilterBuilder:
    """Accumulates distinct terms in insertion order."""

    def __init__(self):
        self._terms: dict[FilterTerm, None] = {}

    def add(self, term: FilterTerm | None) -> "FilterBuilder":
        if term is not None:
            self._terms.setdefault(term, None)
        return self

    def build(self) -> QueryFilter:
        return QueryFilter(tuple(self._terms))


def search_term(text: str | None) -> SearchTerm | None:
    if text is None or not text.strip():
        return None
    return SearchTerm(text.strip())


def role_term(role_name: str | None) -> RoleTerm | None:
    return RoleTerm(role_name) if role_name else None


def group_term(group_id: GroupId | None) -> GroupTerm | None:
    return GroupTerm(group_id) if group_id is not None else None


def compose(
    scope: GroupScope,
    search: str | None = None,
    role_name: str | None = None,
    explicit_group_id: GroupId | None = None,
    page: object = None,
    limit: object = None,
    default_limit: int = DEFAULT_LIMIT,
) -> ComposedQuery:
    """Compose the list filter and paging window for one request."""
    query_filter = (
        FilterBuilder()
        .add(ActiveTerm(True))
        .add(search_term(search))
        .add(role_term(role_name))
        .add(group_term(explicit_group_id))
        .add(group_term(scope.group_id))
        .build()
    )
    return ComposedQuery(
        filter=query_filter,
        page=normalize_page(page, limit, default_limit),
    )
