"""Predicate vocabulary and the composer that builds it from PostFilters.

The composer only describes a query. Store adapters decide how to run it,
which keeps composition testable without any storage.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Union

from roomfinder_marketing.domain.post import PostFilters

SEARCHABLE_FIELDS: tuple[str, ...] = ("title", "description", "address")


@dataclass(frozen=True, slots=True)
class Equals:
    field: str
    value: object


@dataclass(frozen=True, slots=True)
class Range:
    """Inclusive range; a None bound is open on that side."""

    field: str
    lower: Decimal | None = None
    upper: Decimal | None = None


@dataclass(frozen=True, slots=True)
class ContainsText:
    """Case-insensitive substring match on any of ``fields``."""

    fields: tuple[str, ...]
    text: str


@dataclass(frozen=True, slots=True)
class ActiveWindow:
    """``flag`` is set and ``starts <= at < ends``; missing bounds are open."""

    flag: str
    starts: str
    ends: str
    at: datetime


Predicate = Union[Equals, Range, ContainsText, ActiveWindow]


@dataclass(frozen=True, slots=True)
class SortKey:
    field: str
    descending: bool = False


# created_at alone is not unique; id breaks ties so page splits are stable
DEFAULT_ORDERING: tuple[SortKey, ...] = (
    SortKey("created_at", descending=True),
    SortKey("id"),
)


@dataclass(frozen=True, slots=True)
class PostQuery:
    """Conjunction of predicates plus the ordering to read them in."""

    predicates: tuple[Predicate, ...] = ()
    ordering: tuple[SortKey, ...] = DEFAULT_ORDERING

    @property
    def matches_all(self) -> bool:
        return not self.predicates


def _code_is_set(code: int | None) -> bool:
    # 0 and None both mean "no restriction"
    return bool(code)


def compose(filters: PostFilters, now: datetime) -> PostQuery:
    """
    Translate filters into an AND of independent predicates.

    Absent fields contribute no predicate at all. ``now`` anchors the
    featured/promotional windows so callers control the clock.
    """
    predicates: list[Predicate] = []

    if _code_is_set(filters.district):
        predicates.append(Equals("district", filters.district))
    if _code_is_set(filters.type):
        predicates.append(Equals("type", filters.type))

    if filters.price_min is not None or filters.price_max is not None:
        predicates.append(Range("price", lower=filters.price_min, upper=filters.price_max))

    if filters.status:
        predicates.append(Equals("status", filters.status))
    if filters.owner_id:
        predicates.append(Equals("owner_id", filters.owner_id))

    text = filters.search_text
    if text is not None:
        predicates.append(ContainsText(SEARCHABLE_FIELDS, text))

    if filters.featured_only:
        predicates.append(ActiveWindow("featured", "featured_from", "featured_until", now))
    if filters.promotional_only:
        predicates.append(
            ActiveWindow("promotional", "promotional_from", "promotional_until", now)
        )

    return PostQuery(predicates=tuple(predicates))
