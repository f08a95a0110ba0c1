"""Tests for the query composer: filters in, predicate set out."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

import pytest

from roomfinder_marketing.domain.post import PostFilters
from roomfinder_marketing.domain.query import (
    DEFAULT_ORDERING,
    SEARCHABLE_FIELDS,
    ActiveWindow,
    ContainsText,
    Equals,
    Range,
    SortKey,
    compose,
)


def test_empty_filters_compose_to_match_all(now: datetime) -> None:
    query = compose(PostFilters(), now)

    assert query.predicates == ()
    assert query.matches_all


@pytest.mark.parametrize("district", [None, 0])
def test_zero_district_is_same_as_absent(district: int | None, now: datetime) -> None:
    assert compose(PostFilters(district=district), now) == compose(PostFilters(), now)


@pytest.mark.parametrize("type_code", [None, 0])
def test_zero_type_is_same_as_absent(type_code: int | None, now: datetime) -> None:
    assert compose(PostFilters(type=type_code), now).predicates == ()


def test_each_present_field_adds_one_predicate(now: datetime) -> None:
    query = compose(
        PostFilters(
            district=7,
            type=2,
            price_min=Decimal("10"),
            price_max=Decimal("20"),
            status="active",
            owner_id="user-9",
            keyword="sunny",
        ),
        now,
    )

    assert query.predicates == (
        Equals("district", 7),
        Equals("type", 2),
        Range("price", lower=Decimal("10"), upper=Decimal("20")),
        Equals("status", "active"),
        Equals("owner_id", "user-9"),
        ContainsText(SEARCHABLE_FIELDS, "sunny"),
    )


def test_half_open_price_range(now: datetime) -> None:
    query = compose(PostFilters(price_max=Decimal("20")), now)

    assert query.predicates == (Range("price", lower=None, upper=Decimal("20")),)


def test_blank_keyword_adds_no_predicate(now: datetime) -> None:
    assert compose(PostFilters(keyword="   "), now).predicates == ()


def test_keyword_is_trimmed_and_searches_all_text_fields(now: datetime) -> None:
    (predicate,) = compose(PostFilters(keyword=" Sunny "), now).predicates

    assert predicate == ContainsText(("title", "description", "address"), "Sunny")


def test_featured_preset_adds_window_at_now(now: datetime) -> None:
    query = compose(PostFilters(featured_only=True), now)

    assert query.predicates == (
        ActiveWindow("featured", "featured_from", "featured_until", now),
    )


def test_promotional_preset_adds_window_at_now(now: datetime) -> None:
    query = compose(PostFilters(promotional_only=True, district=3), now)

    assert query.predicates == (
        Equals("district", 3),
        ActiveWindow("promotional", "promotional_from", "promotional_until", now),
    )


def test_ordering_is_newest_first_with_id_tie_break(now: datetime) -> None:
    query = compose(PostFilters(district=1), now)

    assert query.ordering == DEFAULT_ORDERING
    assert query.ordering == (SortKey("created_at", descending=True), SortKey("id"))
