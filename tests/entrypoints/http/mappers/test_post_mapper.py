from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Callable

import pytest

from roomfinder_marketing.domain.errors import ValidationError
from roomfinder_marketing.domain.paging import Page
from roomfinder_marketing.domain.post import Post
from roomfinder_marketing.entrypoints.http.dtos.posts import PostFilterQueryDTO
from roomfinder_marketing.entrypoints.http.mappers.post_mapper import PostMapper
from roomfinder_marketing.use_cases.get_marketing_info import MarketingInfo


def test_to_domain_filters_converts_prices_to_decimal() -> None:
    dto = PostFilterQueryDTO(district=3, type=1, price_min="100.50", price_max="200")

    filters = PostMapper.to_domain_filters(dto)

    assert filters.district == 3
    assert filters.type == 1
    assert filters.price_min == Decimal("100.50")
    assert isinstance(filters.price_max, Decimal)
    assert filters.keyword is None
    assert filters.owner_id is None


def test_to_domain_filters_keeps_absent_fields_absent() -> None:
    filters = PostMapper.to_domain_filters(PostFilterQueryDTO())

    assert (filters.district, filters.type, filters.price_min, filters.price_max) == (
        None,
        None,
        None,
        None,
    )


def test_to_domain_filters_reports_bad_decimals() -> None:
    dto = PostFilterQueryDTO.model_construct(
        district=None, type=None, price_min="abc", price_max="1..2"
    )

    with pytest.raises(ValidationError) as exc_info:
        PostMapper.to_domain_filters(dto)

    assert [error["field"] for error in exc_info.value.errors] == ["priceMin", "priceMax"]  # type: ignore[union-attr]


def test_dto_accepts_camel_case_aliases() -> None:
    dto = PostFilterQueryDTO.model_validate({"priceMin": "10", "priceMax": "20"})

    assert (dto.price_min, dto.price_max) == ("10", "20")


def test_to_page_response(post_factory: Callable[..., Post], now: datetime) -> None:
    post = post_factory("p-1", price=Decimal("2500000.00"), created_at=now, featured=True)
    page = Page(content=[post], page=2, size=1, total_elements=3)

    dto = PostMapper.to_page_response(page)
    body = dto.model_dump(mode="json", by_alias=True)

    assert body["page"] == 2
    assert body["totalElements"] == 3
    assert body["totalPages"] == 3
    assert body["content"][0]["id"] == "p-1"
    assert body["content"][0]["price"] == "2500000.00"
    assert body["content"][0]["ownerId"] == "user-1"
    assert body["content"][0]["featured"] is True
    assert "createdAt" in body["content"][0]


def test_to_marketing_info_response() -> None:
    dto = PostMapper.to_marketing_info_response(MarketingInfo(10, 6, 4))

    assert dto.model_dump(by_alias=True) == {
        "totalPosts": 10,
        "quantityTypeSaleRent": 6,
        "quantityTypeSale": 4,
    }
