from __future__ import annotations

from decimal import Decimal, InvalidOperation

from roomfinder_marketing.domain.errors import ValidationError
from roomfinder_marketing.domain.paging import Page, PageRequest
from roomfinder_marketing.domain.post import Post, PostFilters
from roomfinder_marketing.entrypoints.http.dtos.posts import (
    MarketingInfoDTO,
    PostFilterQueryDTO,
    PostPageDTO,
    PostResponseDTO,
)
from roomfinder_marketing.use_cases.get_marketing_info import MarketingInfo


class PostMapper:
    """Maps between REST DTOs and domain models for post listings."""

    @staticmethod
    def to_domain_filters(dto: PostFilterQueryDTO) -> PostFilters:
        """
        Converts query/body criteria to domain filters, handling Decimal conversion.

        Raises:
            ValidationError: If a price cannot be parsed as a decimal
        """
        errors = []
        prices: dict[str, Decimal | None] = {}

        for name, alias in (("price_min", "priceMin"), ("price_max", "priceMax")):
            raw = getattr(dto, name)
            if raw is None or raw == "":
                prices[name] = None
                continue
            try:
                prices[name] = Decimal(raw)
            except InvalidOperation:
                errors.append(
                    {
                        "field": alias,
                        "message": f"Must be a valid decimal: {raw}",
                        "code": "INVALID_DECIMAL",
                    }
                )

        if errors:
            raise ValidationError(errors=errors)

        return PostFilters(
            district=dto.district,
            type=dto.type,
            price_min=prices["price_min"],
            price_max=prices["price_max"],
        )

    @staticmethod
    def to_page_request(page: int, size: int) -> PageRequest:
        return PageRequest(page=page, size=size)

    @staticmethod
    def to_post_response(post: Post) -> PostResponseDTO:
        return PostResponseDTO(
            id=post.id,
            title=post.title,
            description=post.description,
            address=post.address,
            district=post.district,
            type=post.type,
            status=post.status,
            price=str(post.price),  # Decimal → str at boundary
            owner_id=post.owner_id,
            created_at=post.created_at,
            featured=post.featured,
            promotional=post.promotional,
        )

    @staticmethod
    def to_page_response(page: Page[Post]) -> PostPageDTO:
        mapped = page.map(PostMapper.to_post_response)
        return PostPageDTO(
            content=mapped.content,
            page=mapped.page,
            size=mapped.size,
            total_elements=mapped.total_elements,
            total_pages=mapped.total_pages,
        )

    @staticmethod
    def to_marketing_info_response(info: MarketingInfo) -> MarketingInfoDTO:
        return MarketingInfoDTO(
            total_posts=info.total_posts,
            quantity_type_sale_rent=info.rent_posts,
            quantity_type_sale=info.sale_posts,
        )
