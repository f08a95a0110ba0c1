from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

PRICE_PATTERN = r"^\d+(\.\d{1,2})?$"


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PostResponseDTO(CamelModel):
    id: str
    title: str
    description: str
    address: str
    district: int
    type: int
    status: str
    price: str
    owner_id: str
    created_at: datetime
    featured: bool
    promotional: bool


class PostPageDTO(CamelModel):
    content: list[PostResponseDTO]
    page: int
    size: int
    total_elements: int
    total_pages: int

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "content": [],
                "page": 1,
                "size": 10,
                "totalElements": 3,
                "totalPages": 1,
            }
        },
    )


class PostFilterQueryDTO(CamelModel):
    """Criteria accepted by the filter and search endpoints."""

    district: int | None = Field(
        default=None,
        description="District code; 0 or omitted means any district",
        examples=[7],
    )
    type: int | None = Field(
        default=None,
        description="Listing type code; 0 or omitted means any type",
        examples=[1],
    )
    price_min: str | None = Field(
        default=None,
        description="Minimum price (inclusive, decimal as string)",
        examples=["1500000.00"],
        pattern=PRICE_PATTERN,
    )
    price_max: str | None = Field(
        default=None,
        description="Maximum price (inclusive, decimal as string)",
        examples=["5000000.00"],
        pattern=PRICE_PATTERN,
    )


class SearchPostRequestDTO(PostFilterQueryDTO):
    """Body of POST /post/searching."""

    keyword: str | None = Field(
        default=None,
        description="Case-insensitive substring of title, description or address",
        examples=["sunny"],
        max_length=200,
    )

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "keyword": "sunny",
                "district": 7,
                "type": 1,
                "priceMin": "1500000.00",
                "priceMax": "5000000.00",
            }
        },
    )


class MarketingInfoDTO(CamelModel):
    total_posts: int
    quantity_type_sale_rent: int
    quantity_type_sale: int
