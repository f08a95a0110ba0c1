from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum, IntEnum

from roomfinder_marketing.domain.errors import FilterValidationError


class PostStatus(str, Enum):
    ACTIVE = "active"
    EXPIRED = "expired"
    SOLD = "sold"
    PENDING = "pending"
    HIDDEN = "hidden"


class PostType(IntEnum):
    RENT = 1
    SALE = 2


@dataclass(frozen=True)
class Post:
    id: str
    title: str
    district: int
    type: int
    status: str
    price: Decimal
    owner_id: str
    created_at: datetime
    description: str = ""
    address: str = ""
    featured: bool = False
    featured_from: datetime | None = None
    featured_until: datetime | None = None
    promotional: bool = False
    promotional_from: datetime | None = None
    promotional_until: datetime | None = None


@dataclass(frozen=True, slots=True)
class PostFilters:
    """
    Which posts the caller wants.

    Every field is optional and an all-empty instance matches everything.
    ``district`` and ``type`` of 0 mean "no restriction", exactly like None:
    primitive query parameters cannot tell an omitted code from a zero one.

    ``owner_id``, ``featured_only`` and ``promotional_only`` are never set from
    request input; listing presets fill them in.
    """

    district: int | None = None
    type: int | None = None
    price_min: Decimal | None = None
    price_max: Decimal | None = None
    status: str | None = None
    keyword: str | None = None
    owner_id: str | None = None
    featured_only: bool = False
    promotional_only: bool = False

    def validate(self) -> None:
        """
        Validate filter parameters.

        Raises:
            FilterValidationError: If filter parameters are invalid
        """
        if self.price_min is not None and not isinstance(self.price_min, Decimal):
            raise FilterValidationError(
                "price_min must be Decimal or None (no floats past the boundary)"
            )
        if self.price_max is not None and not isinstance(self.price_max, Decimal):
            raise FilterValidationError(
                "price_max must be Decimal or None (no floats past the boundary)"
            )

        if (
            self.price_min is not None
            and self.price_max is not None
            and self.price_min > self.price_max
        ):
            raise FilterValidationError(
                errors=[
                    {
                        "field": "priceMin",
                        "message": "Must be less than or equal to priceMax",
                        "code": "INVALID_RANGE",
                    }
                ]
            )

        if self.status is not None and self.status not in _STATUS_VALUES:
            raise FilterValidationError(
                errors=[
                    {
                        "field": "status",
                        "message": f"Must be one of {sorted(_STATUS_VALUES)}",
                        "code": "INVALID_VALUE",
                    }
                ]
            )

    @property
    def search_text(self) -> str | None:
        """Keyword with surrounding whitespace removed; None when blank."""
        if self.keyword is None:
            return None
        text = self.keyword.strip()
        return text or None


_STATUS_VALUES = frozenset(status.value for status in PostStatus)
