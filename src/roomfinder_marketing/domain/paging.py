from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Callable, Generic, TypeVar

from roomfinder_marketing.domain.errors import PagingValidationError

T = TypeVar("T")
U = TypeVar("U")

DEFAULT_MAX_PAGE_SIZE = 100


@dataclass(frozen=True, slots=True)
class PageRequest:
    """
    1-based page request as received from the caller.

    Raw values may be zero, negative or huge; ``normalized()`` turns them into
    usable bounds instead of rejecting them.
    """

    page: int = 1
    size: int = 10

    def normalized(self, max_size: int = DEFAULT_MAX_PAGE_SIZE) -> PageRequest:
        """
        Clamp page to >= 1 and size to [1, max_size].

        Raises:
            PagingValidationError: If max_size itself is not positive
        """
        if max_size < 1:
            raise PagingValidationError("max_size must be >= 1")

        return PageRequest(
            page=max(self.page, 1),
            size=min(max(self.size, 1), max_size),
        )

    @property
    def skip(self) -> int:
        return (max(self.page, 1) - 1) * max(self.size, 1)

    @property
    def limit(self) -> int:
        return max(self.size, 1)


def total_pages(total_elements: int, size: int) -> int:
    """ceil(total / size); 0 when nothing matched."""
    if total_elements <= 0:
        return 0
    return math.ceil(total_elements / size)


@dataclass(frozen=True)
class Page(Generic[T]):
    content: list[T] = field(default_factory=list)
    page: int = 1
    size: int = 10
    total_elements: int = 0

    @property
    def total_pages(self) -> int:
        return total_pages(self.total_elements, self.size)

    @classmethod
    def build(cls, content: list[T], request: PageRequest, total_elements: int) -> Page[T]:
        """
        Assemble a page from one fetched slice and the matching-record count.

        ``request`` must already be normalized. A page past the end is not an
        error: it comes back empty with the true totals.
        """
        return cls(
            content=list(content[: request.size]),
            page=request.page,
            size=request.size,
            total_elements=max(total_elements, 0),
        )

    def map(self, fn: Callable[[T], U]) -> Page[U]:
        return Page(
            content=[fn(item) for item in self.content],
            page=self.page,
            size=self.size,
            total_elements=self.total_elements,
        )
