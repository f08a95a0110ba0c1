from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Callable

from roomfinder_marketing.domain.errors import ValidationError
from roomfinder_marketing.domain.paging import DEFAULT_MAX_PAGE_SIZE, Page, PageRequest
from roomfinder_marketing.domain.post import Post, PostFilters
from roomfinder_marketing.domain.query import compose
from roomfinder_marketing.ports.post_store import PostStore

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True, slots=True)
class ListPostsRequest:
    filters: PostFilters = field(default_factory=PostFilters)
    paging: PageRequest = field(default_factory=PageRequest)


class ListPosts:
    """
    Listing query service.

    Every listing view is a preset of PostFilters run through ``execute``,
    so composition, ordering and page math are identical for all of them.

    Steps per call:
        1. validate filters
        2. compose predicates
        3. normalize paging
        4. count all matches, then fetch one page unless it lies past the end
           (two store calls, no snapshot)
        5. assemble the Page
    """

    def __init__(
        self,
        post_store: PostStore,
        max_page_size: int = DEFAULT_MAX_PAGE_SIZE,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._store = post_store
        self._max_page_size = max_page_size
        self._clock = clock

    def execute(self, request: ListPostsRequest) -> Page[Post]:
        """
        Run one listing query.

        Args:
            request: Filters and raw paging

        Returns:
            Page of posts with exact totals

        Raises:
            FilterValidationError: If filters are invalid
            StoreUnavailableError: If the store fails
        """
        request.filters.validate()

        query = compose(request.filters, now=self._clock())
        paging = request.paging.normalized(self._max_page_size)

        logger.debug(
            "Listing posts",
            extra={
                "predicates": len(query.predicates),
                "page": paging.page,
                "size": paging.size,
            },
        )

        total = self._store.count(query)

        # Past the last page: no fetch, so an unbounded offset never reaches the store
        if total == 0 or paging.skip >= total:
            return Page.build([], paging, total)

        posts = self._store.find(query, skip=paging.skip, limit=paging.limit)

        return Page.build(posts, paging, total)

    # ------------------------------------------------------------------
    # Named views
    # ------------------------------------------------------------------

    def list_all(self, paging: PageRequest) -> Page[Post]:
        return self.execute(ListPostsRequest(PostFilters(), paging))

    def list_featured(self, paging: PageRequest) -> Page[Post]:
        return self.execute(ListPostsRequest(PostFilters(featured_only=True), paging))

    def list_promotional(self, paging: PageRequest) -> Page[Post]:
        return self.execute(ListPostsRequest(PostFilters(promotional_only=True), paging))

    def list_by_district(self, district: int, paging: PageRequest) -> Page[Post]:
        return self.execute(ListPostsRequest(PostFilters(district=district), paging))

    def list_by_type(self, type_code: int, paging: PageRequest) -> Page[Post]:
        return self.execute(ListPostsRequest(PostFilters(type=type_code), paging))

    def list_by_user(self, owner_id: str, status: str | None, paging: PageRequest) -> Page[Post]:
        """
        Posts owned by the caller with the given status.

        Raises:
            ValidationError: If owner_id or status is missing
        """
        if not owner_id:
            raise ValidationError(
                errors=[{"field": "ownerId", "message": "Required", "code": "MISSING"}]
            )
        if not status:
            raise ValidationError(
                errors=[{"field": "status", "message": "Required", "code": "MISSING"}]
            )

        return self.execute(
            ListPostsRequest(PostFilters(owner_id=owner_id, status=status), paging)
        )

    def filter(self, criteria: PostFilters, paging: PageRequest) -> Page[Post]:
        # Callers cannot reach presets or impersonate an owner through criteria
        criteria = replace(
            criteria, owner_id=None, featured_only=False, promotional_only=False
        )
        return self.execute(ListPostsRequest(criteria, paging))

    def search(
        self, keyword: str | None, criteria: PostFilters, paging: PageRequest
    ) -> Page[Post]:
        criteria = replace(
            criteria,
            keyword=keyword,
            owner_id=None,
            featured_only=False,
            promotional_only=False,
        )
        return self.execute(ListPostsRequest(criteria, paging))
