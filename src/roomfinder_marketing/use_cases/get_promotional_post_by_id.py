"""Get a post by ID, only while its promotional window is open."""

from __future__ import annotations

from datetime import datetime
from typing import Callable

from roomfinder_marketing.domain.errors import NotFoundError, ValidationError
from roomfinder_marketing.domain.post import Post, PostFilters
from roomfinder_marketing.domain.query import Equals, PostQuery, compose
from roomfinder_marketing.ports.post_store import PostStore
from roomfinder_marketing.use_cases.get_post_by_id import GetPostByIdRequest
from roomfinder_marketing.use_cases.list_posts import utc_now


class GetPromotionalPostById:
    """
    Read a single post through the promotional view.

    The post must exist and be inside its promotional window at the clock
    time; anything else is a NotFoundError, same as an unknown id.
    """

    def __init__(
        self,
        post_store: PostStore,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._store = post_store
        self._clock = clock

    def execute(self, request: GetPostByIdRequest) -> Post:
        """
        Raises:
            ValidationError: If post_id is blank
            NotFoundError: If no promoted post has this id right now
        """
        post_id = request.post_id.strip()
        if not post_id:
            raise ValidationError(
                errors=[{"field": "id", "message": "Must not be blank", "code": "MISSING"}]
            )

        window = compose(PostFilters(promotional_only=True), now=self._clock())
        query = PostQuery(predicates=(Equals("id", post_id), *window.predicates))

        matches = self._store.find(query, skip=0, limit=1)

        if not matches:
            raise NotFoundError(resource="Promotional post", identifier=post_id)

        return matches[0]
