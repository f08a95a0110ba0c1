from __future__ import annotations

from dataclasses import dataclass

from roomfinder_marketing.domain.post import PostFilters, PostType
from roomfinder_marketing.domain.query import PostQuery, compose
from roomfinder_marketing.ports.post_store import PostStore
from roomfinder_marketing.use_cases.list_posts import utc_now


@dataclass(frozen=True, slots=True)
class MarketingInfo:
    """Post counts only; user and broker counts belong to the user service."""

    total_posts: int
    rent_posts: int
    sale_posts: int


class GetMarketingInfo:
    """Aggregate post counts, built from the same composer as the listings."""

    def __init__(self, post_store: PostStore) -> None:
        self._store = post_store

    def execute(self) -> MarketingInfo:
        now = utc_now()
        return MarketingInfo(
            total_posts=self._store.count(PostQuery()),
            rent_posts=self._store.count(compose(PostFilters(type=PostType.RENT), now)),
            sale_posts=self._store.count(compose(PostFilters(type=PostType.SALE), now)),
        )
