from __future__ import annotations

from roomfinder_marketing.domain.post import Post
from roomfinder_marketing.domain.query import (
    ActiveWindow,
    ContainsText,
    Equals,
    Predicate,
    PostQuery,
    Range,
)
from roomfinder_marketing.ports.post_store import PostStore


class InMemoryPostStore(PostStore):
    """
    Canonical contract implementation for tests.

    - Evaluates every predicate with AND semantics
    - Sorts by the query ordering, then applies skip/limit
    - count() evaluates the same predicates without paging
    """

    def __init__(self, posts: list[Post]) -> None:
        self._posts = list(posts)

    def find(self, query: PostQuery, skip: int, limit: int) -> list[Post]:
        matches = [post for post in self._posts if self._matches(post, query)]

        # Stable sorts applied from the least significant key up
        for key in reversed(query.ordering):
            matches.sort(key=lambda post: getattr(post, key.field), reverse=key.descending)

        return matches[skip : skip + limit]

    def count(self, query: PostQuery) -> int:
        return sum(1 for post in self._posts if self._matches(post, query))

    def get_by_id(self, post_id: str) -> Post | None:
        for post in self._posts:
            if post.id == post_id:
                return post
        return None

    def _matches(self, post: Post, query: PostQuery) -> bool:
        return all(self._evaluate(post, predicate) for predicate in query.predicates)

    def _evaluate(self, post: Post, predicate: Predicate) -> bool:
        if isinstance(predicate, Equals):
            return getattr(post, predicate.field) == predicate.value

        if isinstance(predicate, Range):
            value = getattr(post, predicate.field)
            if predicate.lower is not None and value < predicate.lower:
                return False
            if predicate.upper is not None and value > predicate.upper:
                return False
            return True

        if isinstance(predicate, ContainsText):
            needle = predicate.text.lower()
            return any(
                needle in (getattr(post, name) or "").lower() for name in predicate.fields
            )

        if isinstance(predicate, ActiveWindow):
            if not getattr(post, predicate.flag):
                return False
            starts = getattr(post, predicate.starts)
            ends = getattr(post, predicate.ends)
            if starts is not None and predicate.at < starts:
                return False
            if ends is not None and predicate.at >= ends:
                return False
            return True

        raise TypeError(f"Unsupported predicate: {predicate!r}")
