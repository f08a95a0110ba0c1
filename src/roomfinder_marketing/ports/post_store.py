from __future__ import annotations

from abc import ABC, abstractmethod

from roomfinder_marketing.domain.post import Post
from roomfinder_marketing.domain.query import PostQuery


class PostStore(ABC):
    """
    Port for read access to posts.

    Contract:
        - ``find`` and ``count`` evaluate the same predicate set (AND semantics)
        - ``find`` honours ``query.ordering`` before applying skip/limit
        - ``count`` is exact and ignores skip/limit
        - The two calls share no snapshot; counts may drift under concurrent writes
        - Infrastructure failures surface as StoreUnavailableError

    Preconditions:
        - skip >= 0 and limit >= 1 (normalized by the caller)
    """

    @abstractmethod
    def find(self, query: PostQuery, skip: int, limit: int) -> list[Post]:
        """
        Fetch one window of matching posts.

        Args:
            query: Composed predicates and ordering
            skip: Number of matching posts to skip
            limit: Maximum number of posts to return

        Returns:
            Matching posts in query order
        """
        ...

    @abstractmethod
    def count(self, query: PostQuery) -> int:
        """Exact number of posts matching ``query``."""
        ...

    @abstractmethod
    def get_by_id(self, post_id: str) -> Post | None: ...
