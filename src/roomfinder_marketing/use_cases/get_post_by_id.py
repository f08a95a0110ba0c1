"""Get post by ID use case."""

from __future__ import annotations

from dataclasses import dataclass

from roomfinder_marketing.domain.errors import NotFoundError, ValidationError
from roomfinder_marketing.domain.post import Post
from roomfinder_marketing.ports.post_store import PostStore


@dataclass(frozen=True, slots=True)
class GetPostByIdRequest:
    post_id: str


class GetPostById:
    """Read a single post; absent posts are a NotFoundError."""

    def __init__(self, post_store: PostStore) -> None:
        self._store = post_store

    def execute(self, request: GetPostByIdRequest) -> Post:
        """
        Raises:
            ValidationError: If post_id is blank
            NotFoundError: If no post has this id
        """
        post_id = request.post_id.strip()
        if not post_id:
            raise ValidationError(
                errors=[{"field": "id", "message": "Must not be blank", "code": "MISSING"}]
            )

        post = self._store.get_by_id(post_id)

        if post is None:
            raise NotFoundError(resource="Post", identifier=post_id)

        return post
