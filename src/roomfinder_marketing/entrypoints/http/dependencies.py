"""
Dependency injection for FastAPI routes.

Database sessions are per-request. Use cases are rebuilt per request on top of
that session; they hold no state of their own.
"""

from __future__ import annotations

from typing import Generator

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from roomfinder_marketing.adapters.sql_post_store import SqlPostStore
from roomfinder_marketing.domain.errors import UnauthorizedError
from roomfinder_marketing.infra.config import max_page_size
from roomfinder_marketing.infra.db.session import get_session
from roomfinder_marketing.ports.post_store import PostStore
from roomfinder_marketing.use_cases.get_marketing_info import GetMarketingInfo
from roomfinder_marketing.use_cases.get_post_by_id import GetPostById
from roomfinder_marketing.use_cases.get_promotional_post_by_id import GetPromotionalPostById
from roomfinder_marketing.use_cases.list_posts import ListPosts


def get_db() -> Generator[Session, None, None]:
    """
    Provides a database session for a single request.

    The session commits/rolls back and closes when the request ends.
    """
    with get_session() as session:
        yield session


def get_post_store(db: Session = Depends(get_db)) -> PostStore:
    return SqlPostStore(session=db)


def get_list_posts_use_case(store: PostStore = Depends(get_post_store)) -> ListPosts:
    """
    Factory for the listing service.

    The page-size ceiling is read from configuration on every call so a
    changed POST_MAX_PAGE_SIZE applies without rebuilding the app.
    """
    return ListPosts(post_store=store, max_page_size=max_page_size())


def get_post_by_id_use_case(store: PostStore = Depends(get_post_store)) -> GetPostById:
    return GetPostById(post_store=store)


def get_promotional_post_by_id_use_case(
    store: PostStore = Depends(get_post_store),
) -> GetPromotionalPostById:
    return GetPromotionalPostById(post_store=store)


def get_marketing_info_use_case(
    store: PostStore = Depends(get_post_store),
) -> GetMarketingInfo:
    return GetMarketingInfo(post_store=store)


def get_current_owner_id(x_user_id: str | None = Header(default=None)) -> str:
    """
    Identity of the calling user.

    Authentication itself happens upstream; it forwards the verified user id
    in the X-User-Id header.

    Raises:
        UnauthorizedError: If the header is missing or blank
    """
    if x_user_id is None or not x_user_id.strip():
        raise UnauthorizedError("Authentication required")
    return x_user_id.strip()
