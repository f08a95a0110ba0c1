"""SQLAlchemy implementation of PostStore."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING, Iterator

from sqlalchemy import and_, func, or_, select
from sqlalchemy.exc import InterfaceError, OperationalError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError
from sqlalchemy.orm import Session

from roomfinder_marketing.domain.errors import StoreUnavailableError
from roomfinder_marketing.domain.post import Post
from roomfinder_marketing.domain.query import (
    ActiveWindow,
    ContainsText,
    Equals,
    Predicate,
    PostQuery,
    Range,
)
from roomfinder_marketing.infra.db.models.post import PostRow
from roomfinder_marketing.ports.post_store import PostStore

if TYPE_CHECKING:
    from sqlalchemy.sql import ColumnElement, Select

logger = logging.getLogger(__name__)

_LIKE_ESCAPE = "\\"


def escape_like(text: str) -> str:
    """Escape LIKE wildcards so the keyword is matched literally."""
    return (
        text.replace(_LIKE_ESCAPE, _LIKE_ESCAPE * 2)
        .replace("%", _LIKE_ESCAPE + "%")
        .replace("_", _LIKE_ESCAPE + "_")
    )


class SqlPostStore(PostStore):
    """
    SQL implementation of PostStore.

    - Translates each predicate into a WHERE clause (AND semantics)
    - Orders by created_at DESC, id ASC before OFFSET/LIMIT
    - count() runs COUNT(*) over the same WHERE clauses
    - Driver/connection failures become StoreUnavailableError
    """

    def __init__(self, session: Session) -> None:
        """
        Initialize store with database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self._session = session

    def find(self, query: PostQuery, skip: int, limit: int) -> list[Post]:
        statement = self.build_select(query).offset(skip).limit(limit)

        with self._store_errors("find"):
            rows = self._session.execute(statement).scalars().all()

        return [self._to_domain(row) for row in rows]

    def count(self, query: PostQuery) -> int:
        statement = select(func.count()).select_from(PostRow).where(*self._where(query))

        with self._store_errors("count"):
            return self._session.execute(statement).scalar() or 0

    def get_by_id(self, post_id: str) -> Post | None:
        statement = select(PostRow).where(PostRow.id == post_id)

        with self._store_errors("get_by_id"):
            row = self._session.execute(statement).scalar_one_or_none()

        return self._to_domain(row) if row else None

    def build_select(self, query: PostQuery) -> Select[tuple[PostRow]]:
        """
        Build the ordered SELECT for a composed query (no paging applied).

        Args:
            query: Composed predicates and ordering

        Returns:
            SQLAlchemy select statement with WHERE and ORDER BY clauses
        """
        order_by = [
            self._column(key.field).desc() if key.descending else self._column(key.field).asc()
            for key in query.ordering
        ]
        return select(PostRow).where(*self._where(query)).order_by(*order_by)

    def _where(self, query: PostQuery) -> list[ColumnElement[bool]]:
        return [self._clause(predicate) for predicate in query.predicates]

    def _clause(self, predicate: Predicate) -> ColumnElement[bool]:
        if isinstance(predicate, Equals):
            return self._column(predicate.field) == predicate.value

        if isinstance(predicate, Range):
            column = self._column(predicate.field)
            bounds = []
            if predicate.lower is not None:
                bounds.append(column >= predicate.lower)
            if predicate.upper is not None:
                bounds.append(column <= predicate.upper)
            return and_(*bounds)

        if isinstance(predicate, ContainsText):
            pattern = f"%{escape_like(predicate.text)}%"
            return or_(
                *(
                    self._column(name).ilike(pattern, escape=_LIKE_ESCAPE)
                    for name in predicate.fields
                )
            )

        if isinstance(predicate, ActiveWindow):
            starts = self._column(predicate.starts)
            ends = self._column(predicate.ends)
            return and_(
                self._column(predicate.flag).is_(True),
                or_(starts.is_(None), starts <= predicate.at),
                or_(ends.is_(None), ends > predicate.at),
            )

        raise TypeError(f"Unsupported predicate: {predicate!r}")

    @staticmethod
    def _column(name: str):  # type: ignore[no-untyped-def]
        column = PostRow.__table__.columns.get(name)
        if column is None:
            raise ValueError(f"Unknown post field: {name}")
        return getattr(PostRow, name)

    @contextmanager
    def _store_errors(self, operation: str) -> Iterator[None]:
        try:
            yield
        except (OperationalError, InterfaceError, PoolTimeoutError) as exc:
            logger.error(
                "Post store unavailable",
                extra={"operation": operation, "error_type": type(exc).__name__},
            )
            raise StoreUnavailableError("Post store is unavailable", operation=operation) from exc

    def _to_domain(self, row: PostRow) -> Post:
        """
        Convert database model (PostRow) to domain entity (Post).

        Args:
            row: SQLAlchemy PostRow model

        Returns:
            Post domain entity
        """
        return Post(
            id=row.id,
            title=row.title,
            description=row.description or "",
            address=row.address or "",
            district=row.district,
            type=row.type,
            status=row.status,
            price=row.price,
            owner_id=row.owner_id,
            created_at=row.created_at,
            featured=bool(row.featured),
            featured_from=row.featured_from,
            featured_until=row.featured_until,
            promotional=bool(row.promotional),
            promotional_from=row.promotional_from,
            promotional_until=row.promotional_until,
        )
