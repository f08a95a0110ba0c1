"""
Unit tests for SqlPostStore.

The session is mocked; statements handed to it are compiled with the
PostgreSQL dialect to check the generated SQL.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from unittest.mock import Mock

import pytest
from sqlalchemy.dialects import postgresql
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from roomfinder_marketing.adapters.sql_post_store import SqlPostStore, escape_like
from roomfinder_marketing.domain.errors import StoreUnavailableError
from roomfinder_marketing.domain.post import Post, PostFilters
from roomfinder_marketing.domain.query import PostQuery, compose
from roomfinder_marketing.infra.db.models.post import PostRow

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture()
def mock_session() -> Mock:
    return Mock(spec=Session)


@pytest.fixture()
def post_rows() -> list[PostRow]:
    return [
        PostRow(
            id="p-2",
            title="Sunny Room",
            description=None,
            address="1 Le Loi",
            district=1,
            type=1,
            status="active",
            price=Decimal("3500000.00"),
            owner_id="user-1",
            created_at=NOW,
            featured=True,
            promotional=False,
        ),
        PostRow(
            id="p-1",
            title="House for sale",
            description="Garden",
            address=None,
            district=2,
            type=2,
            status="sold",
            price=Decimal("900000000.00"),
            owner_id="user-2",
            created_at=NOW - timedelta(days=1),
            featured=False,
            promotional=True,
        ),
    ]


def compiled_sql(statement) -> str:  # type: ignore[no-untyped-def]
    return str(statement.compile(dialect=postgresql.dialect()))


def executed_statement(mock_session: Mock):  # type: ignore[no-untyped-def]
    return mock_session.execute.call_args.args[0]


# ==============================================================================
# find()
# ==============================================================================


def test_find_orders_and_pages(mock_session: Mock, post_rows: list[PostRow]) -> None:
    mock_session.execute.return_value.scalars.return_value.all.return_value = post_rows
    store = SqlPostStore(mock_session)

    posts = store.find(PostQuery(), skip=20, limit=10)

    sql = compiled_sql(executed_statement(mock_session))
    assert "ORDER BY posts.created_at DESC, posts.id ASC" in sql
    assert "LIMIT" in sql and "OFFSET" in sql
    assert "WHERE" not in sql
    assert [post.id for post in posts] == ["p-2", "p-1"]


def test_find_converts_rows_to_domain(mock_session: Mock, post_rows: list[PostRow]) -> None:
    mock_session.execute.return_value.scalars.return_value.all.return_value = post_rows
    store = SqlPostStore(mock_session)

    first, second = store.find(PostQuery(), skip=0, limit=10)

    assert isinstance(first, Post)
    assert first.description == ""  # NULL text becomes empty string
    assert second.address == ""
    assert first.price == Decimal("3500000.00")
    assert first.featured is True
    assert second.promotional is True


def test_find_translates_filters_to_where_clauses(mock_session: Mock) -> None:
    mock_session.execute.return_value.scalars.return_value.all.return_value = []
    store = SqlPostStore(mock_session)
    query = compose(
        PostFilters(
            district=7,
            type=2,
            price_min=Decimal("10"),
            price_max=Decimal("20"),
            keyword="sunny",
        ),
        NOW,
    )

    store.find(query, skip=0, limit=10)

    sql = compiled_sql(executed_statement(mock_session))
    assert "posts.district = " in sql
    assert "posts.type = " in sql
    assert "posts.price >= " in sql and "posts.price <= " in sql
    assert sql.count("ILIKE") == 3
    assert "posts.title ILIKE" in sql
    assert "posts.description ILIKE" in sql
    assert "posts.address ILIKE" in sql


def test_keyword_pattern_escapes_wildcards(mock_session: Mock) -> None:
    mock_session.execute.return_value.scalars.return_value.all.return_value = []
    store = SqlPostStore(mock_session)

    store.find(compose(PostFilters(keyword="50%_off"), NOW), skip=0, limit=10)

    params = executed_statement(mock_session).compile(dialect=postgresql.dialect()).params
    assert "%50\\%\\_off%" in params.values()


def test_escape_like() -> None:
    assert escape_like("a%b_c\\d") == "a\\%b\\_c\\\\d"
    assert escape_like("plain") == "plain"


def test_featured_window_clause(mock_session: Mock) -> None:
    mock_session.execute.return_value.scalars.return_value.all.return_value = []
    store = SqlPostStore(mock_session)

    store.find(compose(PostFilters(featured_only=True), NOW), skip=0, limit=10)

    sql = compiled_sql(executed_statement(mock_session))
    assert "posts.featured IS true" in sql
    assert "posts.featured_from IS NULL OR posts.featured_from <=" in sql
    assert "posts.featured_until IS NULL OR posts.featured_until >" in sql


# ==============================================================================
# count() and get_by_id()
# ==============================================================================


def test_count_uses_same_where_clauses(mock_session: Mock) -> None:
    mock_session.execute.return_value.scalar.return_value = 42
    store = SqlPostStore(mock_session)

    total = store.count(compose(PostFilters(district=7), NOW))

    sql = compiled_sql(executed_statement(mock_session))
    assert total == 42
    assert "count(*)" in sql
    assert "posts.district = " in sql
    assert "LIMIT" not in sql


def test_count_treats_none_as_zero(mock_session: Mock) -> None:
    mock_session.execute.return_value.scalar.return_value = None

    assert SqlPostStore(mock_session).count(PostQuery()) == 0


def test_get_by_id_found(mock_session: Mock, post_rows: list[PostRow]) -> None:
    mock_session.execute.return_value.scalar_one_or_none.return_value = post_rows[0]

    post = SqlPostStore(mock_session).get_by_id("p-2")

    assert post is not None
    assert post.id == "p-2"


def test_get_by_id_missing(mock_session: Mock) -> None:
    mock_session.execute.return_value.scalar_one_or_none.return_value = None

    assert SqlPostStore(mock_session).get_by_id("nope") is None


# ==============================================================================
# Failures
# ==============================================================================


@pytest.mark.parametrize("operation", ["find", "count"])
def test_operational_error_becomes_store_unavailable(mock_session: Mock, operation: str) -> None:
    mock_session.execute.side_effect = OperationalError(
        "SELECT 1", {}, Exception("connection refused")
    )
    store = SqlPostStore(mock_session)

    with pytest.raises(StoreUnavailableError) as exc_info:
        if operation == "find":
            store.find(PostQuery(), skip=0, limit=10)
        else:
            store.count(PostQuery())

    assert exc_info.value.context == {"operation": operation}
    assert isinstance(exc_info.value.__cause__, OperationalError)
