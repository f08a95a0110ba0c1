from __future__ import annotations

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Any, Callable

import pytest

from roomfinder_marketing.domain.post import Post

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


def make_post(post_id: str, **overrides: Any) -> Post:
    values: dict[str, Any] = {
        "id": post_id,
        "title": f"Post {post_id}",
        "district": 1,
        "type": 1,
        "status": "active",
        "price": Decimal("3000000.00"),
        "owner_id": "user-1",
        "created_at": NOW - timedelta(days=1),
    }
    values.update(overrides)
    return Post(**values)


@pytest.fixture()
def post_factory() -> Callable[..., Post]:
    return make_post


@pytest.fixture()
def now() -> datetime:
    return NOW
