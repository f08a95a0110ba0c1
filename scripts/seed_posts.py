#!/usr/bin/env python3
"""
Seed the posts table with deterministic random data.

Features:
- Deterministic: fixed seed → same dataset every run
- Idempotent: clears the table before seeding
- Some posts share a created_at timestamp to exercise the id tie-break
- A handful of posts get active, expired or future featured/promotional windows

Usage:
    python scripts/seed_posts.py
"""

from __future__ import annotations

import random
import sys
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from roomfinder_marketing.domain.post import PostStatus, PostType
from roomfinder_marketing.infra.db.models.post import PostRow
from roomfinder_marketing.infra.db.session import get_session


RANDOM_SEED = 42
NUM_POSTS = 60
NUM_OWNERS = 8

DISTRICTS = list(range(1, 13))

ADJECTIVES = ["Sunny", "Cozy", "Spacious", "Quiet", "Modern", "Bright", "Furnished"]
KINDS = ["room", "studio", "apartment", "house", "loft"]
STREETS = ["Le Loi", "Nguyen Hue", "Hai Ba Trung", "Tran Hung Dao", "Pasteur", "Dien Bien Phu"]

# Rent prices are monthly, sale prices are totals
PRICE_BANDS = {
    PostType.RENT: (Decimal("1500000"), Decimal("15000000")),
    PostType.SALE: (Decimal("800000000"), Decimal("9000000000")),
}


def random_price(post_type: PostType) -> Decimal:
    low, high = PRICE_BANDS[post_type]
    value = Decimal(random.randint(int(low), int(high)))
    # Round to the nearest 100k
    return (value / 100000).quantize(Decimal("1")) * 100000


def random_window(now: datetime) -> tuple[bool, datetime | None, datetime | None]:
    roll = random.random()
    if roll < 0.70:
        return False, None, None
    if roll < 0.85:
        return True, now - timedelta(days=3), now + timedelta(days=4)  # active
    if roll < 0.93:
        return True, now - timedelta(days=20), now - timedelta(days=10)  # expired
    return True, now + timedelta(days=2), now + timedelta(days=9)  # not started


def generate_post(index: int, now: datetime, created_at: datetime) -> PostRow:
    post_type = random.choice(list(PostType))
    adjective = random.choice(ADJECTIVES)
    kind = random.choice(KINDS)
    street = random.choice(STREETS)
    district = random.choice(DISTRICTS)

    featured, featured_from, featured_until = random_window(now)
    promotional, promotional_from, promotional_until = random_window(now)

    verb = "for rent" if post_type is PostType.RENT else "for sale"
    return PostRow(
        id=f"post-{index:04d}",
        title=f"{adjective} {kind} {verb} in district {district}",
        description=f"A {adjective.lower()} {kind} close to {street} street.",
        address=f"{random.randint(1, 300)} {street}, District {district}",
        district=district,
        type=int(post_type),
        status=random.choices(
            [s.value for s in PostStatus],
            weights=[10, 3, 2, 1, 1],
            k=1,
        )[0],
        price=random_price(post_type),
        owner_id=f"user-{random.randint(1, NUM_OWNERS):02d}",
        created_at=created_at,
        featured=featured,
        featured_from=featured_from,
        featured_until=featured_until,
        promotional=promotional,
        promotional_from=promotional_from,
        promotional_until=promotional_until,
    )


def seed_posts(num_posts: int = NUM_POSTS, seed: int = RANDOM_SEED) -> None:
    """
    Seed the database with random posts.

    Args:
        num_posts: Number of posts to generate
        seed: Random seed for deterministic results
    """
    random.seed(seed)
    now = datetime.now(timezone.utc).replace(microsecond=0)

    print(f"Seeding database with {num_posts} posts (seed={seed})...")

    with get_session() as session:
        deleted_count = session.query(PostRow).delete()
        print(f"  Deleted {deleted_count} existing posts")

        posts = []
        created_at = now
        for index in range(1, num_posts + 1):
            # Roughly every third post reuses the previous timestamp
            if random.random() > 0.33:
                created_at = created_at - timedelta(minutes=random.randint(5, 600))
            posts.append(generate_post(index, now, created_at))

        session.add_all(posts)
        session.flush()

        print(f"  Inserted {len(posts)} posts")
        for post in posts[:5]:
            print(f"    {post.id}: {post.title} ({post.price:,.0f})")


if __name__ == "__main__":
    try:
        seed_posts()
    except Exception as e:
        print(f"Error seeding database: {e}", file=sys.stderr)
        sys.exit(1)
