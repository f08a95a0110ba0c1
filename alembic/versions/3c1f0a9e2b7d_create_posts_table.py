"""Create posts table

Revision ID: 3c1f0a9e2b7d
Revises:
Create Date: 2026-10-18 10:12:40.118204

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op


# revision identifiers, used by Alembic.
revision: str = "3c1f0a9e2b7d"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "posts",
        sa.Column("id", sa.String(length=64), primary_key=True),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("address", sa.String(length=300), nullable=True),
        sa.Column("district", sa.Integer(), nullable=False),
        sa.Column("type", sa.Integer(), nullable=False),
        sa.Column("status", sa.String(length=20), nullable=False),
        sa.Column("price", sa.Numeric(precision=14, scale=2), nullable=False),
        sa.Column("owner_id", sa.String(length=64), nullable=False),
        sa.Column("featured", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("featured_from", sa.DateTime(timezone=True), nullable=True),
        sa.Column("featured_until", sa.DateTime(timezone=True), nullable=True),
        sa.Column("promotional", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("promotional_from", sa.DateTime(timezone=True), nullable=True),
        sa.Column("promotional_until", sa.DateTime(timezone=True), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
    )
    op.create_index("ix_posts_created_at_id", "posts", ["created_at", "id"])
    op.create_index("ix_posts_district", "posts", ["district"])
    op.create_index("ix_posts_type", "posts", ["type"])
    op.create_index("ix_posts_owner_id_status", "posts", ["owner_id", "status"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("ix_posts_owner_id_status", table_name="posts")
    op.drop_index("ix_posts_type", table_name="posts")
    op.drop_index("ix_posts_district", table_name="posts")
    op.drop_index("ix_posts_created_at_id", table_name="posts")
    op.drop_table("posts")
