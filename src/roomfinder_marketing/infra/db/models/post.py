from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from sqlalchemy import Boolean, DateTime, Index, Integer, Numeric, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from roomfinder_marketing.infra.db.models.base import Base


class PostRow(Base):
    __tablename__ = "posts"
    __table_args__ = (
        # Matches the listing order: created_at DESC, id ASC
        Index("ix_posts_created_at_id", "created_at", "id"),
        Index("ix_posts_district", "district"),
        Index("ix_posts_type", "type"),
        Index("ix_posts_owner_id_status", "owner_id", "status"),
    )

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    address: Mapped[str | None] = mapped_column(String(300), nullable=True)

    district: Mapped[int] = mapped_column(Integer, nullable=False)
    type: Mapped[int] = mapped_column(Integer, nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False)
    price: Mapped[Decimal] = mapped_column(
        Numeric(precision=14, scale=2), nullable=False
    )
    owner_id: Mapped[str] = mapped_column(String(64), nullable=False)

    featured: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    featured_from: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    featured_until: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    promotional: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    promotional_from: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    promotional_until: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
