"""Artist ORM — the single catalog table.

Invariants:
    - id is UUID primary key, assigned on insert, never reused
    - name and genre are non-nullable text
    - active=False marks a soft-deleted row; rows are never physically removed
    - created_at and updated_at are assigned by the store (core/timestamps.py), not the DB

Design Decisions:
    - popular_albums is TEXT[] on PostgreSQL, JSON on SQLite (tests run on aiosqlite)
    - Indexes mirror the list filters: genre, country, active, formation_year
"""

import uuid
from datetime import datetime

from sqlalchemy import JSON, Boolean, DateTime, Index, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import ARRAY, UUID

from artist_catalog.core.timestamps import utc_now
from artist_catalog.db.base import Base


AlbumList = ARRAY(Text).with_variant(JSON(), "sqlite")


class Artist(Base):
    """Artist record."""
    __tablename__ = "artists"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(Text, nullable=False)
    genre: Mapped[str] = mapped_column(Text, nullable=False)
    formation_year: Mapped[int | None] = mapped_column(Integer, nullable=True)
    country: Mapped[str | None] = mapped_column(Text, nullable=True)
    active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True,
    )
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    popular_albums: Mapped[list[str]] = mapped_column(
        AlbumList, nullable=False, default=list,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now,
    )

    __table_args__ = (
        Index("idx_artists_genre", "genre"),
        Index("idx_artists_country", "country"),
        Index("idx_artists_active", "active"),
        Index("idx_artists_formation_year", "formation_year"),
    )
