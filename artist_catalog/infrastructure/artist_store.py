"""SQLAlchemy Artist Store — the Record Store over the artists table.

Invariants:
    - Filters are exact-match equality, conjunctive (AND) across fields
    - insert() assigns id, created_at and updated_at; created_at == updated_at on insert
    - update() touches only the supplied fields and always advances updated_at
    - Each mutation commits exactly one row; no multi-row transactions
    - SQLAlchemyError never escapes: rolled back and re-raised as DatabaseError

Design Decisions:
    - Wraps a request-scoped AsyncSession handed in by the get_db dependency
    - Ordering created_at DESC, id: stable pages across requests
    - Count and page are two statements; total may drift under concurrent writes
"""

import logging
import uuid
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Sequence

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from artist_catalog.core.domain_types import ArtistFilters, ArtistId, UPDATABLE_FIELDS
from artist_catalog.core.errors import DatabaseError
from artist_catalog.core.timestamps import next_updated_at, utc_now
from artist_catalog.models.artist import Artist

logger = logging.getLogger(__name__)


class SqlAlchemyArtistStore:
    """ArtistStore implementation backed by an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self._db = db

    @asynccontextmanager
    async def _translate_errors(self, operation: str) -> AsyncIterator[None]:
        try:
            yield
        except SQLAlchemyError as e:
            await self._db.rollback()
            detail = str(getattr(e, "orig", None) or e)
            logger.error(
                f"Artist store {operation} failed: {detail}",
                extra={"error_code": "DATABASE_ERROR"},
            )
            raise DatabaseError(detail, operation) from e

    async def list(
        self, filters: ArtistFilters, offset: int, limit: int,
    ) -> tuple[Sequence[Artist], int]:
        conditions = [
            getattr(Artist, column) == value
            for column, value in filters.as_dict().items()
        ]
        count_query = select(func.count()).select_from(Artist).where(*conditions)
        page_query = (
            select(Artist)
            .where(*conditions)
            .order_by(Artist.created_at.desc(), Artist.id)
            .offset(offset)
            .limit(limit)
        )
        async with self._translate_errors("select"):
            total = (await self._db.execute(count_query)).scalar_one()
            rows = (await self._db.execute(page_query)).scalars().all()
        return rows, total

    async def get_by_id(self, artist_id: ArtistId) -> Artist | None:
        async with self._translate_errors("select"):
            result = await self._db.execute(
                select(Artist).where(Artist.id == artist_id),
            )
            return result.scalar_one_or_none()

    async def insert(self, fields: dict[str, Any]) -> Artist:
        now = utc_now()
        artist = Artist(
            **{k: v for k, v in fields.items() if k in UPDATABLE_FIELDS},
            id=uuid.uuid4(),
            created_at=now,
            updated_at=now,
        )
        async with self._translate_errors("insert"):
            self._db.add(artist)
            await self._db.commit()
            await self._db.refresh(artist)
        logger.info(
            f"Artist created: {artist.name}",
            extra={"artist_id": str(artist.id)},
        )
        return artist

    async def update(
        self, artist_id: ArtistId, fields: dict[str, Any],
    ) -> Artist | None:
        artist = await self.get_by_id(artist_id)
        if artist is None:
            return None
        async with self._translate_errors("update"):
            for key, value in fields.items():
                if key in UPDATABLE_FIELDS:
                    setattr(artist, key, value)
            artist.updated_at = next_updated_at(artist.updated_at)
            await self._db.commit()
            await self._db.refresh(artist)
        logger.info(
            f"Artist updated: {', '.join(sorted(fields)) or 'touch'}",
            extra={"artist_id": str(artist_id)},
        )
        return artist
