"""Artist Catalog — the five catalog operations composed over an ArtistStore.

Invariants:
    - Unknown ids surface as ResourceNotFoundError (never None to the caller)
    - Deactivation is exactly update(id, {"active": False}) — no physical delete
    - Payloads arrive already validated (schemas/artist.py); the store sees plain dicts

Design Decisions:
    - Store injected via constructor: routes build it per request, tests pass fakes
    - Returns ORM-shaped records; routes own the response envelopes
"""

import logging
from dataclasses import dataclass
from typing import Sequence

from artist_catalog.core.domain_types import ArtistFilters, parse_artist_id
from artist_catalog.core.errors import ResourceNotFoundError
from artist_catalog.core.pagination import PageSummary, page_offset, summarize_page
from artist_catalog.core.repository_protocols import ArtistRecord, ArtistStore
from artist_catalog.schemas.artist import ArtistCreate, ArtistUpdate

logger = logging.getLogger(__name__)


@dataclass
class ArtistPage:
    records: Sequence[ArtistRecord]
    summary: PageSummary


class ArtistCatalog:
    """Catalog operations over an injected store."""

    def __init__(self, store: ArtistStore):
        self._store = store

    async def list_artists(
        self, filters: ArtistFilters, page: int, limit: int,
    ) -> ArtistPage:
        records, total = await self._store.list(
            filters, page_offset(page, limit), limit,
        )
        return ArtistPage(records, summarize_page(page, limit, total))

    async def get_artist(self, raw_id: str) -> ArtistRecord:
        artist = await self._store.get_by_id(parse_artist_id(raw_id))
        if artist is None:
            raise ResourceNotFoundError("Artist", raw_id)
        return artist

    async def create_artist(self, payload: ArtistCreate) -> ArtistRecord:
        return await self._store.insert(payload.to_fields())

    async def update_artist(
        self, raw_id: str, payload: ArtistUpdate,
    ) -> ArtistRecord:
        return await self._apply(raw_id, payload.to_fields())

    async def deactivate_artist(self, raw_id: str) -> ArtistRecord:
        artist = await self._apply(raw_id, {"active": False})
        logger.info("Artist deactivated", extra={"artist_id": raw_id})
        return artist

    async def _apply(self, raw_id: str, fields: dict) -> ArtistRecord:
        artist = await self._store.update(parse_artist_id(raw_id), fields)
        if artist is None:
            raise ResourceNotFoundError("Artist", raw_id)
        return artist
