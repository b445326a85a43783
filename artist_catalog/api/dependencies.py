"""Request Dependencies — per-request construction of the store and catalog.

Invariants:
    - One AsyncSession per request (get_db), one store per session
    - Routes receive an ArtistCatalog; they never touch the session directly

Design Decisions:
    - Dependency chain over module singletons: tests override get_db alone
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from artist_catalog.infrastructure.artist_store import SqlAlchemyArtistStore
from artist_catalog.infrastructure.database import get_db
from artist_catalog.services.artist_catalog import ArtistCatalog


def get_artist_store(db: AsyncSession = Depends(get_db)) -> SqlAlchemyArtistStore:
    return SqlAlchemyArtistStore(db)


def get_artist_catalog(
    store: SqlAlchemyArtistStore = Depends(get_artist_store),
) -> ArtistCatalog:
    return ArtistCatalog(store)
