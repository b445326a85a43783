"""Artist Routes — list, read, create, update and soft-delete artist records.

Invariants:
    - Request bodies validated by Pydantic before reaching the handler
    - page >= 1, 1 <= limit <= settings.max_page_limit
    - Path ids are raw strings; a malformed id is a 404, not a 400
    - DELETE never removes a row — it deactivates it

Design Decisions:
    - Routes parse, delegate to ArtistCatalog, and wrap the result in an envelope
    - Errors propagate as CatalogError to the global handlers (api/error_handlers.py)
"""

import logging

from fastapi import APIRouter, Depends, Query, status

from artist_catalog.api.dependencies import get_artist_catalog
from artist_catalog.config import get_settings
from artist_catalog.core.domain_types import ArtistFilters
from artist_catalog.schemas.artist import (
    ArtistCreate,
    ArtistDeletedEnvelope,
    ArtistEnvelope,
    ArtistListEnvelope,
    ArtistRead,
    ArtistUpdate,
    PaginationMeta,
)
from artist_catalog.services.artist_catalog import ArtistCatalog

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/artists", tags=["artists"])

settings = get_settings()


@router.get("", response_model=ArtistListEnvelope)
async def list_artists(
    page: int = Query(1, ge=1),
    limit: int = Query(settings.default_page_limit, ge=1, le=settings.max_page_limit),
    genre: str | None = Query(None),
    country: str | None = Query(None),
    active: bool | None = Query(None),
    catalog: ArtistCatalog = Depends(get_artist_catalog),
):
    """List artists matching all supplied filters, one page at a time."""
    filters = ArtistFilters(genre=genre or None, country=country or None, active=active)
    result = await catalog.list_artists(filters, page, limit)
    return ArtistListEnvelope(
        data=[ArtistRead.model_validate(r) for r in result.records],
        pagination=PaginationMeta(
            page=result.summary.page,
            limit=result.summary.limit,
            total=result.summary.total,
            total_pages=result.summary.total_pages,
            has_next=result.summary.has_next,
            has_prev=result.summary.has_prev,
        ),
    )


@router.get("/{artist_id}", response_model=ArtistEnvelope)
async def get_artist(
    artist_id: str, catalog: ArtistCatalog = Depends(get_artist_catalog),
):
    """Get one artist, active or not."""
    artist = await catalog.get_artist(artist_id)
    return ArtistEnvelope(data=ArtistRead.model_validate(artist))


@router.post(
    "", response_model=ArtistEnvelope, status_code=status.HTTP_201_CREATED,
)
async def create_artist(
    body: ArtistCreate, catalog: ArtistCatalog = Depends(get_artist_catalog),
):
    """Create an artist. id and timestamps are assigned server-side."""
    artist = await catalog.create_artist(body)
    return ArtistEnvelope(data=ArtistRead.model_validate(artist))


@router.put("/{artist_id}", response_model=ArtistEnvelope)
async def update_artist(
    artist_id: str,
    body: ArtistUpdate,
    catalog: ArtistCatalog = Depends(get_artist_catalog),
):
    """Apply the supplied fields to an existing artist."""
    artist = await catalog.update_artist(artist_id, body)
    return ArtistEnvelope(data=ArtistRead.model_validate(artist))


@router.delete("/{artist_id}", response_model=ArtistDeletedEnvelope)
async def delete_artist(
    artist_id: str, catalog: ArtistCatalog = Depends(get_artist_catalog),
):
    """Soft-delete: mark the artist inactive and return it."""
    artist = await catalog.deactivate_artist(artist_id)
    return ArtistDeletedEnvelope(
        message="Artist deleted successfully",
        data=ArtistRead.model_validate(artist),
    )
