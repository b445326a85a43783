"""Boundary Protocols — contracts between the catalog service and persistence.

Invariants:
    - The service NEVER imports a concrete store — it receives one via injection
    - All IO operations accessed through Protocol types
    - update() and get_by_id() return None for unknown ids; raising is the caller's job

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Async in Protocol: implementations do IO
"""

from typing import Any, Protocol, Sequence

from artist_catalog.core.domain_types import ArtistFilters, ArtistId


class ArtistRecord(Protocol):
    """Structural contract for a stored artist (ORM row or test double)."""
    id: Any
    name: str
    genre: str
    formation_year: int | None
    country: str | None
    active: bool
    description: str | None
    popular_albums: list[str]
    created_at: Any
    updated_at: Any


class ArtistStore(Protocol):
    """Contract for artist persistence — implemented by infrastructure."""
    async def list(
        self, filters: ArtistFilters, offset: int, limit: int,
    ) -> tuple[Sequence[ArtistRecord], int]: ...
    async def get_by_id(self, artist_id: ArtistId) -> ArtistRecord | None: ...
    async def insert(self, fields: dict[str, Any]) -> ArtistRecord: ...
    async def update(
        self, artist_id: ArtistId, fields: dict[str, Any],
    ) -> ArtistRecord | None: ...
