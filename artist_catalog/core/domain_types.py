"""Domain Types — identity and filter types shared by the service and the store.

Invariants:
    - ArtistId wraps UUID — parse_artist_id is the only way a path segment becomes one
    - ArtistFilters carries equality predicates only; None means "no constraint"
    - UPDATABLE_FIELDS is the whitelist for partial updates (id and timestamps excluded)

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - A malformed id cannot name a stored record, so it reports not-found
"""

from dataclasses import dataclass
from typing import NewType
from uuid import UUID

from artist_catalog.core.errors import ResourceNotFoundError


ArtistId = NewType("ArtistId", UUID)

UPDATABLE_FIELDS: frozenset[str] = frozenset({
    "name",
    "genre",
    "formation_year",
    "country",
    "active",
    "description",
    "popular_albums",
})


@dataclass(frozen=True)
class ArtistFilters:
    """Conjunctive exact-match filters for listing."""
    genre: str | None = None
    country: str | None = None
    active: bool | None = None

    def as_dict(self) -> dict[str, object]:
        """Only the supplied predicates."""
        return {
            key: value
            for key, value in (
                ("genre", self.genre),
                ("country", self.country),
                ("active", self.active),
            )
            if value is not None
        }


def parse_artist_id(raw: str) -> ArtistId:
    try:
        return ArtistId(UUID(raw))
    except (ValueError, TypeError, AttributeError):
        raise ResourceNotFoundError("Artist", str(raw))
