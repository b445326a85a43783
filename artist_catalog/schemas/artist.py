"""Artist Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - ArtistCreate.name / .genre: required, stripped, non-empty
    - ArtistUpdate only exposes whitelisted fields; id and timestamps are ignored if sent
    - ArtistUpdate rejects explicit null for non-nullable columns (name, genre, active)
    - Blank optional text collapses to None; popular_albums never None
    - popular_albums is stored exactly as sent; a blank title is rejected, not dropped
    - ArtistRead timestamps are always timezone-aware UTC

Design Decisions:
    - extra="ignore" over "forbid": clients may echo a full record back on PUT
    - Lax-mode coercion handles formation_year "1995" and active "true"
    - Pagination keys are camelCase on the wire (alias_generator), snake_case in Python
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from artist_catalog.core.timestamps import as_utc


def _required_text(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("must not be empty")
    return v


def _optional_text(v: str | None) -> str | None:
    if v is None:
        return None
    v = v.strip()
    return v or None


def _album_list(v: list[str] | None) -> list[str]:
    if v is None:
        return []
    for index, album in enumerate(v):
        if not album.strip():
            raise ValueError(f"album title at position {index} must not be empty")
    return v


class ArtistCreate(BaseModel):
    """Artist creation payload."""
    model_config = ConfigDict(extra="ignore")

    name: str
    genre: str
    formation_year: int | None = None
    country: str | None = None
    active: bool = True
    description: str | None = None
    popular_albums: list[str] | None = Field(default_factory=list)

    @field_validator("name", "genre")
    @classmethod
    def strip_required(cls, v: str) -> str:
        return _required_text(v)

    @field_validator("country", "description")
    @classmethod
    def blank_to_none(cls, v: str | None) -> str | None:
        return _optional_text(v)

    @field_validator("popular_albums")
    @classmethod
    def normalize_albums(cls, v: list[str] | None) -> list[str]:
        return _album_list(v)

    def to_fields(self) -> dict:
        return self.model_dump()


class ArtistUpdate(BaseModel):
    """Partial update payload — only fields present in the body are applied."""
    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    genre: str | None = None
    formation_year: int | None = None
    country: str | None = None
    active: bool | None = None
    description: str | None = None
    popular_albums: list[str] | None = None

    @field_validator("name", "genre")
    @classmethod
    def strip_required(cls, v: str | None) -> str | None:
        return v if v is None else _required_text(v)

    @field_validator("country", "description")
    @classmethod
    def blank_to_none(cls, v: str | None) -> str | None:
        return _optional_text(v)

    @field_validator("popular_albums")
    @classmethod
    def normalize_albums(cls, v: list[str] | None) -> list[str]:
        return _album_list(v)

    @model_validator(mode="after")
    def reject_null_required(self):
        for name in ("name", "genre", "active"):
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self

    def to_fields(self) -> dict:
        """Only the fields the client actually sent."""
        return self.model_dump(exclude_unset=True)


class ArtistRead(BaseModel):
    """Public artist record."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    genre: str
    formation_year: int | None = None
    country: str | None = None
    active: bool
    description: str | None = None
    popular_albums: list[str] = []
    created_at: datetime
    updated_at: datetime

    @field_validator("created_at", "updated_at")
    @classmethod
    def ensure_utc(cls, v: datetime) -> datetime:
        return as_utc(v)

    @field_validator("popular_albums", mode="before")
    @classmethod
    def default_albums(cls, v):
        return [] if v is None else v


class PaginationMeta(BaseModel):
    """Navigation summary for a list page."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    page: int
    limit: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool


class ArtistEnvelope(BaseModel):
    data: ArtistRead


class ArtistListEnvelope(BaseModel):
    data: list[ArtistRead]
    pagination: PaginationMeta


class ArtistDeletedEnvelope(BaseModel):
    message: str
    data: ArtistRead
