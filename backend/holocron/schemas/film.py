"""Film Schemas — Pydantic models for catalog and sync API boundaries.

Invariants:
    - FilmCreate requires the six content fields; reference lists default to []
    - FilmUpdate is fully optional; routes pass model_dump(exclude_unset=True) downstream
    - FilmUpdate has no uid: the feed identity of a film is fixed at creation
    - Provenance (source, last_sync_date) is response-only; extra request keys are rejected
    - FilmResponse reads ORM rows directly (from_attributes)

Design Decisions:
    - Shape checks here, catalog rules in core/validate_film.py: the service is
      safe to call without going through HTTP
    - is_modified accepted on update and ignored by the service: clients may PUT
      back a film they just GET
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class FilmCreate(BaseModel):
    """Local film creation payload."""
    model_config = ConfigDict(extra="forbid")

    title: str = Field(min_length=1, max_length=200)
    episode_id: int = Field(ge=1)
    opening_crawl: str = Field(min_length=1)
    director: str = Field(min_length=1, max_length=200)
    producer: str = Field(min_length=1, max_length=500)
    release_date: str = Field(pattern=r"^\d{4}-\d{2}-\d{2}$")
    characters: list[str] = Field(default_factory=list)
    planets: list[str] = Field(default_factory=list)
    starships: list[str] = Field(default_factory=list)
    vehicles: list[str] = Field(default_factory=list)
    species: list[str] = Field(default_factory=list)
    url: str | None = Field(None, max_length=500)
    description: str | None = None
    uid: str | None = Field(None, min_length=1, max_length=64)


class FilmUpdate(BaseModel):
    """Partial film update payload."""
    model_config = ConfigDict(extra="forbid")

    title: str | None = Field(None, max_length=200)
    episode_id: int | None = None
    opening_crawl: str | None = None
    director: str | None = Field(None, max_length=200)
    producer: str | None = Field(None, max_length=500)
    release_date: str | None = None
    characters: list[str] | None = None
    planets: list[str] | None = None
    starships: list[str] | None = None
    vehicles: list[str] | None = None
    species: list[str] | None = None
    url: str | None = Field(None, max_length=500)
    description: str | None = None
    is_modified: bool | None = None


class FilmResponse(BaseModel):
    """Film as stored, including provenance."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    uid: str | None
    title: str
    episode_id: int
    opening_crawl: str
    director: str
    producer: str
    release_date: str
    characters: list[str]
    planets: list[str]
    starships: list[str]
    vehicles: list[str]
    species: list[str]
    url: str | None
    description: str | None
    source: str
    is_modified: bool
    last_sync_date: datetime | None
    created_at: datetime
    updated_at: datetime


class FilmDeleted(BaseModel):
    message: str
    film: FilmResponse


class SyncReportResponse(BaseModel):
    """Outcome of one sync pass."""
    message: str
    total: int
    success: int
    failed: int
    skipped: int
    errors: list[str]
