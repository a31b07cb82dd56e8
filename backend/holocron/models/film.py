"""Film ORM — persists one catalog record, local or synced from the feed.

Invariants:
    - id is UUID primary key (client-side default)
    - uid is unique among films that have one (NULLs never collide)
    - source is set at creation and never rewritten by sync
    - is_modified defaults to False and is only ever flipped to True (by the catalog service)
    - last_sync_date is NULL until sync writes the row

Design Decisions:
    - JSON columns for the five reference lists: replaced wholesale on update,
      never merged element-wise
    - uid unique index enforced by the database: racing sync passes fail the
      second insert instead of duplicating a film
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, Integer, Boolean, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from holocron.core.domain_types import Source
from holocron.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Film(Base):
    """Catalog film — content fields plus provenance."""
    __tablename__ = "films"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    uid: Mapped[str | None] = mapped_column(
        String(64), nullable=True, unique=True, index=True,
    )

    # Content
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    episode_id: Mapped[int] = mapped_column(Integer, nullable=False)
    opening_crawl: Mapped[str] = mapped_column(Text, nullable=False)
    director: Mapped[str] = mapped_column(String(200), nullable=False)
    producer: Mapped[str] = mapped_column(String(500), nullable=False)
    release_date: Mapped[str] = mapped_column(String(10), nullable=False)
    characters: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    planets: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    starships: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    vehicles: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    species: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Provenance
    source: Mapped[str] = mapped_column(
        String(10), nullable=False, default=Source.LOCAL.value,
    )
    is_modified: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    last_sync_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow,
    )
