"""Catalog Service — direct create/read/update/delete of catalog films.

Invariants:
    - create() always writes source=local, is_modified=False, list fields default []
    - update() of a source=external film always writes is_modified=True, whatever the payload says
    - update() of a source=local film never writes is_modified
    - source and last_sync_date are never writable here; only sync stamps last_sync_date
    - Invalid payloads raise ValidationFailedError before any write
    - Missing ids yield None; mapping to 404 belongs to the routes

Design Decisions:
    - The forced is_modified flag is the single way a film becomes protected from
      sync overwrite; there is deliberately no unlock operation
    - Caller-supplied is_modified is dropped before validation, not rejected:
      clients echoing a full film back on PUT keep working
"""

import logging

from holocron.core.domain_types import FilmId, REFERENCE_LIST_FIELDS, Source
from holocron.core.errors import ErrorContext, ValidationFailedError
from holocron.core.repository_protocols import FilmRecord, FilmStore
from holocron.core.validate_film import validate_film_fields

logger = logging.getLogger(__name__)


class CatalogService:
    """CRUD over the film store, with provenance bookkeeping."""

    def __init__(self, store: FilmStore):
        self._store = store

    async def create(self, fields: dict) -> FilmRecord:
        payload = dict(fields)
        payload.pop("is_modified", None)
        violations = validate_film_fields(payload)
        if violations:
            raise ValidationFailedError(violations)
        for name in REFERENCE_LIST_FIELDS:
            payload.setdefault(name, [])
        film = await self._store.create({
            **payload,
            "source": Source.LOCAL.value,
            "is_modified": False,
        })
        logger.info(
            f"Created local film '{film.title}'",
            extra={"film_id": str(film.id), "uid": film.uid},
        )
        return film

    async def get(self, film_id: FilmId) -> FilmRecord | None:
        return await self._store.find_by_id(film_id)

    async def list_all(self) -> list[FilmRecord]:
        return await self._store.list_all()

    async def update(self, film_id: FilmId, fields: dict) -> FilmRecord | None:
        payload = dict(fields)
        payload.pop("is_modified", None)
        violations = validate_film_fields(payload, partial=True)
        if violations:
            raise ValidationFailedError(
                violations, ErrorContext(film_id=str(film_id)),
            )

        existing = await self._store.find_by_id(film_id)
        if existing is None:
            return None
        if existing.source == Source.EXTERNAL.value:
            payload["is_modified"] = True

        film = await self._store.update(film_id, payload)
        if film is not None and film.source == Source.EXTERNAL.value:
            logger.info(
                "External film marked as locally modified",
                extra={"film_id": str(film_id), "uid": film.uid},
            )
        return film

    async def delete(self, film_id: FilmId) -> FilmRecord | None:
        film = await self._store.delete(film_id)
        if film is not None:
            logger.info("Deleted film", extra={"film_id": str(film_id)})
        return film
