"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: boundary methods are async because implementations do IO,
      but core pure functions that USE these protocols are never async themselves —
      the services orchestrate the async calls around the pure logic
"""

from datetime import datetime
from typing import Protocol

from holocron.core.domain_types import ExternalUid, FilmId
from holocron.core.external_film import ExternalFilm, UndecodableFilm


class FilmRecord(Protocol):
    """Structural contract for stored films passed between store and services.

    Avoids coupling services to the ORM model while giving mypy real type
    information (unlike Any).
    """
    id: FilmId
    uid: ExternalUid | None
    title: str
    source: str
    is_modified: bool
    last_sync_date: datetime | None


class ExternalSource(Protocol):
    """Contract for the read-only feed.

    Transport or envelope failure -> SourceUnavailableError. A malformed entry
    inside a good collection comes back as UndecodableFilm, not as an error.
    """
    async def fetch_collection(self) -> list[ExternalFilm | UndecodableFilm]: ...
    async def fetch_one(self, external_id: ExternalUid) -> ExternalFilm: ...


class FilmStore(Protocol):
    """Contract for film persistence — implemented by shell.

    Reads and writes raise PersistenceError (DuplicateKeyError on a uid collision),
    never a driver or ORM exception.
    update/delete return None when the id does not exist.
    """
    async def find_by_external_id(self, uid: ExternalUid) -> FilmRecord | None: ...
    async def find_by_id(self, film_id: FilmId) -> FilmRecord | None: ...
    async def create(self, fields: dict) -> FilmRecord: ...
    async def update(self, film_id: FilmId, fields: dict) -> FilmRecord | None: ...
    async def delete(self, film_id: FilmId) -> FilmRecord | None: ...
    async def list_all(self) -> list[FilmRecord]: ...
