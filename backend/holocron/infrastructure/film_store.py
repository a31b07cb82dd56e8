"""Film Store — SQLAlchemy implementation of the FilmStore protocol.

Invariants:
    - Every write commits on its own: no transaction spans two films
    - A failed read or write rolls the session back before raising, so the next call works
    - IntegrityError -> DuplicateKeyError (uid unique index); any other SQLAlchemyError,
      reads and post-commit refresh included -> PersistenceError
    - update() replaces list fields wholesale; unknown ids yield None, never an error

Design Decisions:
    - Store owns its error mapping (not DatabaseSessionManager): the sync
      orchestrator must see a per-item error while the session stays usable
    - Returns ORM rows; response schemas serialize them with from_attributes
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from holocron.core.domain_types import ExternalUid, FilmId
from holocron.core.errors import DuplicateKeyError, ErrorContext, PersistenceError
from holocron.models.film import Film

logger = logging.getLogger(__name__)


class SqlFilmStore:
    """Film persistence over one AsyncSession."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def find_by_external_id(self, uid: ExternalUid) -> Film | None:
        async with self._guard("lookup", uid=uid):
            result = await self._db.execute(select(Film).where(Film.uid == uid))
            return result.scalar_one_or_none()

    async def find_by_id(self, film_id: FilmId) -> Film | None:
        async with self._guard("lookup", film_id=film_id):
            return await self._db.get(Film, film_id)

    async def list_all(self) -> list[Film]:
        async with self._guard("list"):
            result = await self._db.execute(
                select(Film).order_by(Film.episode_id, Film.created_at),
            )
            return list(result.scalars().all())

    async def create(self, fields: dict) -> Film:
        uid = fields.get("uid")
        async with self._guard("create", uid=uid):
            film = Film(**fields)
            self._db.add(film)
            await self._db.commit()
            await self._db.refresh(film)
            return film

    async def update(self, film_id: FilmId, fields: dict) -> Film | None:
        async with self._guard("update", uid=fields.get("uid"), film_id=film_id):
            film = await self._db.get(Film, film_id)
            if film is None:
                return None
            for name, value in fields.items():
                setattr(film, name, value)
            await self._db.commit()
            await self._db.refresh(film)
            return film

    async def delete(self, film_id: FilmId) -> Film | None:
        async with self._guard("delete", film_id=film_id):
            film = await self._db.get(Film, film_id)
            if film is None:
                return None
            await self._db.delete(film)
            await self._db.commit()
            return film

    @asynccontextmanager
    async def _guard(
        self, operation: str, uid: str | None = None, film_id: FilmId | None = None,
    ) -> AsyncIterator[None]:
        ctx = ErrorContext(film_id=str(film_id) if film_id else None, uid=uid)
        try:
            yield
        except IntegrityError as e:
            await self._db.rollback()
            logger.warning(
                f"Duplicate uid on {operation}: {e.orig}",
                extra={"uid": uid, "error_code": "DUPLICATE_KEY"},
            )
            raise DuplicateKeyError(uid, ctx) from e
        except SQLAlchemyError as e:
            await self._db.rollback()
            logger.error(
                f"Film {operation} failed: {e}",
                extra={"uid": uid, "error_code": "PERSISTENCE_ERROR"},
            )
            raise PersistenceError(type(e).__name__, operation, ctx) from e
