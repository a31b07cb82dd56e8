"""Film Store tests — SQLAlchemy persistence and error mapping.

Tests cover:
    - Duplicate uid raises DuplicateKeyError and the session stays usable
    - Films without uid never collide
    - list_all orders by episode
    - update/delete on unknown ids return None
    - A driver error on read surfaces as PersistenceError, never a raw SQLAlchemy error
"""

from uuid import uuid4

import pytest
from sqlalchemy.exc import OperationalError

from holocron.core.errors import DuplicateKeyError, PersistenceError
from holocron.infrastructure.film_store import SqlFilmStore
from tests.fakes import local_film_fields


async def test_duplicate_uid_is_rejected(store):
    await store.create({**local_film_fields(), "uid": "7"})

    with pytest.raises(DuplicateKeyError) as exc_info:
        await store.create({**local_film_fields(title="Copy"), "uid": "7"})

    assert isinstance(exc_info.value, PersistenceError)
    assert exc_info.value.uid == "7"


async def test_session_usable_after_duplicate(store):
    await store.create({**local_film_fields(), "uid": "7"})
    with pytest.raises(DuplicateKeyError):
        await store.create({**local_film_fields(), "uid": "7"})

    other = await store.create({**local_film_fields(), "uid": "8"})
    assert (await store.find_by_external_id("8")).id == other.id
    assert len(await store.list_all()) == 2


async def test_films_without_uid_do_not_collide(store):
    await store.create(local_film_fields())
    await store.create(local_film_fields(title="Another local"))
    assert len(await store.list_all()) == 2


async def test_list_all_orders_by_episode(store):
    for episode in (6, 4, 5):
        await store.create(local_film_fields(episode_id=episode, title=f"Episode {episode}"))
    assert [f.episode_id for f in await store.list_all()] == [4, 5, 6]


async def test_update_replaces_list_fields(store):
    film = await store.create(local_film_fields(characters=["Luke", "Leia"]))
    updated = await store.update(film.id, {"characters": ["Chewbacca"]})
    assert updated.characters == ["Chewbacca"]


async def test_find_by_external_id_missing(store):
    assert await store.find_by_external_id("999") is None


async def test_unknown_ids_return_none(store):
    assert await store.find_by_id(uuid4()) is None
    assert await store.update(uuid4(), {"title": "x"}) is None
    assert await store.delete(uuid4()) is None


class _DroppedConnection:
    """Session stand-in whose first execute() fails; the rest pass through."""

    def __init__(self, session):
        self._session = session
        self._failed = False

    async def execute(self, *args, **kwargs):
        if not self._failed:
            self._failed = True
            raise OperationalError("SELECT", {}, Exception("connection reset"))
        return await self._session.execute(*args, **kwargs)

    def __getattr__(self, name):
        return getattr(self._session, name)


async def test_read_error_is_persistence_error(test_db):
    await SqlFilmStore(test_db).create({**local_film_fields(), "uid": "7"})
    store = SqlFilmStore(_DroppedConnection(test_db))

    with pytest.raises(PersistenceError) as exc_info:
        await store.find_by_external_id("7")

    assert exc_info.value.operation == "lookup"
    assert exc_info.value.message == "Database lookup failed: OperationalError"
    assert exc_info.value.context.uid == "7"
    assert (await store.find_by_external_id("7")).uid == "7"


async def test_list_error_is_persistence_error(test_db):
    store = SqlFilmStore(_DroppedConnection(test_db))
    with pytest.raises(PersistenceError, match="Database list failed"):
        await store.list_all()
    assert await store.list_all() == []
