"""Catalog Service tests — CRUD with provenance bookkeeping.

Tests cover:
    - create() writes source=local, is_modified=False, empty lists by default
    - Invalid payload raises ValidationFailedError and writes nothing
    - Updating an external film forces is_modified=True
    - Updating a local film never sets is_modified, even when asked to
    - Missing ids yield None for get / update / delete
    - An update never changes the uid linking a film to the feed
"""

from datetime import datetime, timezone
from uuid import uuid4

import pytest

from holocron.core.errors import ValidationFailedError
from tests.fakes import external_film, local_film_fields


async def _seed_external(store, uid: str = "1"):
    return await store.create({
        **external_film(uid).to_content_fields(),
        "uid": uid,
        "source": "external",
        "is_modified": False,
        "last_sync_date": datetime(2026, 1, 1, tzinfo=timezone.utc),
    })


# --- create ------------------------------------------------------------------


async def test_create_writes_local_provenance(catalog):
    film = await catalog.create(local_film_fields())

    assert film.id is not None
    assert film.source == "local"
    assert film.is_modified is False
    assert film.last_sync_date is None
    assert film.characters == []
    assert film.species == []


async def test_create_ignores_caller_modified_flag(catalog):
    film = await catalog.create(local_film_fields(is_modified=True))
    assert film.is_modified is False


async def test_create_keeps_supplied_lists(catalog):
    film = await catalog.create(local_film_fields(planets=["Kashyyyk"]))
    assert film.planets == ["Kashyyyk"]


async def test_invalid_create_writes_nothing(catalog, store):
    with pytest.raises(ValidationFailedError) as exc_info:
        await catalog.create(local_film_fields(title="", episode_id="five"))

    assert {v.field for v in exc_info.value.violations} == {"title", "episode_id"}
    assert await store.list_all() == []


async def test_provenance_fields_are_not_writable(catalog):
    with pytest.raises(ValidationFailedError) as exc_info:
        await catalog.create(local_film_fields(source="external"))
    assert [v.field for v in exc_info.value.violations] == ["source"]


# --- read --------------------------------------------------------------------


async def test_get_and_list(catalog):
    created = await catalog.create(local_film_fields())
    assert (await catalog.get(created.id)).title == "The Holiday Special"
    assert [f.id for f in await catalog.list_all()] == [created.id]


async def test_get_missing_returns_none(catalog):
    assert await catalog.get(uuid4()) is None


# --- update ------------------------------------------------------------------


async def test_update_external_film_marks_modified(catalog, store):
    seeded = await _seed_external(store)
    film = await catalog.update(seeded.id, {"title": "A New Hope (Special Edition)"})

    assert film.title == "A New Hope (Special Edition)"
    assert film.is_modified is True
    assert film.source == "external"
    assert film.uid == "1"


async def test_update_external_film_cannot_clear_flag(catalog, store):
    seeded = await _seed_external(store)
    film = await catalog.update(seeded.id, {"director": "Irvin Kershner", "is_modified": False})
    assert film.is_modified is True


async def test_update_local_film_never_sets_flag(catalog):
    created = await catalog.create(local_film_fields())
    film = await catalog.update(created.id, {"director": "Someone else", "is_modified": True})

    assert film.director == "Someone else"
    assert film.is_modified is False
    assert film.source == "local"


async def test_update_replaces_lists_wholesale(catalog):
    created = await catalog.create(local_film_fields(planets=["Kashyyyk", "Tatooine"]))
    film = await catalog.update(created.id, {"planets": ["Hoth"]})
    assert film.planets == ["Hoth"]


async def test_invalid_update_leaves_film_untouched(catalog):
    created = await catalog.create(local_film_fields())
    with pytest.raises(ValidationFailedError):
        await catalog.update(created.id, {"release_date": "17/11/1978"})
    assert (await catalog.get(created.id)).release_date == "1978-11-17"


async def test_update_cannot_change_uid(catalog, store):
    seeded = await _seed_external(store, "4")
    with pytest.raises(ValidationFailedError) as exc_info:
        await catalog.update(seeded.id, {"uid": "5", "title": "Renamed"})

    assert [v.field for v in exc_info.value.violations] == ["uid"]
    film = await catalog.get(seeded.id)
    assert (film.uid, film.title, film.is_modified) == ("4", "Film 4", False)
    assert await store.find_by_external_id("5") is None


async def test_update_missing_returns_none(catalog):
    assert await catalog.update(uuid4(), {"title": "Ghost"}) is None


# --- delete ------------------------------------------------------------------


async def test_delete_returns_removed_film(catalog):
    created = await catalog.create(local_film_fields())
    deleted = await catalog.delete(created.id)

    assert deleted.id == created.id
    assert await catalog.get(created.id) is None


async def test_delete_missing_returns_none(catalog):
    assert await catalog.delete(uuid4()) is None
