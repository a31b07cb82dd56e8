"""Service test fixtures — a real SqlFilmStore over the per-test SQLite session.

Invariants:
    - Every test gets a fresh in-memory SQLite database (root conftest test_db)
    - Services talk to the same store class production uses; only the feed is faked
"""

import pytest

from holocron.infrastructure.film_store import SqlFilmStore
from holocron.services.catalog_service import CatalogService


@pytest.fixture
def store(test_db):
    return SqlFilmStore(test_db)


@pytest.fixture
def catalog(store):
    return CatalogService(store)
