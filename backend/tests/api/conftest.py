"""API test fixtures — FastAPI app over the test database and a fake feed.

Invariants:
    - get_db dependency overridden to use the per-test SQLite session factory
    - db_manager patched so the readiness check sees the test engine
    - get_external_source overridden with the test's FakeSource; no network

Design Decisions:
    - ASGITransport does not run the lifespan: everything it would set up is wired here
    - feed fixture is mutable per test: tests append films or flip fail
"""

import pytest
from httpx import ASGITransport, AsyncClient

import holocron.infrastructure.database as db_module
from holocron.api.dependencies import get_external_source
from holocron.infrastructure.database import DatabaseSessionManager, get_db
from holocron.main import app
from tests.fakes import FakeSource, bearer


@pytest.fixture
def feed():
    return FakeSource()


@pytest.fixture
async def client(test_engine, test_session_factory, feed):
    """FastAPI test client with DB and feed dependencies overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    async def override_get_external_source():
        yield feed

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_external_source] = override_get_external_source

    saved_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = saved_manager


@pytest.fixture
def admin_headers():
    return bearer("admin")


@pytest.fixture
def user_headers():
    return bearer("user")
