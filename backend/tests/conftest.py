"""Root conftest — shared test configuration and database fixtures.

Invariants:
    - Environment set before any holocron module reads settings
    - Every test gets a fresh in-memory SQLite database

Design Decisions:
    - SQLite in-memory: fast, no external dependency; the uid unique index behaves
      the same as on PostgreSQL
"""

import os

# Ensure tests never reach a real database or a real feed
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")
os.environ.setdefault("EXTERNAL_API_URL", "http://swapi.test/api")
os.environ.setdefault("JWT_SECRET", "test-secret-key-for-holocron-suite")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)

from holocron.db.base import Base  # noqa: E402
import holocron.models  # noqa: E402,F401


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session
