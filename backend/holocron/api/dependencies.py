"""Dependency Wiring — builds services for each request.

Invariants:
    - One AsyncSession per request, shared by the store and every service built from it
    - The SWAPI client lives for one request and is always closed

Design Decisions:
    - Explicit factory functions over a DI container: every wire visible in one file
    - Tests override get_external_source / get_db via app.dependency_overrides
"""

from typing import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from holocron.config import get_settings
from holocron.core.repository_protocols import ExternalSource
from holocron.infrastructure.database import get_db
from holocron.infrastructure.film_store import SqlFilmStore
from holocron.infrastructure.swapi_client import SwapiClient
from holocron.services.catalog_service import CatalogService
from holocron.services.sync_orchestrator import SyncOrchestrator


async def get_external_source() -> AsyncGenerator[ExternalSource, None]:
    settings = get_settings()
    async with SwapiClient(
        settings.external_api_url, settings.external_timeout_seconds,
    ) as client:
        yield client


def get_film_store(db: AsyncSession = Depends(get_db)) -> SqlFilmStore:
    return SqlFilmStore(db)


def get_catalog_service(
    store: SqlFilmStore = Depends(get_film_store),
) -> CatalogService:
    return CatalogService(store)


def get_sync_orchestrator(
    source: ExternalSource = Depends(get_external_source),
    store: SqlFilmStore = Depends(get_film_store),
) -> SyncOrchestrator:
    return SyncOrchestrator(source, store, locale=get_settings().report_locale)
