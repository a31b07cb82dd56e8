"""Catalog Routes — film CRUD, feed passthrough and the sync trigger.

Invariants:
    - Writes (create, update, delete, sync) require role admin
    - Single-film reads require any authenticated role
    - Listing and feed passthrough are public
    - Routes never contain business logic (delegate to services / core)
    - Absent films surface as ResourceNotFoundError -> 404 envelope

Design Decisions:
    - /external routes declared before /{film_id}: the literal path wins
    - Passthrough never touches the store: it shows what the next sync would see
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from holocron.api.auth import Principal, require_admin, require_any_role
from holocron.api.dependencies import (
    get_catalog_service, get_external_source, get_sync_orchestrator,
)
from holocron.core.domain_types import ExternalUid, FilmId
from holocron.core.errors import ResourceNotFoundError
from holocron.core.external_film import summarize_external, summarize_one
from holocron.core.repository_protocols import ExternalSource, FilmRecord
from holocron.schemas.film import (
    FilmCreate, FilmDeleted, FilmResponse, FilmUpdate, SyncReportResponse,
)
from holocron.services.catalog_service import CatalogService
from holocron.services.sync_orchestrator import SyncOrchestrator

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/catalog", tags=["catalog"])


def _film_or_404(film: FilmRecord | None, film_id: UUID) -> FilmRecord:
    if film is None:
        raise ResourceNotFoundError("Film", str(film_id))
    return film


@router.get("", response_model=list[FilmResponse])
async def list_films(service: CatalogService = Depends(get_catalog_service)):
    """All films in the local catalog."""
    return await service.list_all()


@router.get("/external")
async def list_external_films(
    fullinfo: bool = Query(False),
    source: ExternalSource = Depends(get_external_source),
):
    """Films straight from the feed, nothing persisted."""
    films = await source.fetch_collection()
    return summarize_external(films, full_info=fullinfo)


@router.get("/external/{uid}")
async def get_external_film(
    uid: str,
    fullinfo: bool = Query(False),
    source: ExternalSource = Depends(get_external_source),
):
    film = await source.fetch_one(ExternalUid(uid))
    return summarize_one(film, full_info=fullinfo)


@router.post("/sync", response_model=SyncReportResponse)
async def sync_films(
    principal: Principal = Depends(require_admin),
    orchestrator: SyncOrchestrator = Depends(get_sync_orchestrator),
):
    """Pull the feed and apply it to the catalog, skipping locally modified films."""
    logger.info(f"Sync requested by {principal.username}")
    report = await orchestrator.run_sync()
    return report.to_dict()


@router.post(
    "", response_model=FilmResponse, status_code=status.HTTP_201_CREATED,
)
async def create_film(
    body: FilmCreate,
    principal: Principal = Depends(require_admin),
    service: CatalogService = Depends(get_catalog_service),
):
    return await service.create(body.model_dump(exclude_none=True))


@router.get("/{film_id}", response_model=FilmResponse)
async def get_film(
    film_id: UUID,
    principal: Principal = Depends(require_any_role),
    service: CatalogService = Depends(get_catalog_service),
):
    return _film_or_404(await service.get(FilmId(film_id)), film_id)


@router.put("/{film_id}", response_model=FilmResponse)
async def update_film(
    film_id: UUID,
    body: FilmUpdate,
    principal: Principal = Depends(require_admin),
    service: CatalogService = Depends(get_catalog_service),
):
    """Partial update. Editing a synced film protects it from future syncs."""
    film = await service.update(FilmId(film_id), body.model_dump(exclude_unset=True))
    return _film_or_404(film, film_id)


@router.delete("/{film_id}", response_model=FilmDeleted)
async def delete_film(
    film_id: UUID,
    principal: Principal = Depends(require_admin),
    service: CatalogService = Depends(get_catalog_service),
):
    film = _film_or_404(await service.delete(FilmId(film_id)), film_id)
    return {
        "message": "Film deleted",
        "film": FilmResponse.model_validate(film),
    }
