"""Health Checks — is the catalog process up, and can it reach its store.

Invariants:
    - GET /api/v1/health/ answers 200 whenever the process serves requests
    - GET /api/v1/health/ready answers 503 until the lifespan has created the
      session manager, and whenever SELECT 1 fails
    - Neither check calls the SWAPI feed: a feed outage fails syncs, not the service

Design Decisions:
    - db_manager read through the module at call time: it is set in the lifespan,
      after this module is imported
"""

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

import holocron.infrastructure.database as database

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])

SERVICE_NAME = "holocron-api"
SERVICE_VERSION = "1.0.0"


@router.get("/", status_code=status.HTTP_200_OK)
async def liveness():
    return {"status": "healthy", "service": SERVICE_NAME, "version": SERVICE_VERSION}


@router.get("/ready")
async def readiness():
    """503 with a reason while the catalog store is unreachable."""
    manager = database.db_manager
    if manager is None:
        reason = "database_not_initialized"
    elif not await manager.health_check():
        reason = "database_unavailable"
    else:
        return {"status": "ready", "checks": {"database": "healthy"}}

    logger.warning("Readiness check failed", extra={"error_code": reason.upper()})
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "not_ready", "reason": reason},
    )
