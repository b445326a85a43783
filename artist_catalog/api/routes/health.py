"""Health Checks — liveness and readiness for the artist catalog.

Invariants:
    - GET /api/v1/health/ returns 200 while the process is up, with the configured
      service name and version
    - GET /api/v1/health/ready returns 503 when the artist store's database cannot
      be reached, 200 otherwise
    - Health responses never use the {"error": ...} envelope
"""

import logging
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from artist_catalog.config import get_settings
from artist_catalog.infrastructure import database

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    settings = get_settings()
    return {
        "status": "healthy",
        "service": settings.service_name,
        "version": settings.version,
    }


@router.get("/ready")
async def readiness_check():
    """Readiness: the artists database answers a ping."""
    manager = database.db_manager
    if manager is None:
        logger.warning("Readiness check before database initialization")
        return _not_ready("database_not_initialized")
    if not await manager.health_check():
        return _not_ready("database_unavailable")
    return {
        "status": "ready",
        "version": get_settings().version,
        "checks": {"database": "healthy", "backend": manager.engine.dialect.name},
    }


def _not_ready(reason: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "not_ready", "reason": reason},
    )
