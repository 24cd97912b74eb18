"""Health Probes — process liveness and database readiness for the deployment platform."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

import aurapass.infrastructure.database as database

router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("/")
async def liveness():
    return {"status": "healthy", "service": "aurapass-api"}


@router.get("/ready")
async def readiness():
    """503 while the database does not answer SELECT 1."""
    manager = database.db_manager
    if manager is None or not await manager.health_check():
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "checks": {"database": "unavailable"}},
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
