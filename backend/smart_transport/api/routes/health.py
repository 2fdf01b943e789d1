"""Health & Readiness Checks: liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 unless storage is READY and answers a ping (readiness)
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from smart_transport import __version__
from smart_transport.core.domain_types import StorageState
from smart_transport.infrastructure import database

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness check. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "smart-transport-api",
        "version": __version__,
    }


@router.get("/ready")
async def readiness_check():
    """Readiness check - includes storage connectivity."""
    manager = database.storage_manager
    storage_state = manager.state if manager else StorageState.CONNECTING
    if not manager or not await manager.health_check():
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "storage": storage_state.value},
        )
    return {"status": "ready", "storage": storage_state.value}
