"""Health & Readiness Probes - liveness and readiness endpoints.

Invariants:
    - GET /api/health/ always returns 200 if process is up (liveness)
    - GET /api/health/ready returns 503 if storage is missing or the database
      is unreachable (readiness)

Design Decisions:
    - Separate liveness/readiness: liveness restarts, readiness removes
      from load balancer
    - Backends without a database manager (in-memory) are ready once injected
"""

import logging
from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "students-api",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check(request: Request):
    """Readiness probe - includes database connectivity."""
    state = request.app.state
    db_manager = getattr(state, "db_manager", None)
    if db_manager is not None:
        ready = await db_manager.health_check()
    else:
        ready = getattr(state, "storage", None) is not None
    if not ready:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "storage_unavailable",
            },
        )
    return {"status": "ready", "checks": {"storage": "healthy"}}
