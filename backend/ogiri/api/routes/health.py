"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 until the store has been built (readiness)
"""

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from ogiri.config import API_VERSION

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "ogiri-api",
        "version": API_VERSION,
    }


@router.get("/ready")
def readiness_check(request: Request):
    """Readiness probe — includes store availability."""
    store = getattr(request.app.state, "store", None)
    if store is None:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "reason": "store_unavailable"},
        )
    return {
        "status": "ready",
        "checks": {"store": store.backend.value},
        "themes": len(store.list_themes()),
    }
