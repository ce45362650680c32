"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if the state store lock cannot be acquired (readiness)

Design Decisions:
    - Separate liveness/readiness: liveness restarts, readiness removes from load balancer
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from ao_process.api.dependencies import get_runtime
from ao_process.core.errors import LockError
from ao_process.services.process_runtime import ProcessRuntime

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "ao-process",
        "version": "0.1.0",
    }


@router.get("/ready")
def readiness_check(runtime: ProcessRuntime = Depends(get_runtime)):
    """Readiness probe — the state store must be lockable."""
    try:
        entries = runtime.store.size()
    except LockError:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "state_store_unavailable",
            },
        )
    return {"status": "ready", "checks": {"state_store": "healthy"}, "entries": entries}
