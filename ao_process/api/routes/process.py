"""Process Routes — HTTP surface over the ProcessRuntime entry points.

Invariants:
    - POST /messages always answers 200 with the runtime's response text
      (errors are encoded in the AO response, not in the HTTP status)
    - GET /state returns the raw JSON snapshot text
    - DELETE /state reports whether the clear succeeded

Design Decisions:
    - Body passed through as raw bytes regardless of Content-Type: decoding
      belongs to the runtime, so invalid UTF-8 or malformed JSON gets an AO
      Error response instead of a 422
    - Runtime calls block on the store lock, so they run in the threadpool
"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response
from starlette.concurrency import run_in_threadpool

from ao_process.api.dependencies import get_runtime
from ao_process.services.process_runtime import ProcessRuntime

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/process", tags=["process"])


@router.post("/messages")
async def handle_message(
    request: Request, runtime: ProcessRuntime = Depends(get_runtime),
):
    """Handle one raw AO message and return the raw AO response."""
    raw_message = await request.body()
    content = await run_in_threadpool(runtime.handle, raw_message)
    return Response(content=content, media_type="application/json")


@router.get("/state")
def get_state(runtime: ProcessRuntime = Depends(get_runtime)):
    """Full state snapshot."""
    return Response(content=runtime.get_state(), media_type="application/json")


@router.delete("/state")
def clear_state(runtime: ProcessRuntime = Depends(get_runtime)):
    """Clear all state entries."""
    cleared = runtime.clear_state()
    if not cleared:
        logger.warning("State clear requested over HTTP failed")
    return {"cleared": cleared}
