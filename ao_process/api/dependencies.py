"""API Dependencies — resolve the ProcessRuntime owned by the FastAPI app.

Invariants:
    - The runtime lives on app.state, created by the lifespan in main.py
    - Requests before initialization raise ProcessNotReadyError (503), never AttributeError

Design Decisions:
    - app.state over a module-level singleton: tests override get_runtime via
      app.dependency_overrides with an isolated runtime
"""

from fastapi import Request

from ao_process.core.errors import ProcessNotReadyError
from ao_process.services.process_runtime import ProcessRuntime


def get_runtime(request: Request) -> ProcessRuntime:
    """FastAPI dependency for the process runtime."""
    runtime = getattr(request.app.state, "runtime", None)
    if runtime is None:
        raise ProcessNotReadyError()
    return runtime
