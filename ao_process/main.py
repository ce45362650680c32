"""AO Process API — FastAPI host for the process runtime.

Run: uvicorn ao_process.main:app (single process; the store is in-memory)

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ProcessError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Exactly one ProcessRuntime per app, created and initialized in the lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Runtime stored on app.state, never as a module global
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ao_process.api.error_handlers import register_error_handlers
from ao_process.api.routes import health, process
from ao_process.config import get_settings
from ao_process.services.process_runtime import ProcessRuntime

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    runtime = ProcessRuntime(settings=get_settings())
    runtime.init_process()
    app.state.runtime = runtime
    logger.info("AO Process API started")
    yield
    logger.info("AO Process API shutting down")
    app.state.runtime = None


app = FastAPI(
    title="AO Process API", version="0.1.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes — explicit registration
app.include_router(health.router)
app.include_router(process.router)

register_error_handlers(app)
