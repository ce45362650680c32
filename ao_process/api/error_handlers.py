"""Error Handlers — global exception handlers for the process HTTP host.

Invariants:
    - ProcessError → structured JSON with error code, message, severity
    - Exception (catch-all) → never leaks internal details

Design Decisions:
    - No RequestValidationError handler: process routes take raw text, so
      message validation errors are AO Error responses, not HTTP errors
    - Extracted from main.py to keep the entry point thin
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from ao_process.core.errors import ErrorSeverity, ProcessError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_process_error_handler(app)
    _register_generic_error_handler(app)


def _register_process_error_handler(app: FastAPI) -> None:
    """Register process domain/infrastructure error handler."""

    @app.exception_handler(ProcessError)
    async def process_error_handler(request: Request, exc: ProcessError):
        """Handle all process domain/infrastructure errors."""
        logger.error(
            f"ProcessError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True, extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": "internal",
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )
