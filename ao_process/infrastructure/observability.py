"""Structured Logging — JSON formatter and setup for the process.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (action, message_id, sender, error_code) surfaced when present
    - JSON format in production, human-readable in development
    - Re-running setup_logging replaces the handler it installed before

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - setup_logging called from init_process (runtime) or the FastAPI lifespan
"""

import json
import logging
from datetime import datetime, timezone

_EXTRA_FIELDS = ("action", "message_id", "sender", "error_code", "path")


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Configure root logging for the process. Returns the installed handler."""
    for existing in list(logging.root.handlers):
        if getattr(existing, "_ao_process", False):
            logging.root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler._ao_process = True  # type: ignore[attr-defined]
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
