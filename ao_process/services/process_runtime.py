"""Process Runtime — the entry points a host calls: handle, get_state, clear_state, init_process.

Invariants:
    - handle() never raises; it always returns parseable JSON text
    - Undecodable input yields an Error response addressed to "unknown"
    - get_state() returns "{}" and clear_state() returns False on internal error
    - One runtime owns one StateStore for its whole lifetime

Design Decisions:
    - Runtime is an object, not module-level functions over a global store:
      the HTTP host keeps one per app, tests build as many as they need
    - init_process is separate from __init__: constructing a runtime has no
      logging side effects
"""

import logging

from ao_process.config import Settings, get_settings
from ao_process.core.errors import MessageParseError, ProcessError
from ao_process.core.state_store import StateStore
from ao_process.core.wire_codec import (
    EMPTY_STATE, decode_message, encode_parse_error, encode_response, encode_state,
)
from ao_process.infrastructure.observability import setup_logging
from ao_process.services.action_dispatch import ActionDispatch

logger = logging.getLogger(__name__)


class ProcessRuntime:
    """Host-facing facade over one state store and its dispatcher."""

    def __init__(
        self, store: StateStore | None = None, settings: Settings | None = None,
    ):
        self.settings = settings or get_settings()
        self.store = store or StateStore(
            max_key_length=self.settings.max_key_length,
            max_value_length=self.settings.max_value_length,
            lock_timeout_seconds=self.settings.lock_timeout_seconds,
        )
        self.dispatcher = ActionDispatch(self.store, self.settings.process_name)

    def init_process(self) -> None:
        """One-time setup hook: configure logging. Call once per process."""
        setup_logging(self.settings.log_level, self.settings.log_format)
        logger.info(f"{self.settings.process_name} initialized")

    def handle(self, raw_message: str | bytes) -> str:
        """Decode, dispatch and encode one message."""
        try:
            message = decode_message(raw_message)
        except MessageParseError as e:
            logger.warning(
                f"Rejected inbound message: {e.message}",
                extra={"error_code": e.code},
            )
            return encode_parse_error(e)

        response = self.dispatcher.dispatch(message)
        return encode_response(response)

    def get_state(self) -> str:
        """Full store snapshot as JSON text."""
        try:
            return encode_state(self.store.list())
        except ProcessError as e:
            logger.error(
                f"Error getting state: {e.message}", extra={"error_code": e.code},
            )
            return EMPTY_STATE

    def clear_state(self) -> bool:
        """Empty the store. Returns whether it succeeded."""
        try:
            self.store.clear()
        except ProcessError as e:
            logger.error(
                f"Error clearing state: {e.message}", extra={"error_code": e.code},
            )
            return False
        logger.info("State cleared")
        return True
