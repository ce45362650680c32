"""Action Dispatch — explicit routing from the Action tag to a handler.

Invariants:
    - Every action->handler mapping is visible — no getattr magic, no auto-discovery
    - Missing Action tag returns an Error response "Action is required" (never raises)
    - Unknown actions return an Error response listing all available actions
    - ProcessError from a handler becomes an Error response carrying its message
    - Any other exception becomes a generic Error response; details only in logs
    - Deliberate Error responses from handlers pass through untouched

Design Decisions:
    - Explicit dict over getattr: every mapping visible in one place
    - Handlers split by read/write: max ~3 methods per class
    - Handlers instantiated once per dispatcher, sharing one StateStore
"""

import logging
from collections.abc import Callable

from ao_process.core.domain_types import ACTION_TAG, Action, available_actions
from ao_process.core.errors import MissingFieldError, ProcessError
from ao_process.core.state_store import StateStore
from ao_process.schemas.message import Message, Response
from ao_process.services.handle_read import ReadHandlers
from ao_process.services.handle_write import WriteHandlers

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"


class ActionDispatch:
    """Routes Action -> handler. Explicit registration, no auto-discovery."""

    def __init__(self, store: StateStore, process_name: str):
        self._store = store
        read = ReadHandlers(store, process_name)
        write = WriteHandlers(store)

        # ADR: every mapping explicit — adding an action requires editing this dict
        self._handlers: dict[Action, Callable[[Message], Response]] = {
            Action.INFO: read.handle_info,
            Action.SET: write.handle_set,
            Action.GET: read.handle_get,
            Action.LIST: read.handle_list,
            Action.REMOVE: write.handle_remove,
            Action.CLEAR: write.handle_clear,
        }

    def dispatch(self, message: Message) -> Response:
        """Route message to its handler. Always returns a Response."""
        action_name = message.action_name
        log_extra = {
            "action": action_name,
            "message_id": message.id,
            "sender": message.sender,
        }
        logger.info("Received message", extra=log_extra)

        try:
            response = self._route(message, action_name)
        except ProcessError as e:
            logger.warning(
                f"Action failed: {e.message}",
                extra={**log_extra, "error_code": e.code},
            )
            response = Response.error(message.sender, e.message)
        except Exception as e:
            logger.error(
                f"Unhandled exception while handling {action_name!r}: {e}",
                exc_info=True, extra=log_extra,
            )
            response = Response.error(message.sender, UNEXPECTED_ERROR_MESSAGE)

        logger.debug(
            f"Sending response: {response.action}", extra=log_extra,
        )
        return response

    def _route(self, message: Message, action_name: str | None) -> Response:
        if action_name is None:
            raise MissingFieldError(ACTION_TAG, "Action is required")
        try:
            action = Action(action_name)
        except ValueError:
            return Response.error(
                message.sender,
                f"Unknown action: {action_name}. "
                f"Available actions: {available_actions()}",
            )
        return self._handlers[action](message)
