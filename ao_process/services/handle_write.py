"""Write Handlers — Set, Remove, Clear (3 methods).

Invariants:
    - Set checks Key, then Data, then key charset, then store limits, in that order
    - A bad key charset yields a deliberate Error response (not an exception)
      and leaves the store untouched
    - Length violations propagate as InvalidKeyError / InvalidValueError

Design Decisions:
    - Charset rule lives here, not in StateStore: the store stays a reusable
      raw map, the handler layer owns business policy
"""

import logging

from ao_process.core.domain_types import (
    Action, RESPONSE_ACTIONS, is_valid_key_format,
)
from ao_process.core.state_store import StateStore
from ao_process.schemas.message import Message, Response
from ao_process.services.handler_helpers import require_key, require_value

logger = logging.getLogger(__name__)

INVALID_KEY_FORMAT_MESSAGE = (
    "Invalid key format. Use alphanumeric characters, underscores, and hyphens only"
)


class WriteHandlers:
    """Handlers that mutate the state store."""

    def __init__(self, store: StateStore):
        self.store = store

    def handle_set(self, message: Message) -> Response:
        """Store Data under the Key tag."""
        key = require_key(message)
        value = require_value(message)

        if not is_valid_key_format(key):
            logger.info(
                f"Rejected key with invalid format: {key!r}",
                extra={"message_id": message.id, "sender": message.sender},
            )
            return Response.error(message.sender, INVALID_KEY_FORMAT_MESSAGE)

        self.store.set(key, value)
        return Response(
            target=message.sender,
            action=RESPONSE_ACTIONS[Action.SET],
            data=f"Successfully set {key} to {value}",
        )

    def handle_remove(self, message: Message) -> Response:
        """Remove the Key tag's entry; text depends on whether it existed."""
        key = require_key(message)
        removed = self.store.remove(key)
        data = f"Successfully removed {key}" if removed else f"Key {key} not found"
        return Response(
            target=message.sender,
            action=RESPONSE_ACTIONS[Action.REMOVE],
            data=data,
        )

    def handle_clear(self, message: Message) -> Response:
        self.store.clear()
        return Response(
            target=message.sender,
            action=RESPONSE_ACTIONS[Action.CLEAR],
            data="State cleared successfully",
        )
