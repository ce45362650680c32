"""Read Handlers — Info, Get, List (3 methods).

Invariants:
    - Read handlers never mutate the store
    - Get substitutes "Not found" for absent keys and echoes Key in the extension map
    - List data is the JSON object of a store snapshot

Design Decisions:
    - Store injected via constructor, same instance the write handlers use
    - Failures (missing Key, lock, serialization) raise ProcessError subclasses;
      the dispatcher converts them
"""

from ao_process.core.domain_types import (
    Action, KEY_TAG, NOT_FOUND_VALUE, RESPONSE_ACTIONS,
)
from ao_process.core.state_store import StateStore
from ao_process.core.wire_codec import encode_state
from ao_process.schemas.message import Message, Response
from ao_process.services.handler_helpers import require_key


class ReadHandlers:
    """Handlers that only read the state store."""

    def __init__(self, store: StateStore, process_name: str):
        self.store = store
        self.process_name = process_name

    def handle_info(self, message: Message) -> Response:
        """Greeting with the current entry count."""
        size = self.store.size()
        return Response(
            target=message.sender,
            action=RESPONSE_ACTIONS[Action.INFO],
            data=f"Hello from {self.process_name}! State entries: {size}",
        )

    def handle_get(self, message: Message) -> Response:
        """Value for the Key tag, or "Not found"."""
        key = require_key(message)
        value = self.store.get(key)
        return Response(
            target=message.sender,
            action=RESPONSE_ACTIONS[Action.GET],
            data=value if value is not None else NOT_FOUND_VALUE,
        ).with_field(KEY_TAG, key)

    def handle_list(self, message: Message) -> Response:
        """Whole store snapshot as a JSON object string."""
        snapshot = self.store.list()
        return Response(
            target=message.sender,
            action=RESPONSE_ACTIONS[Action.LIST],
            data=encode_state(snapshot),
        )
