"""Handler Helpers — required-input extraction shared by read and write handlers.

Invariants:
    - Missing inputs raise MissingFieldError with the exact user-facing text
    - Empty strings count as present (only absence is an error)
"""

from ao_process.core.domain_types import KEY_TAG
from ao_process.core.errors import ErrorContext, MissingFieldError
from ao_process.schemas.message import Message


def _context_for(message: Message) -> ErrorContext:
    return ErrorContext(
        message_id=message.id, action=message.action_name, sender=message.sender,
    )


def require_key(message: Message) -> str:
    """The `Key` tag, or MissingFieldError("Key is required")."""
    key = message.tag(KEY_TAG)
    if key is None:
        raise MissingFieldError(KEY_TAG, "Key is required", _context_for(message))
    return key


def require_value(message: Message) -> str:
    """The message `Data` field, or MissingFieldError("Value is required")."""
    if message.data is None:
        raise MissingFieldError("Data", "Value is required", _context_for(message))
    return message.data
