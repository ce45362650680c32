"""Wire Codec — JSON text <-> Message/Response, with hardcoded fallbacks.

Invariants:
    - decode_message raises MessageParseError for invalid UTF-8, malformed JSON or a bad shape
    - encode_response / encode_parse_error never raise; they fall back to fixed strings
    - encode_state raises SerializationError (callers decide the fallback)

Design Decisions:
    - Fallback strings are literals, not built with json.dumps: they must
      survive the very failure they cover
    - No schema version field on the wire (ADR: hosts expect the bare AO shape)
"""

import json

from pydantic import ValidationError

from ao_process.core.domain_types import UNKNOWN_SENDER
from ao_process.core.errors import MessageParseError, SerializationError
from ao_process.schemas.message import Message, Response

CRITICAL_JSON_FALLBACK = (
    '{"Target":"unknown","Action":"Error","Data":"Critical JSON error"}'
)
RESPONSE_SERIALIZATION_FALLBACK = (
    '{"Target":"unknown","Action":"Error","Data":"Response serialization error"}'
)
EMPTY_STATE = "{}"


def _describe_validation_error(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"])
        parts.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return "; ".join(parts)


def decode_message(raw: str | bytes) -> Message:
    """Parse inbound JSON text (or UTF-8 bytes) into a Message."""
    if isinstance(raw, bytes):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise MessageParseError(f"invalid UTF-8 at byte {e.start}") from e
    try:
        return Message.model_validate_json(raw)
    except ValidationError as e:
        raise MessageParseError(_describe_validation_error(e)) from e


def encode_response(response: Response) -> str:
    """Serialize a handled response; fixed fallback on failure."""
    try:
        return json.dumps(response.to_wire())
    except (TypeError, ValueError):
        return RESPONSE_SERIALIZATION_FALLBACK


def encode_parse_error(error: MessageParseError) -> str:
    """Serialize the Error response for an undecodable message."""
    try:
        return json.dumps(Response.error(UNKNOWN_SENDER, error.message).to_wire())
    except (TypeError, ValueError):
        return CRITICAL_JSON_FALLBACK


def encode_state(state: dict[str, str]) -> str:
    """Serialize a store snapshot as a JSON object."""
    try:
        return json.dumps(state)
    except (TypeError, ValueError) as e:
        raise SerializationError(str(e)) from e
