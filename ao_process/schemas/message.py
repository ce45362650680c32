"""Message Schemas — Pydantic models for inbound AO messages and outbound responses.

Invariants:
    - Every Message field is optional; absence is valid
    - Message.tags is always a mapping after validation (list form normalized)
    - Response.target/action/data are always present strings
    - to_wire(): fixed fields (Target, Action, Data) win over extension entries

Design Decisions:
    - Field aliases carry the wire names (Id, From, Block-Height, ...) so the
      Python side keeps snake_case; populate_by_name lets tests use either
    - extra="ignore": unknown top-level fields are dropped, not rejected
    - Numbers coerced to str: hosts send Timestamp/Block-Height as JSON numbers
    - Extension map is a plain dict merged at serialization time, never
      injected as dynamic model attributes
"""

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ao_process.core.domain_types import (
    ACTION_TAG, ERROR_ACTION, UNKNOWN_SENDER,
)

logger = logging.getLogger(__name__)

_FIXED_WIRE_FIELDS = ("Target", "Action", "Data")


class Message(BaseModel):
    """Inbound AO message."""

    model_config = ConfigDict(
        populate_by_name=True, extra="ignore", coerce_numbers_to_str=True,
    )

    id: str | None = Field(None, alias="Id")
    from_: str | None = Field(None, alias="From")
    owner: str | None = Field(None, alias="Owner")
    target: str | None = Field(None, alias="Target")
    anchor: str | None = Field(None, alias="Anchor")
    data: str | None = Field(None, alias="Data")
    tags: dict[str, str] | None = Field(None, alias="Tags")
    timestamp: str | None = Field(None, alias="Timestamp")
    block_height: str | None = Field(None, alias="Block-Height")
    hash_chain: str | None = Field(None, alias="Hash-Chain")

    @field_validator("tags", mode="before")
    @classmethod
    def normalize_tag_list(cls, v: Any) -> Any:
        """Accept [{"name": ..., "value": ...}] as well as a plain mapping."""
        if isinstance(v, list):
            tags: dict[str, Any] = {}
            for entry in v:
                if not isinstance(entry, dict) or "name" not in entry or "value" not in entry:
                    raise ValueError("tag entries must be objects with 'name' and 'value'")
                tags[entry["name"]] = entry["value"]
            return tags
        return v

    @property
    def sender(self) -> str:
        """Reply address: From, or "unknown" when absent."""
        return self.from_ if self.from_ is not None else UNKNOWN_SENDER

    def tag(self, name: str) -> str | None:
        """Value of tag *name*, or None."""
        if not self.tags:
            return None
        return self.tags.get(name)

    @property
    def action_name(self) -> str | None:
        """Value of the Action tag, or None. Only the tag selects a handler."""
        return self.tag(ACTION_TAG)


class Response(BaseModel):
    """Outbound AO response with an open extension map."""

    model_config = ConfigDict(populate_by_name=True)

    target: str = Field(alias="Target")
    action: str = Field(alias="Action")
    data: str = Field(alias="Data")
    extra_fields: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def error(cls, target: str, message: str) -> "Response":
        """Error-kind response addressed to *target*."""
        return cls(target=target, action=ERROR_ACTION, data=message)

    def with_field(self, key: str, value: str) -> "Response":
        """Add an extension field and return self (chainable)."""
        self.extra_fields[key] = value
        return self

    @property
    def is_error(self) -> bool:
        return self.action == ERROR_ACTION

    def to_wire(self) -> dict[str, str]:
        """Flatten into the wire object. Colliding extension keys are dropped."""
        wire = {"Target": self.target, "Action": self.action, "Data": self.data}
        for key, value in self.extra_fields.items():
            if key in _FIXED_WIRE_FIELDS:
                logger.warning(
                    f"Extension field '{key}' collides with a fixed response field; dropped",
                )
                continue
            wire[key] = value
        return wire
