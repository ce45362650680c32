"""Domain Types — action names, response tags and wire constants for the process.

Invariants:
    - Action has exactly 6 members; declaration order is the order advertised
      in "Unknown action" errors
    - Every Action maps to exactly one response tag in RESPONSE_ACTIONS
    - KEY_PATTERN is ASCII-only: [A-Za-z0-9_-]+

Design Decisions:
    - str Enums: compare equal to raw tag values and serialize without custom encoders
    - Tag names as constants: handlers never spell "Key" or "Action" inline
"""

import re
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

StateKey = NewType("StateKey", str)       # 1–64 chars, [A-Za-z0-9_-]
StateValue = NewType("StateValue", str)   # ≤1000 chars


# ─── Enums ───────────────────────────────────────────────────────

class Action(str, Enum):
    """Actions the process understands, carried in the `Action` tag."""
    INFO = "Info"
    SET = "Set"
    GET = "Get"
    LIST = "List"
    REMOVE = "Remove"
    CLEAR = "Clear"


# ─── Wire Constants ──────────────────────────────────────────────

ACTION_TAG = "Action"
KEY_TAG = "Key"
UNKNOWN_SENDER = "unknown"
NOT_FOUND_VALUE = "Not found"
ERROR_ACTION = "Error"

RESPONSE_ACTIONS: dict[Action, str] = {
    Action.INFO: "Info-Response",
    Action.SET: "Set-Response",
    Action.GET: "Get-Response",
    Action.LIST: "List-Response",
    Action.REMOVE: "Remove-Response",
    Action.CLEAR: "Clear-Response",
}

KEY_PATTERN = re.compile(r"[A-Za-z0-9_-]+")

DEFAULT_MAX_KEY_LENGTH = 64
DEFAULT_MAX_VALUE_LENGTH = 1000
DEFAULT_LOCK_TIMEOUT_SECONDS = 5.0


def available_actions() -> str:
    """Comma-separated action names, e.g. for error messages."""
    return ", ".join(a.value for a in Action)


def is_valid_key_format(key: str) -> bool:
    """True if key consists only of ASCII letters, digits, '_' and '-'."""
    return KEY_PATTERN.fullmatch(key) is not None
