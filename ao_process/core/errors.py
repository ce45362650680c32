"""Error Hierarchy — typed, categorized exceptions for every process failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Input and validation errors are recoverable; lock errors are critical
    - to_response() produces the HTTP envelope; the dispatcher only reads .message
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with ProcessError base: the dispatcher catches one type
      and turns it into an Error response
    - Deliberate Error responses (bad key format) are NOT exceptions; only
      failures travel through this hierarchy
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    MISSING_INPUT = "missing_input"
    CONCURRENCY = "concurrency"
    SERIALIZATION = "serialization"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    message_id: str | None = None
    action: str | None = None
    sender: str | None = None
    debug_info: dict[str, Any] | None = None


class ProcessError(Exception):
    """Base exception for all process errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "message_id": self.context.message_id,
                    "action": self.context.action,
                },
            }
        }


# ─── Input Errors ───────────────────────────────────────────────

class MissingFieldError(ProcessError):
    """A required tag or message field is absent."""
    def __init__(self, field_name: str, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "MISSING_FIELD", ErrorCategory.MISSING_INPUT,
            ErrorSeverity.WARNING, context, 400,
        )
        self.field_name = field_name


class MessageParseError(ProcessError):
    """Inbound message text is not a valid message encoding."""
    def __init__(self, detail: str, context: ErrorContext | None = None):
        super().__init__(
            f"JSON parse error: {detail}",
            "MESSAGE_PARSE_ERROR", ErrorCategory.SERIALIZATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.detail = detail


# ─── Validation Errors ──────────────────────────────────────────

class InvalidKeyError(ProcessError):
    """Key is empty or longer than the configured maximum."""
    def __init__(self, max_length: int, context: ErrorContext | None = None):
        super().__init__(
            f"Key must be between 1 and {max_length} characters",
            "INVALID_KEY", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.max_length = max_length


class InvalidValueError(ProcessError):
    """Value is longer than the configured maximum."""
    def __init__(self, max_length: int, context: ErrorContext | None = None):
        super().__init__(
            f"Value must be at most {max_length} characters",
            "INVALID_VALUE", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.max_length = max_length


# ─── Infrastructure Errors ──────────────────────────────────────

class LockError(ProcessError):
    """State store lock could not be acquired."""
    def __init__(self, timeout_seconds: float, context: ErrorContext | None = None):
        super().__init__(
            f"State lock error: not acquired within {timeout_seconds}s",
            "STATE_LOCK_ERROR", ErrorCategory.CONCURRENCY,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.timeout_seconds = timeout_seconds


class SerializationError(ProcessError):
    """A payload could not be encoded for the wire."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            f"JSON serialization error: {message}",
            "SERIALIZATION_ERROR", ErrorCategory.SERIALIZATION,
            ErrorSeverity.ERROR, context, 500,
        )


class ProcessNotReadyError(ProcessError):
    """HTTP host received a request before the runtime was initialized."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Process runtime is not initialized",
            "PROCESS_NOT_READY", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 503,
        )
