"""State Store — the process-wide key/value mapping shared by all handlers.

Invariants:
    - Every operation (read or write) holds the lock for its whole duration
    - Lock acquisition is bounded; a timeout raises LockError, never retried
    - set() enforces key length 1..max_key_length and value length <= max_value_length
    - list() returns an independent copy; later mutations never show through
    - Key charset is NOT checked here (handler-level policy)

Design Decisions:
    - One coarse threading.Lock for the whole map, no per-key locking
      (ADR: maps are tiny, serialized throughput is acceptable)
    - Instance per process, passed explicitly into handlers: tests build
      independent stores instead of sharing a module-level global
    - Lengths counted in characters, not encoded bytes
"""

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager

from ao_process.core.domain_types import (
    DEFAULT_LOCK_TIMEOUT_SECONDS,
    DEFAULT_MAX_KEY_LENGTH,
    DEFAULT_MAX_VALUE_LENGTH,
)
from ao_process.core.errors import InvalidKeyError, InvalidValueError, LockError

logger = logging.getLogger(__name__)


class StateStore:
    """Thread-safe in-memory mapping of string keys to string values."""

    def __init__(
        self,
        max_key_length: int = DEFAULT_MAX_KEY_LENGTH,
        max_value_length: int = DEFAULT_MAX_VALUE_LENGTH,
        lock_timeout_seconds: float = DEFAULT_LOCK_TIMEOUT_SECONDS,
    ):
        self._data: dict[str, str] = {}
        self._lock = threading.Lock()
        self.max_key_length = max_key_length
        self.max_value_length = max_value_length
        self.lock_timeout_seconds = lock_timeout_seconds

    @contextmanager
    def _locked(self) -> Iterator[dict[str, str]]:
        if not self._lock.acquire(timeout=self.lock_timeout_seconds):
            logger.error(
                "State lock not acquired within %ss", self.lock_timeout_seconds,
                extra={"error_code": "STATE_LOCK_ERROR"},
            )
            raise LockError(self.lock_timeout_seconds)
        try:
            yield self._data
        finally:
            self._lock.release()

    def set(self, key: str, value: str) -> None:
        """Insert or overwrite *key*. Raises InvalidKeyError / InvalidValueError."""
        if not key or len(key) > self.max_key_length:
            raise InvalidKeyError(self.max_key_length)
        if len(value) > self.max_value_length:
            raise InvalidValueError(self.max_value_length)
        with self._locked() as data:
            data[key] = value

    def get(self, key: str) -> str | None:
        """Current value for *key*, or None when absent."""
        with self._locked() as data:
            return data.get(key)

    def list(self) -> dict[str, str]:
        """Snapshot copy of the whole mapping."""
        with self._locked() as data:
            return dict(data)

    def remove(self, key: str) -> bool:
        """Remove *key*. Returns whether an entry was actually removed."""
        with self._locked() as data:
            return data.pop(key, None) is not None

    def clear(self) -> None:
        """Remove all entries. Idempotent."""
        with self._locked() as data:
            data.clear()

    def size(self) -> int:
        with self._locked() as data:
            return len(data)

    def __repr__(self) -> str:
        return f"StateStore(max_key_length={self.max_key_length}, max_value_length={self.max_value_length})"
