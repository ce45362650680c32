"""Root conftest — shared test configuration and fixtures."""

import os

import pytest

# Keep test runs independent of a developer's .env / shell settings
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("PROCESS_NAME", "AO Process (Python)")

from ao_process.config import Settings
from ao_process.core.state_store import StateStore
from ao_process.services.process_runtime import ProcessRuntime


@pytest.fixture
def store():
    """Fresh store with default limits and a short lock timeout."""
    return StateStore(lock_timeout_seconds=0.05)


@pytest.fixture
def settings():
    return Settings(_env_file=None, lock_timeout_seconds=0.05)


@pytest.fixture
def runtime(store, settings):
    return ProcessRuntime(store=store, settings=settings)


@pytest.fixture
def held_lock(store):
    """Hold the store lock for the test's duration so every operation times out."""
    store._lock.acquire()
    yield store
    store._lock.release()
