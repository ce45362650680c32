"""API test fixtures — FastAPI test client bound to an isolated runtime.

Invariants:
    - Every test gets a fresh ProcessRuntime (fresh StateStore)
    - get_runtime dependency overridden; the app lifespan is not run

Design Decisions:
    - httpx ASGITransport: no server process, requests go straight to the app
"""

import pytest
from httpx import ASGITransport, AsyncClient

from ao_process.api.dependencies import get_runtime
from ao_process.main import app


@pytest.fixture
async def client(runtime):
    """FastAPI test client with the runtime dependency overridden."""
    app.dependency_overrides[get_runtime] = lambda: runtime

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def bare_client():
    """Client with no runtime available (lifespan not run, no override)."""
    app.dependency_overrides.clear()
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
