"""Process routes — HTTP surface mirrors the runtime entry points.

Invariants:
    - POST /messages answers 200 with the AO response, even for garbage input
    - GET /state and DELETE /state mirror get_state / clear_state
    - Health probes report liveness and store readiness
    - Requests without an initialized runtime get a 503 PROCESS_NOT_READY body
"""

import json
import logging

from httpx import ASGITransport, AsyncClient

from ao_process.api.dependencies import get_runtime
from ao_process.main import app, lifespan

MESSAGES = "/api/v1/process/messages"
STATE = "/api/v1/process/state"


def _raw(action, key=None, data=None):
    tags = {"Action": action}
    if key is not None:
        tags["Key"] = key
    msg = {"From": "http-client", "Tags": tags}
    if data is not None:
        msg["Data"] = data
    return json.dumps(msg)


# --- POST /messages -----------------------------------------------------------

async def test_post_message_set_then_get(client):
    res = await client.post(MESSAGES, content=_raw("Set", "test-key", "test-value"))
    assert res.status_code == 200
    assert res.json()["Action"] == "Set-Response"

    res = await client.post(MESSAGES, content=_raw("Get", "test-key"))
    assert res.json() == {
        "Target": "http-client", "Action": "Get-Response",
        "Data": "test-value", "Key": "test-key",
    }


async def test_post_message_with_json_content_type(client):
    res = await client.post(
        MESSAGES, content=_raw("Info"), headers={"Content-Type": "application/json"},
    )
    assert res.status_code == 200
    assert res.json()["Action"] == "Info-Response"


async def test_post_malformed_message_returns_ao_error(client):
    res = await client.post(
        MESSAGES, content="{broken", headers={"Content-Type": "application/json"},
    )
    assert res.status_code == 200
    body = res.json()
    assert body["Target"] == "unknown"
    assert body["Action"] == "Error"
    assert body["Data"].startswith("JSON parse error:")


async def test_post_invalid_utf8_returns_ao_error_and_keeps_store(client, runtime):
    body = b'{"From":"s","Tags":{"Action":"Set","Key":"k"},"Data":"a\xffb"}'
    res = await client.post(MESSAGES, content=body)
    assert res.status_code == 200
    out = res.json()
    assert out["Target"] == "unknown"
    assert out["Action"] == "Error"
    assert out["Data"].startswith("JSON parse error:")
    assert runtime.store.size() == 0


async def test_post_unknown_action_returns_ao_error(client):
    res = await client.post(MESSAGES, content=_raw("Dance"))
    assert res.status_code == 200
    assert "Available actions: Info, Set, Get, List, Remove, Clear" in res.json()["Data"]


# --- /state -------------------------------------------------------------------

async def test_get_state_returns_snapshot(client, runtime):
    runtime.store.set("a", "1")
    res = await client.get(STATE)
    assert res.status_code == 200
    assert res.json() == {"a": "1"}


async def test_delete_state_clears_store(client, runtime):
    runtime.store.set("a", "1")
    res = await client.delete(STATE)
    assert res.json() == {"cleared": True}
    assert runtime.store.size() == 0


async def test_delete_state_reports_failure_when_locked(client, held_lock):
    res = await client.delete(STATE)
    assert res.json() == {"cleared": False}


# --- Health -------------------------------------------------------------------

async def test_liveness_probe(client):
    res = await client.get("/api/v1/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_probe_reports_entries(client, runtime):
    runtime.store.set("a", "1")
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 200
    assert res.json()["entries"] == 1


async def test_readiness_probe_fails_when_store_locked(client, held_lock):
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 503
    assert res.json()["reason"] == "state_store_unavailable"


# --- Runtime not initialized --------------------------------------------------

async def test_process_route_without_runtime_returns_503(bare_client):
    res = await bare_client.post(MESSAGES, content=_raw("Info"))
    assert res.status_code == 503
    assert res.json()["error"]["code"] == "PROCESS_NOT_READY"


async def test_lifespan_installs_and_removes_runtime():
    root = logging.getLogger()
    before, level = list(root.handlers), root.level
    try:
        async with lifespan(app):
            runtime = app.state.runtime
            out = json.loads(runtime.handle(_raw("Info")))
            assert out["Action"] == "Info-Response"
        assert app.state.runtime is None
    finally:
        for h in list(root.handlers):
            if h not in before:
                root.removeHandler(h)
        root.setLevel(level)


# --- Unhandled errors ---------------------------------------------------------

class _ExplodingRuntime:
    def handle(self, raw_message):
        raise RuntimeError("internal detail")


async def test_unhandled_route_error_returns_generic_500(caplog):
    app.dependency_overrides[get_runtime] = lambda: _ExplodingRuntime()
    try:
        async with AsyncClient(
            transport=ASGITransport(app=app, raise_app_exceptions=False),
            base_url="http://test",
        ) as c:
            with caplog.at_level("ERROR", logger="ao_process.api.error_handlers"):
                res = await c.post(MESSAGES, content=_raw("Info"))
    finally:
        app.dependency_overrides.clear()

    assert res.status_code == 500
    body = res.json()
    assert body["error"]["code"] == "INTERNAL_ERROR"
    assert "internal detail" not in res.text
    record = next(r for r in caplog.records if r.name == "ao_process.api.error_handlers")
    assert record.path == MESSAGES
