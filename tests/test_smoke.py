"""
tests.test_smoke

Boot the app in test mode and hit the probes.
"""

from __future__ import annotations

import pytest

from endorsement_service.db.base import Base


@pytest.mark.asyncio
async def test_health_endpoints(client) -> None:
    r = await client.get("/healthz")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"

    r = await client.get("/readyz")
    assert r.status_code == 200
    assert r.json()["status"] == "ready"


@pytest.mark.asyncio
async def test_request_id_is_echoed(client) -> None:
    r = await client.get("/healthz", headers={"x-request-id": "req-123"})
    assert r.headers["x-request-id"] == "req-123"

    r = await client.get("/healthz")
    assert r.headers["x-request-id"]


@pytest.mark.asyncio
async def test_readiness_requires_the_endorsements_table(app, client) -> None:
    async with app.state.engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    r = await client.get("/readyz")
    assert r.status_code == 503

    r = await client.get("/healthz")
    assert r.status_code == 200
