"""
Tests that blocking request work runs off the event loop.
"""
import asyncio
import time
import httpx
import pytest
from creator_finance.core.security import get_password_hash


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.mark.anyio
async def test_health_stays_responsive_during_registration(app, monkeypatch):
    def slow_hash(password):
        time.sleep(0.5)
        return get_password_hash(password)

    monkeypatch.setattr("creator_finance.services.credential_service.get_password_hash", slow_hash)
    app.state.database.create_all()

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        registration = asyncio.ensure_future(client.post(
            "/api/register",
            json={"name": "Slow", "email": "slow@example.com", "password": "secret123"}
        ))
        await asyncio.sleep(0.1)

        started = time.perf_counter()
        health = await client.get("/health")
        elapsed = time.perf_counter() - started

        registered = await registration

    assert health.status_code == 200
    assert elapsed < 0.25
    assert registered.status_code == 201
