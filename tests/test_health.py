"""Health check endpoint tests."""

import pytest

from app.config import settings
from app.routers.webhooks import get_user_sync
from conftest import TEST_SECRET, FakeUserSync


@pytest.mark.asyncio
async def test_health_check(client):
    response = await client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["version"] == "0.1.0"
    assert "/clerk-webhook" in [e["path"] for e in data["endpoints"]]


@pytest.mark.asyncio
async def test_integrations_configured(client, monkeypatch):
    monkeypatch.setattr(settings, "clerk_webhook_secret", TEST_SECRET)
    response = await client.get("/health/integrations")

    assert response.status_code == 200
    data = response.json()
    assert data["clerk_webhook"]["connected"] is True
    assert data["user_store"] == {
        "connected": True,
        "status": "fake ok",
        "last_check": data["user_store"]["last_check"],
    }
    assert TEST_SECRET not in response.text


@pytest.mark.asyncio
async def test_integrations_not_configured(client, app, monkeypatch):
    monkeypatch.setattr(settings, "clerk_webhook_secret", "")
    app.dependency_overrides[get_user_sync] = lambda: FakeUserSync(configured=False)
    response = await client.get("/health/integrations")

    data = response.json()
    assert data["clerk_webhook"] == {
        "connected": False,
        "status": "signing secret not configured",
        "last_check": None,
    }
    assert data["user_store"]["connected"] is False
    assert data["user_store"]["status"] == "fake not configured"
