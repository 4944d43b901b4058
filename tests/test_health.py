"""
Food Places API: Root, Health and App Wiring Tests
==================================================

What we test:
    ✅ GET / greets in plain text
    ✅ GET /health answers OK with a timestamp
    ✅ X-Request-ID is generated when the client sends none
    ✅ The lifespan builds the configured store and closes it
    ✅ A missing store answers 500 instead of crashing the route
"""

import pytest
from httpx import ASGITransport, AsyncClient

from foodplaces.config import Settings
from foodplaces.main import create_app
from foodplaces.stores.memory_store import InMemoryFoodPlaceStore


@pytest.mark.asyncio
async def test_root_greeting(test_client):
    response = await test_client.get("/")

    assert response.status_code == 200
    assert response.text == "Hello, World!"
    assert response.headers["content-type"].startswith("text/plain")


@pytest.mark.asyncio
async def test_health_ok(test_client):
    response = await test_client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "OK"
    assert "timestamp" in body
    assert body["uptime_seconds"] >= 0


@pytest.mark.asyncio
async def test_request_id_generated(test_client):
    response = await test_client.get("/health")

    assert len(response.headers["X-Request-ID"]) == 8


@pytest.mark.asyncio
async def test_lifespan_builds_store_from_settings():
    cfg = Settings(_env_file=None, store_backend="memory", log_level="WARNING")
    app = create_app(app_settings=cfg)
    assert app.state.store is None

    async with app.router.lifespan_context(app):
        assert isinstance(app.state.store, InMemoryFoodPlaceStore)


@pytest.mark.asyncio
async def test_lifespan_keeps_injected_store(memory_store):
    cfg = Settings(_env_file=None, store_backend="sql", log_level="WARNING")
    app = create_app(store=memory_store, app_settings=cfg)

    async with app.router.lifespan_context(app):
        assert app.state.store is memory_store


@pytest.mark.asyncio
async def test_route_without_store_returns_500():
    app = create_app(app_settings=Settings(_env_file=None, store_backend="memory"))
    transport = ASGITransport(app=app, raise_app_exceptions=False)

    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/api/food-places")

    assert response.status_code == 500
