"""
Food Places API: Test Configuration (conftest.py)
=================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Data:
    ├── valid_food_place / invalid_food_place / update_food_place
    └── multiple_food_places
    Stores:
    ├── memory_store: fresh InMemoryFoodPlaceStore per test
    └── mock_store: AsyncMock with the FoodPlaceStore interface
    HTTP:
    ├── app: create_app(store=memory_store)
    └── test_client: HTTPX AsyncClient over ASGITransport
"""

import os

# Override settings BEFORE any foodplaces import: no real database, quiet logs
os.environ["STORE_BACKEND"] = "memory"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["SUPABASE_URL"] = ""
os.environ["SUPABASE_KEY"] = ""
os.environ["STRICT_DELETE"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"

from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from foodplaces.schemas.food_place import FoodPlaceRecord
from foodplaces.stores.base import FoodPlaceStore
from foodplaces.stores.memory_store import InMemoryFoodPlaceStore


# ══════════════════════════════════════════════════════════════════════════
# Request Bodies
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def valid_food_place():
    return {
        "name": "Pizza Palace",
        "address": "123 Main St",
        "cuisine_type": "Italian",
        "rating": 4.5,
        "price_range": "$$",
    }


@pytest.fixture
def invalid_food_place():
    return {
        "name": "",
        "address": "123 Main St",
        "cuisine_type": "Italian",
        "rating": 6.0,
        "price_range": "$$",
    }


@pytest.fixture
def multiple_food_places():
    return [
        {
            "name": "Pizza Palace",
            "address": "123 Main St",
            "cuisine_type": "Italian",
            "rating": 4.5,
            "price_range": "$$",
        },
        {
            "name": "Burger King",
            "address": "456 Oak Ave",
            "cuisine_type": "American",
            "rating": 4.0,
            "price_range": "$",
        },
        {
            "name": "Sushi Bar",
            "address": "789 Pine Rd",
            "cuisine_type": "Japanese",
            "rating": 4.8,
            "price_range": "$$$",
        },
    ]


@pytest.fixture
def update_food_place():
    return {
        "name": "Pizza Palace Updated",
        "address": "123 Main St Updated",
        "cuisine_type": "Italian",
        "rating": 4.7,
        "price_range": "$$$",
    }


@pytest.fixture
def sample_record(valid_food_place):
    """A stored record as a store would hand it back."""
    return FoodPlaceRecord(
        id=1,
        created_at=datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc),
        **valid_food_place,
    )


# ══════════════════════════════════════════════════════════════════════════
# Stores
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def memory_store():
    return InMemoryFoodPlaceStore()


@pytest.fixture
def mock_store():
    """
    AsyncMock shaped like a FoodPlaceStore.

    Usage:
        mock_store.get.return_value = Found(record)
    """
    return AsyncMock(spec=FoodPlaceStore)


# ══════════════════════════════════════════════════════════════════════════
# HTTP
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def app(memory_store):
    from foodplaces.main import create_app
    return create_app(store=memory_store)


@pytest_asyncio.fixture
async def test_client(app):
    """
    HTTPX AsyncClient routed straight into the ASGI app (no server).

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
