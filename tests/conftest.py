"""Shared test fixtures.

Every test gets its own DemoStore so no state leaks between tests.
Prices move with a fixed seed.
"""

import random
from collections.abc import AsyncIterator

import pytest
from httpx import ASGITransport, AsyncClient

from src.main import create_app
from src.store import DemoStore


@pytest.fixture
def store() -> DemoStore:
    return DemoStore(rng=random.Random(42))


@pytest.fixture
async def client(store: DemoStore) -> AsyncIterator[AsyncClient]:
    """Async HTTP client for testing FastAPI endpoints."""
    transport = ASGITransport(app=create_app(store))
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
