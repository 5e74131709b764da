"""Integration-test fixtures.

Each test drives a fresh app built around its own seeded DemoStore, so
balances and positions never leak between tests.
"""

import pytest
from httpx import AsyncClient


@pytest.fixture
async def auth_client(client: AsyncClient) -> AsyncClient:
    """Client with an active demo session (any credentials work)."""
    resp = await client.post("/api/v1/session/login", json={
        "username": "ash",
        "email": "ash@example.com",
        "password": "pikachu",
    })
    assert resp.status_code == 200
    return client
