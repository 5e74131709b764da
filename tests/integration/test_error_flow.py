"""Integration tests for the error envelope on unexpected failures."""

import pytest
from httpx import ASGITransport, AsyncClient

from src.main import create_app
from src.store import DemoStore


class TestUnhandledError:
    async def test_returns_internal_error_envelope(
        self, store: DemoStore, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        # ServerErrorMiddleware re-raises after responding; keep the response
        transport = ASGITransport(app=create_app(store), raise_app_exceptions=False)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            resp = await ac.post("/api/v1/session/login", json={"username": "ash"})
            assert resp.status_code == 200

            def broken_ledger(user_id: str) -> None:
                raise RuntimeError("ledger unavailable")

            monkeypatch.setattr(store, "ledger_for", broken_ledger)
            resp = await ac.get("/api/v1/portfolio")

        assert resp.status_code == 500
        body = resp.json()
        assert body["code"] == 9002
        assert body["message"] == "Internal server error"
        assert body["data"] is None
