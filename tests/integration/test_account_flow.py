"""Integration tests for session and account endpoints."""

from httpx import AsyncClient


class TestSession:
    async def test_me_requires_login(self, client: AsyncClient) -> None:
        resp = await client.get("/api/v1/session/me")
        assert resp.status_code == 401
        body = resp.json()
        assert body["code"] == 1006
        assert body["data"] is None

    async def test_login_creates_funded_user(self, client: AsyncClient) -> None:
        resp = await client.post("/api/v1/session/login", json={"username": "brock"})
        assert resp.status_code == 200
        data = resp.json()["data"]
        assert data["username"] == "brock"
        assert data["balance_cents"] == 100000
        assert data["balance_display"] == "$1,000.00"

    async def test_empty_username_rejected(self, client: AsyncClient) -> None:
        resp = await client.post("/api/v1/session/login", json={"username": ""})
        assert resp.status_code == 422

    async def test_logout(self, auth_client: AsyncClient) -> None:
        resp = await auth_client.post("/api/v1/session/logout")
        assert resp.status_code == 200
        resp = await auth_client.get("/api/v1/account/balance")
        assert resp.status_code == 401

    async def test_request_id_echoed(self, auth_client: AsyncClient) -> None:
        resp = await auth_client.get("/api/v1/session/me")
        assert resp.headers["X-Request-ID"] == resp.json()["request_id"]


class TestBalance:
    async def test_unauthenticated_returns_401(self, client: AsyncClient) -> None:
        resp = await client.get("/api/v1/account/balance")
        assert resp.status_code == 401

    async def test_starting_balance(self, auth_client: AsyncClient) -> None:
        resp = await auth_client.get("/api/v1/account/balance")
        assert resp.status_code == 200
        data = resp.json()["data"]
        assert data["balance_cents"] == 100000
        assert data["balance_display"] == "$1,000.00"


class TestDeposit:
    async def test_deposit_increases_balance(self, auth_client: AsyncClient) -> None:
        resp = await auth_client.post("/api/v1/account/deposit", json={"amount_cents": 50000})
        assert resp.status_code == 200
        data = resp.json()["data"]
        assert data["balance_cents"] == 150000
        assert data["deposited_display"] == "$500.00"

    async def test_deposit_zero_rejected(self, auth_client: AsyncClient) -> None:
        resp = await auth_client.post("/api/v1/account/deposit", json={"amount_cents": 0})
        assert resp.status_code == 422
        assert resp.json()["code"] == 2003

    async def test_deposit_over_limit_rejected(self, auth_client: AsyncClient) -> None:
        resp = await auth_client.post(
            "/api/v1/account/deposit", json={"amount_cents": 1000001}
        )
        assert resp.status_code == 422
        assert resp.json()["code"] == 2003


class TestWithdraw:
    async def test_withdraw(self, auth_client: AsyncClient) -> None:
        resp = await auth_client.post("/api/v1/account/withdraw", json={"amount_cents": 25000})
        assert resp.status_code == 200
        assert resp.json()["data"]["balance_cents"] == 75000

    async def test_withdraw_more_than_balance(self, auth_client: AsyncClient) -> None:
        resp = await auth_client.post(
            "/api/v1/account/withdraw", json={"amount_cents": 200000}
        )
        assert resp.status_code == 422
        assert resp.json()["code"] == 2001


class TestTransactions:
    async def test_history_newest_first(self, auth_client: AsyncClient) -> None:
        await auth_client.post("/api/v1/account/deposit", json={"amount_cents": 1000})
        await auth_client.post("/api/v1/account/withdraw", json={"amount_cents": 500})

        resp = await auth_client.get("/api/v1/account/transactions")
        assert resp.status_code == 200
        data = resp.json()["data"]
        assert data["total"] == 3
        assert [t["type"] for t in data["items"]] == ["withdrawal", "deposit", "deposit"]

    async def test_type_filter(self, auth_client: AsyncClient) -> None:
        await auth_client.post("/api/v1/account/withdraw", json={"amount_cents": 500})
        resp = await auth_client.get("/api/v1/account/transactions?type=withdrawal")
        items = resp.json()["data"]["items"]
        assert len(items) == 1
        assert items[0]["amount_cents"] == -500

    async def test_invalid_type_rejected(self, auth_client: AsyncClient) -> None:
        resp = await auth_client.get("/api/v1/account/transactions?type=refund")
        assert resp.status_code == 422
