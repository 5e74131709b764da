"""Tests for pm_common.enums: values are the API wire format."""

from src.pm_common.enums import MarketCategory, MarketStatus, Side, TransactionType


class TestAllEnumsAreStr:
    def test_side_is_str(self) -> None:
        assert isinstance(Side.YES, str)
        assert Side.YES == "yes"

    def test_market_status_is_str(self) -> None:
        assert MarketStatus.ACTIVE == "active"


class TestValues:
    def test_side(self) -> None:
        assert {s.value for s in Side} == {"yes", "no"}

    def test_market_status(self) -> None:
        assert {s.value for s in MarketStatus} == {"active", "closed", "resolved", "cancelled"}

    def test_transaction_type(self) -> None:
        assert {t.value for t in TransactionType} == {"trade", "deposit", "withdrawal"}

    def test_category(self) -> None:
        assert {c.value for c in MarketCategory} == {"card-prices", "events", "set-performance"}
