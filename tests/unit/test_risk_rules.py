"""Tests for pm_risk rules used by trades, deposits and withdrawals."""

import dataclasses

import pytest

from src.pm_common.errors import (
    InsufficientBalanceError,
    InvalidAmountError,
    MarketNotActiveError,
    PriceOutOfRangeError,
)
from src.pm_market.infrastructure.seed import seed_markets
from src.pm_risk.rules.amount import check_amount_limit, check_positive_amount
from src.pm_risk.rules.balance_check import check_sufficient_balance
from src.pm_risk.rules.market_status import check_market_active
from src.pm_risk.rules.price_range import check_price_range


class TestBalanceCheck:
    def test_sufficient(self) -> None:
        check_sufficient_balance(required=6500, available=10000)

    def test_exact(self) -> None:
        check_sufficient_balance(required=10000, available=10000)

    def test_insufficient(self) -> None:
        with pytest.raises(InsufficientBalanceError):
            check_sufficient_balance(required=10001, available=10000)


class TestAmount:
    def test_positive(self) -> None:
        check_positive_amount(1)

    @pytest.mark.parametrize("amount", [0, -500])
    def test_not_positive(self, amount: int) -> None:
        with pytest.raises(InvalidAmountError):
            check_positive_amount(amount)

    def test_limit_bounds(self) -> None:
        check_amount_limit(1, 1000)
        check_amount_limit(1000, 1000)
        with pytest.raises(InvalidAmountError):
            check_amount_limit(1001, 1000)
        with pytest.raises(InvalidAmountError):
            check_amount_limit(0, 1000)


class TestMarketStatus:
    def test_active(self) -> None:
        check_market_active(seed_markets()[0])

    @pytest.mark.parametrize("status", ["closed", "resolved", "cancelled"])
    def test_not_active(self, status: str) -> None:
        market = dataclasses.replace(seed_markets()[0], status=status)
        with pytest.raises(MarketNotActiveError):
            check_market_active(market)


class TestPriceRange:
    def test_in_range(self) -> None:
        check_price_range(1)
        check_price_range(99)

    @pytest.mark.parametrize("price", [0, 100])
    def test_out_of_range(self, price: int) -> None:
        with pytest.raises(PriceOutOfRangeError) as exc_info:
            check_price_range(price)
        assert exc_info.value.code == 3003
        assert exc_info.value.http_status == 500
