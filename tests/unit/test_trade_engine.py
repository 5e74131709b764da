"""Tests for pm_trade.domain.engine: pure pricing and atomic application."""

import random
from datetime import UTC, datetime

import pytest

from src.pm_account.domain.models import User
from src.pm_common.errors import (
    InsufficientBalanceError,
    InvalidAmountError,
    MarketNotActiveError,
    MarketNotFoundError,
)
from src.pm_trade.domain.engine import TradeEngine, compute_trade
from src.store import DemoStore

_T1 = datetime(2024, 9, 15, 10, 0, tzinfo=UTC)
_T2 = datetime(2024, 9, 16, 10, 0, tzinfo=UTC)


def _user(balance: int = 100000) -> User:
    return User(id="user_1", username="ash", email=None, balance=balance)


def _store_at(yes_price: int, market_id: int = 1) -> DemoStore:
    store = DemoStore(rng=random.Random(0))
    market = store.markets[market_id]
    market.yes_price = yes_price
    market.no_price = 100 - yes_price
    return store


class TestComputeTrade:
    def test_worked_example(self) -> None:
        # $1000 balance, $16.25 at 0.65 YES → 25.00 shares
        market = _store_at(65).markets[1]
        quote = compute_trade(market, "yes", 1625, 100000)

        assert quote.shares == 2500
        assert quote.actual_cost == 1625
        assert quote.new_balance == 98375
        assert quote.price == 65
        assert quote.potential_payout == 2500
        assert quote.potential_profit == 875

    def test_no_side_uses_no_price(self) -> None:
        market = _store_at(65).markets[1]
        quote = compute_trade(market, "no", 1000, 100000)
        assert quote.price == 35
        assert quote.shares == 2857
        assert quote.actual_cost == 1000

    def test_truncated_shares_cost_at_most_investment(self) -> None:
        market = _store_at(65).markets[1]
        quote = compute_trade(market, "yes", 1000, 100000)
        assert quote.shares == 1538
        assert quote.actual_cost <= 1000

    def test_does_not_mutate(self) -> None:
        market = _store_at(65).markets[1]
        compute_trade(market, "yes", 1625, 100000)
        assert market.total_volume == 245000
        assert market.yes_price == 65

    def test_insufficient_balance(self) -> None:
        market = _store_at(65).markets[1]
        with pytest.raises(InsufficientBalanceError):
            compute_trade(market, "yes", 5000, 1000)

    @pytest.mark.parametrize("investment", [0, -100])
    def test_non_positive_amount(self, investment: int) -> None:
        market = _store_at(65).markets[1]
        with pytest.raises(InvalidAmountError):
            compute_trade(market, "yes", investment, 100000)

    def test_inactive_market(self) -> None:
        market = _store_at(65).markets[1]
        market.status = "closed"
        with pytest.raises(MarketNotActiveError):
            compute_trade(market, "yes", 100, 100000)

    def test_invalid_side(self) -> None:
        market = _store_at(65).markets[1]
        with pytest.raises(ValueError):
            compute_trade(market, "maybe", 100, 100000)

    def test_exact_balance_allowed(self) -> None:
        market = _store_at(50).markets[1]
        quote = compute_trade(market, "yes", 1000, 1000)
        assert quote.new_balance == 0


class TestApplyTrade:
    def test_execute_updates_everything(self) -> None:
        store = _store_at(65)
        user = _user()
        result = TradeEngine(store).execute_trade(user, 1, "yes", 1625, now=_T1)

        assert result.shares == 2500
        assert result.actual_cost == 1625
        assert user.balance == 98375
        assert result.new_balance == 98375

        position = store.ledger_for(user.id).get(1, "yes")
        assert position is result.position
        assert position.shares == 2500  # type: ignore[union-attr]

        txns = store.transactions_for(user.id).list_entries()
        assert len(txns) == 1
        assert txns[0].type == "trade"
        assert txns[0].amount == -1625
        assert txns[0].details == {"market_id": 1, "side": "yes", "shares": 2500, "price": 65}
        assert store.markets[1].total_volume == 245000 + 1625

    def test_second_trade_merges_position(self) -> None:
        store = _store_at(65)
        user = _user()
        engine = TradeEngine(store)
        engine.execute_trade(user, 1, "yes", 1625, now=_T1)
        result = engine.execute_trade(user, 1, "yes", 650, now=_T2)

        position = result.position
        assert position.shares == 3500
        assert position.invested == 2275
        assert position.avg_price == 0.65
        assert position.purchase_date == _T1
        assert user.balance == 100000 - 2275
        assert len(store.transactions_for(user.id)) == 2

    def test_failed_trade_leaves_state_untouched(self) -> None:
        store = _store_at(65)
        user = _user(balance=1000)
        with pytest.raises(InsufficientBalanceError):
            TradeEngine(store).execute_trade(user, 1, "yes", 5000)

        assert user.balance == 1000
        assert len(store.ledger_for(user.id)) == 0
        assert len(store.transactions_for(user.id)) == 0
        assert store.markets[1].total_volume == 245000

    def test_unknown_market(self) -> None:
        with pytest.raises(MarketNotFoundError):
            TradeEngine(DemoStore()).execute_trade(_user(), 404, "yes", 100)

    @pytest.mark.parametrize("investment", [1, 37, 999, 1625, 33333, 100000])
    def test_balance_conserved(self, investment: int) -> None:
        store = _store_at(37)
        user = _user()
        result = TradeEngine(store).execute_trade(user, 1, "no", investment)
        invested = store.ledger_for(user.id).total_invested()
        assert user.balance + invested == 100000
        assert 0 < result.actual_cost <= investment
        assert result.shares > 0


class TestWorkedExamples:
    def test_fifty_dollars_against_ten(self) -> None:
        store = _store_at(65)
        user = _user(balance=1000)
        with pytest.raises(InsufficientBalanceError):
            TradeEngine(store).execute_trade(user, 1, "yes", 5000)
        assert user.balance == 1000
        assert store.transactions_for(user.id).list_entries() == []

    def test_repeated_merges_accumulate_every_trade(self) -> None:
        store = _store_at(41)
        user = _user(balance=1_000_000)
        engine = TradeEngine(store)
        rng = random.Random(11)
        total_cost = 0
        total_shares = 0
        for price in range(1, 100):
            market = store.markets[1]
            market.yes_price = price
            market.no_price = 100 - price
            investment = rng.randint(1, 2000)

            result = engine.execute_trade(user, 1, "yes", investment)

            assert 0 < result.actual_cost <= investment
            total_cost += result.actual_cost
            total_shares += result.shares

        position = store.ledger_for(user.id).get(1, "yes")
        assert position is not None
        assert position.invested == total_cost
        assert position.shares == total_shares
        assert user.balance == 1_000_000 - total_cost
        assert len(store.transactions_for(user.id)) == 99
