"""Trade execution in two steps.

compute_trade() is a pure function of market, side, investment and balance:
it validates and prices the trade but touches nothing. TradeEngine.apply_trade()
then performs every mutation for an already-validated quote. Nothing in
apply_trade() can fail, so a trade either fully applies or (when
compute_trade raises) leaves balance, positions and transactions untouched.
"""

from datetime import datetime

from src.pm_account.domain.models import Transaction, User
from src.pm_common.cents import cost_of_shares, shares_for_investment
from src.pm_common.datetime_utils import utc_now
from src.pm_common.enums import Side, TransactionType
from src.pm_common.errors import MarketNotFoundError
from src.pm_common.id_generator import generate_id
from src.pm_market.domain.models import Market
from src.pm_risk.rules.amount import check_positive_amount
from src.pm_risk.rules.balance_check import check_sufficient_balance
from src.pm_risk.rules.market_status import check_market_active
from src.pm_risk.rules.price_range import check_price_range
from src.pm_trade.domain.models import TradeQuote, TradeResult
from src.store import DemoStore


def compute_trade(market: Market, side: str, investment: int, balance: int) -> TradeQuote:
    """Validate and price a buy of *side* worth *investment* cents.

    Raises InvalidAmountError, InsufficientBalanceError or MarketNotActiveError.
    """
    side = Side(side).value
    check_positive_amount(investment)
    check_sufficient_balance(investment, balance)
    check_market_active(market)

    price = market.price_for(side)
    check_price_range(price)
    shares = shares_for_investment(investment, price)
    actual_cost = cost_of_shares(shares, price)
    return TradeQuote(
        market_id=market.id,
        side=side,
        investment=investment,
        price=price,
        shares=shares,
        actual_cost=actual_cost,
        old_balance=balance,
        new_balance=balance - actual_cost,
    )


class TradeEngine:
    def __init__(self, store: DemoStore) -> None:
        self._store = store

    def _market(self, market_id: int) -> Market:
        market = self._store.markets.get(market_id)
        if market is None:
            raise MarketNotFoundError(market_id)
        return market

    def quote(self, user: User, market_id: int, side: str, investment: int) -> TradeQuote:
        return compute_trade(self._market(market_id), side, investment, user.balance)

    def apply_trade(
        self, user: User, quote: TradeQuote, now: datetime | None = None
    ) -> TradeResult:
        now = now or utc_now()
        user.balance = quote.new_balance

        position = self._store.ledger_for(user.id).upsert(
            quote.market_id, quote.side, quote.shares, quote.actual_cost, now
        )
        txn = Transaction(
            id=generate_id("txn"),
            type=TransactionType.TRADE.value,
            amount=-quote.actual_cost,
            timestamp=now,
            details={
                "market_id": quote.market_id,
                "side": quote.side,
                "shares": quote.shares,
                "price": quote.price,
            },
        )
        self._store.transactions_for(user.id).append(txn)
        self._market(quote.market_id).total_volume += quote.actual_cost

        return TradeResult(
            shares=quote.shares,
            actual_cost=quote.actual_cost,
            price=quote.price,
            new_balance=user.balance,
            position=position,
            transaction=txn,
        )

    def execute_trade(
        self,
        user: User,
        market_id: int,
        side: str,
        investment: int,
        now: datetime | None = None,
    ) -> TradeResult:
        quote = self.quote(user, market_id, side, investment)
        return self.apply_trade(user, quote, now)
