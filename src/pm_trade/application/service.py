"""TradeApplicationService: serialises trades and publishes their events.

The whole read-balance → compute → apply sequence runs under the store lock,
so two trades for the same user can never interleave. Events go out after
the lock is released and the trade is fully applied.
"""

import logging

from src.pm_account.domain.models import User
from src.pm_common.enums import Side
from src.pm_common.events import BalanceUpdated, TradeCompleted
from src.pm_trade.application.schemas import TradeQuoteResponse, TradeResponse
from src.pm_trade.domain.engine import TradeEngine
from src.store import DemoStore

logger = logging.getLogger("pm.trade")


class TradeApplicationService:
    def __init__(self, store: DemoStore, engine: TradeEngine | None = None) -> None:
        self._store = store
        self._engine = engine or TradeEngine(store)

    async def quote_trade(
        self, user: User, market_id: int, side: Side, amount_cents: int
    ) -> TradeQuoteResponse:
        quote = self._engine.quote(user, market_id, side.value, amount_cents)
        return TradeQuoteResponse.from_domain(quote)

    async def place_trade(
        self, user: User, market_id: int, side: Side, amount_cents: int
    ) -> TradeResponse:
        async with self._store.lock:
            old_balance = user.balance
            result = self._engine.execute_trade(user, market_id, side.value, amount_cents)
            self._store.sessions.persist_user(user)

        logger.info(
            "Trade %s: market=%d side=%s shares=%d cost=%d price=%d balance=%d",
            result.transaction.id,
            market_id,
            side.value,
            result.shares,
            result.actual_cost,
            result.price,
            result.new_balance,
        )
        occurred_at = result.transaction.timestamp
        self._store.event_bus.publish(
            TradeCompleted(
                user_id=user.id,
                occurred_at=occurred_at,
                market_id=market_id,
                side=side.value,
                shares=result.shares,
                actual_cost=result.actual_cost,
                price=result.price,
                transaction_id=result.transaction.id,
            )
        )
        self._store.event_bus.publish(
            BalanceUpdated(
                user_id=user.id,
                occurred_at=occurred_at,
                old_balance=old_balance,
                new_balance=result.new_balance,
                transaction_id=result.transaction.id,
            )
        )
        return TradeResponse.from_domain(result)
