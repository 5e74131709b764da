"""DemoStore: the single owner of all mutable demo state.

Built once per app (or per test) and handed to services explicitly.
Nothing in the package keeps module-level mutable state.
"""

import asyncio
import random
from collections.abc import Iterable

from src.pm_account.domain.repository import SessionStoreProtocol, TransactionLogProtocol
from src.pm_account.infrastructure.session_store import InMemorySessionStore
from src.pm_account.infrastructure.transaction_log import TransactionLog
from src.pm_common.events import EventBus
from src.pm_market.domain.models import Market
from src.pm_market.domain.price_model import PriceModel
from src.pm_market.infrastructure.memory import InMemoryMarketSource
from src.pm_market.infrastructure.seed import seed_markets
from src.pm_portfolio.domain.ledger import PositionLedger


class DemoStore:
    def __init__(
        self,
        markets: Iterable[Market] | None = None,
        rng: random.Random | None = None,
        event_bus: EventBus | None = None,
    ) -> None:
        self.markets: dict[int, Market] = {
            m.id: m for m in (seed_markets() if markets is None else markets)
        }
        self.price_model = PriceModel(self.markets, rng)
        self.market_source = InMemoryMarketSource(self.markets)
        self.sessions: SessionStoreProtocol = InMemorySessionStore()
        self.event_bus = event_bus or EventBus()
        # Serialises every balance read-then-write (trades, deposits, withdrawals)
        self.lock = asyncio.Lock()
        self._ledgers: dict[str, PositionLedger] = {}
        self._transactions: dict[str, TransactionLogProtocol] = {}

    def ledger_for(self, user_id: str) -> PositionLedger:
        return self._ledgers.setdefault(user_id, PositionLedger())

    def transactions_for(self, user_id: str) -> TransactionLogProtocol:
        return self._transactions.setdefault(user_id, TransactionLog())
