"""InMemoryMarketSource: concrete implementation of MarketSourceProtocol.

Reads return copies, so callers never mutate the catalogue by accident.
Writers (PriceModel, TradeEngine) go through the shared dict held by the
DemoStore.
"""

from dataclasses import replace

from src.pm_market.domain.models import Market


class InMemoryMarketSource:
    def __init__(self, markets: dict[int, Market]) -> None:
        self._markets = markets

    def list_markets(self, category: str | None = None) -> list[Market]:
        # category=None or 'all' → no filter
        return [
            replace(m)
            for m in self._markets.values()
            if category in (None, "all") or m.category == category
        ]

    def get_market(self, market_id: int) -> Market | None:
        market = self._markets.get(market_id)
        return replace(market) if market is not None else None

    def all_markets(self) -> list[Market]:
        return [replace(m) for m in self._markets.values()]
