"""MarketSource Protocol: the read side of the market catalogue.

Unit tests inject a stub that conforms to this Protocol.
Infrastructure layer provides the in-memory implementation.
"""

from typing import Protocol

from src.pm_market.domain.models import Market


class MarketSourceProtocol(Protocol):
    def list_markets(self, category: str | None = None) -> list[Market]: ...

    def get_market(self, market_id: int) -> Market | None: ...

    def all_markets(self) -> list[Market]: ...
