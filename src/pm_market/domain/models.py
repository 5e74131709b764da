"""Domain models for pm_market: pure dataclasses, no business logic."""

from dataclasses import dataclass
from datetime import datetime

from src.pm_common.enums import MarketStatus


@dataclass
class Market:
    id: int
    title: str
    description: str
    category: str
    yes_price: int        # cents, 1-99
    no_price: int         # cents, 1-99, yes_price + no_price == 100
    total_volume: int     # cents
    end_date: datetime
    status: str           # MarketStatus value
    resolution_source: str

    @property
    def is_active(self) -> bool:
        return self.status == MarketStatus.ACTIVE

    def price_for(self, side: str) -> int:
        return self.yes_price if side == "yes" else self.no_price


@dataclass(frozen=True)
class PriceQuote:
    """YES/NO price pair for one market at one instant."""

    market_id: int
    yes_price: int
    no_price: int

    def price_for(self, side: str) -> int:
        return self.yes_price if side == "yes" else self.no_price


@dataclass(frozen=True)
class CategoryInfo:
    key: str
    label: str
    description: str
    icon: str
