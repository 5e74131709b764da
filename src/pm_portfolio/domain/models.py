"""Domain models for pm_portfolio: pure dataclasses."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Position:
    id: str
    market_id: int
    side: str                # Side value
    shares: int              # centishares
    invested: int            # cents, total purchase cost (not avg price)
    purchase_date: datetime  # first trade into this (market_id, side)

    @property
    def avg_price(self) -> float:
        """Cost-weighted average price in dollars per share."""
        if self.shares == 0:
            return 0.0
        # invested/100 dollars over shares/100 shares
        return self.invested / self.shares


@dataclass(frozen=True)
class PortfolioSummary:
    total_value: int         # cents
    total_invested: int      # cents
    pnl: int                 # cents
    pnl_percentage: float


@dataclass(frozen=True)
class PositionView:
    """One position valued against a market snapshot.

    When the market is unavailable, data_available is False and the price,
    value and P&L fields are None.
    """

    position: Position
    title: str
    data_available: bool
    market_status: str | None = None
    current_price: int | None = None    # cents
    current_value: int | None = None    # cents
    pnl: int | None = None              # cents
    pnl_percentage: float | None = None
