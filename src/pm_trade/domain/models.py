"""Trade domain models: pure dataclasses."""

from dataclasses import dataclass

from src.pm_account.domain.models import Transaction
from src.pm_portfolio.domain.models import Position


@dataclass(frozen=True)
class TradeQuote:
    """Output of the pure pricing step; nothing has been mutated yet."""

    market_id: int
    side: str
    investment: int      # cents requested
    price: int           # cents per share
    shares: int          # centishares, truncated
    actual_cost: int     # cents, <= investment
    old_balance: int     # cents
    new_balance: int     # cents

    @property
    def potential_payout(self) -> int:
        """Cents paid out if the backed side resolves true ($1 per share)."""
        return self.shares

    @property
    def potential_profit(self) -> int:
        return self.potential_payout - self.actual_cost


@dataclass(frozen=True)
class TradeResult:
    shares: int          # centishares
    actual_cost: int     # cents
    price: int           # cents
    new_balance: int     # cents
    position: Position
    transaction: Transaction
