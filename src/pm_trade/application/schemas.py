"""Pydantic schemas for trade API."""

from pydantic import BaseModel, Field

from src.pm_common.cents import cents_to_display, price_to_display, shares_to_display
from src.pm_common.enums import Side
from src.pm_portfolio.application.schemas import PositionOut
from src.pm_trade.domain.models import TradeQuote, TradeResult


class PlaceTradeRequest(BaseModel):
    market_id: int
    side: Side
    # No gt=0 here: the engine rejects non-positive amounts with InvalidAmountError
    amount_cents: int = Field(..., description="Amount to invest in cents")


class TradeQuoteResponse(BaseModel):
    market_id: int
    side: str
    price_cents: int
    price_display: str
    shares: int
    shares_display: str
    cost_cents: int
    cost_display: str
    potential_payout_cents: int
    potential_payout_display: str
    potential_profit_cents: int
    potential_profit_display: str

    @classmethod
    def from_domain(cls, q: TradeQuote) -> "TradeQuoteResponse":
        return cls(
            market_id=q.market_id,
            side=q.side,
            price_cents=q.price,
            price_display=price_to_display(q.price),
            shares=q.shares,
            shares_display=shares_to_display(q.shares),
            cost_cents=q.actual_cost,
            cost_display=cents_to_display(q.actual_cost),
            potential_payout_cents=q.potential_payout,
            potential_payout_display=cents_to_display(q.potential_payout),
            potential_profit_cents=q.potential_profit,
            potential_profit_display=cents_to_display(q.potential_profit),
        )


class TradeResponse(BaseModel):
    shares: int
    shares_display: str
    actual_cost_cents: int
    actual_cost_display: str
    price_cents: int
    price_display: str
    new_balance_cents: int
    new_balance_display: str
    position: PositionOut
    transaction_id: str
    message: str

    @classmethod
    def from_domain(cls, r: TradeResult) -> "TradeResponse":
        side = r.position.side.upper()
        return cls(
            shares=r.shares,
            shares_display=shares_to_display(r.shares),
            actual_cost_cents=r.actual_cost,
            actual_cost_display=cents_to_display(r.actual_cost),
            price_cents=r.price,
            price_display=price_to_display(r.price),
            new_balance_cents=r.new_balance,
            new_balance_display=cents_to_display(r.new_balance),
            position=PositionOut.from_domain(r.position),
            transaction_id=r.transaction.id,
            message=(
                f"Successfully purchased {shares_to_display(r.shares)} {side} shares "
                f"for {cents_to_display(r.actual_cost)}"
            ),
        )
