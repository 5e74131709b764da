"""Pydantic schemas for portfolio API."""

from pydantic import BaseModel

from src.pm_common.cents import (
    cents_to_display,
    format_date,
    format_percentage,
    price_to_display,
    shares_to_display,
)
from src.pm_portfolio.domain.models import PortfolioSummary, Position, PositionView


class PositionOut(BaseModel):
    id: str
    market_id: int
    side: str
    shares: int              # centishares
    shares_display: str
    avg_price: float         # dollars per share
    avg_price_display: str
    invested_cents: int
    invested_display: str
    purchase_date: str
    purchase_date_display: str

    @classmethod
    def from_domain(cls, p: Position) -> "PositionOut":
        return cls(
            id=p.id,
            market_id=p.market_id,
            side=p.side,
            shares=p.shares,
            shares_display=shares_to_display(p.shares),
            avg_price=p.avg_price,
            avg_price_display=f"${p.avg_price:.2f}",
            invested_cents=p.invested,
            invested_display=cents_to_display(p.invested),
            purchase_date=p.purchase_date.isoformat(),
            purchase_date_display=format_date(p.purchase_date),
        )


class PositionViewOut(BaseModel):
    position: PositionOut
    title: str
    data_available: bool
    market_status: str | None
    current_price_cents: int | None
    current_price_display: str | None
    current_value_cents: int | None
    current_value_display: str | None
    pnl_cents: int | None
    pnl_display: str | None
    pnl_percentage: float | None
    pnl_percentage_display: str | None

    @classmethod
    def from_domain(cls, v: PositionView) -> "PositionViewOut":
        if not v.data_available:
            return cls(
                position=PositionOut.from_domain(v.position),
                title=v.title,
                data_available=False,
                market_status=None,
                current_price_cents=None,
                current_price_display=None,
                current_value_cents=None,
                current_value_display=None,
                pnl_cents=None,
                pnl_display=None,
                pnl_percentage=None,
                pnl_percentage_display=None,
            )
        return cls(
            position=PositionOut.from_domain(v.position),
            title=v.title,
            data_available=True,
            market_status=v.market_status,
            current_price_cents=v.current_price,
            current_price_display=price_to_display(v.current_price or 0),
            current_value_cents=v.current_value,
            current_value_display=cents_to_display(v.current_value or 0),
            pnl_cents=v.pnl,
            pnl_display=cents_to_display(v.pnl or 0),
            pnl_percentage=v.pnl_percentage,
            pnl_percentage_display=format_percentage(v.pnl_percentage or 0.0),
        )


class PortfolioSummaryOut(BaseModel):
    total_value_cents: int
    total_value_display: str
    total_invested_cents: int
    total_invested_display: str
    pnl_cents: int
    pnl_display: str
    pnl_percentage: float
    pnl_percentage_display: str

    @classmethod
    def from_domain(cls, s: PortfolioSummary) -> "PortfolioSummaryOut":
        return cls(
            total_value_cents=s.total_value,
            total_value_display=cents_to_display(s.total_value),
            total_invested_cents=s.total_invested,
            total_invested_display=cents_to_display(s.total_invested),
            pnl_cents=s.pnl,
            pnl_display=cents_to_display(s.pnl),
            pnl_percentage=s.pnl_percentage,
            pnl_percentage_display=format_percentage(s.pnl_percentage),
        )


class PortfolioResponse(BaseModel):
    summary: PortfolioSummaryOut
    positions: list[PositionViewOut]
    total: int
