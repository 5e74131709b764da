"""Pydantic schemas for pm_market API responses.

Prices are exposed both as integer cents and as a dollar display string;
YES and NO always sum to 100 cents.
"""

from pydantic import BaseModel

from src.pm_common.cents import cents_to_display, price_to_display
from src.pm_market.domain.models import CategoryInfo, Market, PriceQuote


class PriceQuoteOut(BaseModel):
    market_id: int
    yes_price_cents: int
    no_price_cents: int
    yes_price_display: str
    no_price_display: str

    @classmethod
    def from_domain(cls, q: PriceQuote) -> "PriceQuoteOut":
        return cls(
            market_id=q.market_id,
            yes_price_cents=q.yes_price,
            no_price_cents=q.no_price,
            yes_price_display=price_to_display(q.yes_price),
            no_price_display=price_to_display(q.no_price),
        )


# ---------------------------------------------------------------------------
# Market list item (lightweight: no description, no resolution source)
# ---------------------------------------------------------------------------


class MarketListItem(BaseModel):
    id: int
    title: str
    category: str
    status: str
    yes_price_cents: int
    no_price_cents: int
    yes_price_display: str
    no_price_display: str
    total_volume_cents: int
    total_volume_display: str
    end_date: str

    @classmethod
    def from_domain(cls, m: Market) -> "MarketListItem":
        return cls(
            id=m.id,
            title=m.title,
            category=m.category,
            status=m.status,
            yes_price_cents=m.yes_price,
            no_price_cents=m.no_price,
            yes_price_display=price_to_display(m.yes_price),
            no_price_display=price_to_display(m.no_price),
            total_volume_cents=m.total_volume,
            total_volume_display=cents_to_display(m.total_volume),
            end_date=m.end_date.isoformat(),
        )


class MarketListResponse(BaseModel):
    items: list[MarketListItem]
    total: int


# ---------------------------------------------------------------------------
# Market detail (full fields)
# ---------------------------------------------------------------------------


class MarketDetail(MarketListItem):
    description: str
    resolution_source: str

    @classmethod
    def from_domain(cls, m: Market) -> "MarketDetail":
        base = MarketListItem.from_domain(m)
        return cls(
            **base.model_dump(),
            description=m.description,
            resolution_source=m.resolution_source,
        )


class CategoryOut(BaseModel):
    key: str
    label: str
    description: str
    icon: str

    @classmethod
    def from_domain(cls, c: CategoryInfo) -> "CategoryOut":
        return cls(key=c.key, label=c.label, description=c.description, icon=c.icon)
