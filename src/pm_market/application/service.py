"""MarketApplicationService: thin composition layer over the catalogue.

Every listing is a "fetch": the listed markets take one PriceModel step
before they are returned, simulating live movement. Detail reads and quotes
do not move prices.
"""

from src.pm_common.errors import MarketNotFoundError
from src.pm_market.application.schemas import (
    CategoryOut,
    MarketDetail,
    MarketListItem,
    MarketListResponse,
    PriceQuoteOut,
)
from src.pm_market.domain.price_model import PriceModel
from src.pm_market.domain.repository import MarketSourceProtocol
from src.pm_market.infrastructure.seed import CATEGORIES
from src.store import DemoStore


class MarketApplicationService:
    def __init__(
        self,
        store: DemoStore,
        source: MarketSourceProtocol | None = None,
        price_model: PriceModel | None = None,
    ) -> None:
        self._source: MarketSourceProtocol = source or store.market_source
        self._price_model = price_model or store.price_model

    async def list_markets(self, category: str | None) -> MarketListResponse:
        listed = self._source.list_markets(category)
        self._price_model.refresh_all(m.id for m in listed)
        # Re-read so the response carries the refreshed prices
        markets = [self._source.get_market(m.id) for m in listed]
        items = [MarketListItem.from_domain(m) for m in markets if m is not None]
        return MarketListResponse(items=items, total=len(items))

    async def get_market(self, market_id: int) -> MarketDetail:
        market = self._source.get_market(market_id)
        if market is None:
            raise MarketNotFoundError(market_id)
        return MarketDetail.from_domain(market)

    async def get_price(self, market_id: int) -> PriceQuoteOut:
        return PriceQuoteOut.from_domain(self._price_model.get_price(market_id))

    async def list_categories(self) -> list[CategoryOut]:
        return [CategoryOut.from_domain(c) for c in CATEGORIES.values()]
