"""PortfolioApplicationService: read-only valuation of the session user's book.

Values against the catalogue's current prices. No commit, no lock: reads
only, and PortfolioValuator is pure.
"""

from src.pm_account.domain.models import User
from src.pm_common.enums import Side
from src.pm_common.errors import PositionNotFoundError
from src.pm_portfolio.application.schemas import (
    PortfolioResponse,
    PortfolioSummaryOut,
    PositionOut,
    PositionViewOut,
)
from src.pm_portfolio.domain.valuation import PortfolioValuator
from src.store import DemoStore


class PortfolioApplicationService:
    def __init__(self, store: DemoStore, valuator: PortfolioValuator | None = None) -> None:
        self._store = store
        self._valuator = valuator or PortfolioValuator()

    async def get_portfolio(self, user: User) -> PortfolioResponse:
        positions = self._store.ledger_for(user.id).list_positions()
        markets = self._store.market_source.all_markets()

        summary = self._valuator.valuate(positions, markets)
        views = self._valuator.describe(positions, markets)
        return PortfolioResponse(
            summary=PortfolioSummaryOut.from_domain(summary),
            positions=[PositionViewOut.from_domain(v) for v in views],
            total=len(views),
        )

    async def get_position(self, user: User, market_id: int, side: Side) -> PositionOut:
        position = self._store.ledger_for(user.id).get(market_id, side.value)
        if position is None:
            raise PositionNotFoundError(market_id, side.value)
        return PositionOut.from_domain(position)
