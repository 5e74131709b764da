"""PortfolioValuator: pure revaluation of positions against market prices.

Positions whose market is missing from the snapshot are left out of the
totals and described with a placeholder view instead.
"""

from collections.abc import Iterable

from src.pm_common.cents import SHARE_SCALE, value_of_shares
from src.pm_market.domain.models import Market
from src.pm_portfolio.domain.models import PortfolioSummary, Position, PositionView


def _pnl_percentage(pnl: int, invested: int) -> float:
    return pnl / invested * 100 if invested > 0 else 0.0


def _index(markets: Iterable[Market]) -> dict[int, Market]:
    return {m.id: m for m in markets}


class PortfolioValuator:
    """Stateless; every call is a function of its arguments only."""

    def valuate(
        self, positions: Iterable[Position], markets: Iterable[Market]
    ) -> PortfolioSummary:
        by_id = _index(markets)
        exact_value = 0  # cents x SHARE_SCALE
        total_invested = 0
        for position in positions:
            market = by_id.get(position.market_id)
            if market is None:
                continue
            exact_value += position.shares * market.price_for(position.side)
            total_invested += position.invested

        # Rounded half-up once, on the exact sum
        total_value = (exact_value + SHARE_SCALE // 2) // SHARE_SCALE
        pnl = total_value - total_invested
        return PortfolioSummary(
            total_value=total_value,
            total_invested=total_invested,
            pnl=pnl,
            pnl_percentage=_pnl_percentage(pnl, total_invested),
        )

    def describe(
        self, positions: Iterable[Position], markets: Iterable[Market]
    ) -> list[PositionView]:
        by_id = _index(markets)
        views: list[PositionView] = []
        for position in positions:
            market = by_id.get(position.market_id)
            if market is None:
                views.append(
                    PositionView(
                        position=position,
                        title=f"Market #{position.market_id} (Data Unavailable)",
                        data_available=False,
                    )
                )
                continue

            price = market.price_for(position.side)
            value = value_of_shares(position.shares, price)
            pnl = value - position.invested
            views.append(
                PositionView(
                    position=position,
                    title=market.title,
                    data_available=True,
                    market_status=market.status,
                    current_price=price,
                    current_value=value,
                    pnl=pnl,
                    pnl_percentage=_pnl_percentage(pnl, position.invested),
                )
            )
        return views
