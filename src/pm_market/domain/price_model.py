"""Simulated live pricing for binary markets.

Each refresh moves YES and NO independently by a uniform delta in
[-0.01, +0.01], clamps both to [0.01, 0.99], then renormalises by their sum
and rounds to 2 decimals. NO is taken as 1.00 - YES after rounding so the
pair always sums to exactly 1.00.
"""

import random
from collections.abc import Iterable

from src.pm_common.errors import MarketNotFoundError
from src.pm_market.domain.models import Market, PriceQuote

MAX_DRIFT = 0.01
MIN_PRICE = 0.01
MAX_PRICE = 0.99


def _clamp(value: float) -> float:
    return max(MIN_PRICE, min(MAX_PRICE, value))


def perturb(yes_price: int, no_price: int, rng: random.Random) -> tuple[int, int]:
    """Return a new (yes, no) pair in cents after one random step."""
    yes = _clamp(yes_price / 100 + rng.uniform(-MAX_DRIFT, MAX_DRIFT))
    no = _clamp(no_price / 100 + rng.uniform(-MAX_DRIFT, MAX_DRIFT))
    new_yes = round(yes / (yes + no) * 100)
    new_yes = max(1, min(99, new_yes))
    return new_yes, 100 - new_yes


class PriceModel:
    """Holds the current price pair for every market in a catalogue.

    The catalogue dict is shared with the MarketSource, so a refresh is
    visible to every reader of the same store.
    """

    def __init__(self, markets: dict[int, Market], rng: random.Random | None = None) -> None:
        self._markets = markets
        self._rng = rng or random.Random()

    def _market(self, market_id: int) -> Market:
        market = self._markets.get(market_id)
        if market is None:
            raise MarketNotFoundError(market_id)
        return market

    def get_price(self, market_id: int) -> PriceQuote:
        market = self._market(market_id)
        return PriceQuote(market_id, market.yes_price, market.no_price)

    def refresh(self, market_id: int) -> PriceQuote:
        market = self._market(market_id)
        market.yes_price, market.no_price = perturb(
            market.yes_price, market.no_price, self._rng
        )
        return PriceQuote(market_id, market.yes_price, market.no_price)

    def refresh_all(self, market_ids: Iterable[int]) -> list[PriceQuote]:
        return [self.refresh(market_id) for market_id in market_ids]
