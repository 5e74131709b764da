from src.pm_common.errors import MarketNotActiveError
from src.pm_market.domain.models import Market


def check_market_active(market: Market) -> None:
    if not market.is_active:
        raise MarketNotActiveError(market.id)
