from src.pm_common.cents import validate_price
from src.pm_common.errors import PriceOutOfRangeError


def check_price_range(price: int) -> None:
    """Raise PriceOutOfRangeError(3003) if a quoted price is not in [1, 99]."""
    try:
        validate_price(price)
    except ValueError as exc:
        raise PriceOutOfRangeError(price) from exc
