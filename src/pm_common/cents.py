"""Integer arithmetic utilities for the cents-based trading engine.

All amounts and balances are int cents, all prices are int cents in [1, 99],
and all share quantities are int hundredths of a share ("centishares").
Floats only appear at the display boundary.
"""

from datetime import datetime

SHARE_SCALE = 100  # centishares per share


def validate_price(price: int) -> None:
    """Validate that price is in the range [1, 99] cents."""
    if not (1 <= price <= 99):
        raise ValueError(f"Price must be between 1 and 99 cents, got {price}")


def cents_to_display(cents: int) -> str:
    """Convert cents to display string: 6500 -> '$65.00', -1200 -> '-$12.00'."""
    if cents < 0:
        abs_cents = -cents
        return f"-${abs_cents // 100:,}.{abs_cents % 100:02d}"
    return f"${cents // 100:,}.{cents % 100:02d}"


def price_to_display(price: int) -> str:
    """65 -> '$0.65'."""
    return f"${price // 100}.{price % 100:02d}"


def shares_to_display(centishares: int) -> str:
    """2500 -> '25.00'."""
    return f"{centishares // SHARE_SCALE:,}.{centishares % SHARE_SCALE:02d}"


def shares_for_investment(investment: int, price: int) -> int:
    """Centishares bought with `investment` cents at `price` cents per share.

    shares = floor(investment / price * 100) / 100, i.e. truncated to 0.01
    shares so the cost can never exceed the investment.
    """
    return (investment * SHARE_SCALE) // price


def cost_of_shares(centishares: int, price: int) -> int:
    """Cost in cents of `centishares` at `price`, ceiling to a whole cent.

    cost = ceil(centishares * price / 100). Because centishares was truncated
    from an investment, the ceiling never exceeds that investment.
    """
    if centishares == 0:
        return 0
    return (centishares * price + SHARE_SCALE - 1) // SHARE_SCALE


def value_of_shares(centishares: int, price: int) -> int:
    """Market value in cents of `centishares` at `price`, rounded half-up."""
    return (centishares * price + SHARE_SCALE // 2) // SHARE_SCALE


def format_percentage(percentage: float) -> str:
    """10.84 -> '+10.8%', -3.0 -> '-3.0%'."""
    sign = "+" if percentage >= 0 else ""
    return f"{sign}{percentage:.1f}%"


def format_date(value: datetime) -> str:
    """datetime(2024, 9, 15) -> 'Sep 15, 2024'."""
    return f"{value:%b} {value.day}, {value.year}"
