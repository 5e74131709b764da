from src.pm_common.errors import InsufficientBalanceError


def check_sufficient_balance(required: int, available: int) -> None:
    """Raise InsufficientBalanceError(2001) if required > available (both cents)."""
    if required > available:
        raise InsufficientBalanceError(required, available)
