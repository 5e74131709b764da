from src.pm_common.errors import InvalidAmountError


def check_positive_amount(amount: int) -> None:
    """Raise InvalidAmountError(2003) if amount is not > 0 cents."""
    if amount <= 0:
        raise InvalidAmountError("amount must be greater than $0")


def check_amount_limit(amount: int, limit: int) -> None:
    """Raise InvalidAmountError(2003) if amount is not in [1, limit] cents."""
    if not (1 <= amount <= limit):
        raise InvalidAmountError(f"amount must be between 1 and {limit} cents, got {amount}")
