"""Unified error codes and custom exceptions.

Error code ranges:
  1xxx: Session/User
  2xxx: Account
  3xxx: Market
  5xxx: Position
  9xxx: System
"""


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        code: int,
        message: str,
        http_status: int = 500,
    ) -> None:
        self.code = code
        self.message = message
        self.http_status = http_status
        super().__init__(message)


# --- 1xxx: Session/User ---

class NotAuthenticatedError(AppError):
    def __init__(self) -> None:
        super().__init__(1006, "Please login first", 401)


# --- 2xxx: Account ---

class InsufficientBalanceError(AppError):
    def __init__(self, required: int, available: int) -> None:
        super().__init__(
            2001,
            f"Insufficient balance: required {required} cents, available {available} cents",
            422,
        )


class InvalidAmountError(AppError):
    def __init__(self, detail: str) -> None:
        super().__init__(2003, f"Invalid amount: {detail}", 422)


# --- 3xxx: Market ---

class MarketNotFoundError(AppError):
    def __init__(self, market_id: int) -> None:
        super().__init__(3001, f"Market not found: {market_id}", 404)


class MarketNotActiveError(AppError):
    def __init__(self, market_id: int) -> None:
        super().__init__(3002, f"Market is not active: {market_id}", 422)


class PriceOutOfRangeError(AppError):
    def __init__(self, price: int) -> None:
        super().__init__(3003, f"Price out of range [1, 99]: {price}", 500)


# --- 5xxx: Position ---

class PositionNotFoundError(AppError):
    def __init__(self, market_id: int, side: str) -> None:
        super().__init__(5002, f"Position not found: market {market_id} side {side}", 404)


# --- 9xxx: System ---

class InternalError(AppError):
    def __init__(self, detail: str = "Internal server error") -> None:
        super().__init__(9002, detail, 500)
