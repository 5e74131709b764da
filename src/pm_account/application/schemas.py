"""Pydantic schemas for pm_account API."""

from pydantic import BaseModel, Field

from src.pm_account.domain.models import Transaction, User
from src.pm_common.cents import cents_to_display, price_to_display, shares_to_display

# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class LoginRequest(BaseModel):
    username: str = Field(..., min_length=1, max_length=64)
    email: str | None = Field(None, max_length=254)
    # Demo mode: any password works
    password: str | None = None


class DepositRequest(BaseModel):
    amount_cents: int = Field(..., description="Amount to deposit in cents")


class WithdrawRequest(BaseModel):
    amount_cents: int = Field(..., description="Amount to withdraw in cents")


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class UserResponse(BaseModel):
    id: str
    username: str
    email: str | None
    balance_cents: int
    balance_display: str
    total_deposited_cents: int
    total_withdrawn_cents: int
    last_login: str | None

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            username=user.username,
            email=user.email,
            balance_cents=user.balance,
            balance_display=cents_to_display(user.balance),
            total_deposited_cents=user.total_deposited,
            total_withdrawn_cents=user.total_withdrawn,
            last_login=user.last_login.isoformat() if user.last_login else None,
        )


class BalanceResponse(BaseModel):
    user_id: str
    balance_cents: int
    balance_display: str

    @classmethod
    def from_cents(cls, user_id: str, balance: int) -> "BalanceResponse":
        return cls(
            user_id=user_id,
            balance_cents=balance,
            balance_display=cents_to_display(balance),
        )


class DepositResponse(BaseModel):
    balance_cents: int
    balance_display: str
    deposited_cents: int
    deposited_display: str
    transaction_id: str

    @classmethod
    def from_result(cls, balance: int, amount: int, txn_id: str) -> "DepositResponse":
        return cls(
            balance_cents=balance,
            balance_display=cents_to_display(balance),
            deposited_cents=amount,
            deposited_display=cents_to_display(amount),
            transaction_id=txn_id,
        )


class WithdrawResponse(BaseModel):
    balance_cents: int
    balance_display: str
    withdrawn_cents: int
    withdrawn_display: str
    transaction_id: str

    @classmethod
    def from_result(cls, balance: int, amount: int, txn_id: str) -> "WithdrawResponse":
        return cls(
            balance_cents=balance,
            balance_display=cents_to_display(balance),
            withdrawn_cents=amount,
            withdrawn_display=cents_to_display(amount),
            transaction_id=txn_id,
        )


class TransactionItem(BaseModel):
    id: str
    type: str
    amount_cents: int
    amount_display: str
    timestamp: str  # ISO8601 string
    # Trade details carry shares in centishares and price in cents
    details: dict[str, object]
    shares_display: str | None = None
    price_display: str | None = None

    @classmethod
    def from_domain(cls, txn: Transaction) -> "TransactionItem":
        shares = txn.details.get("shares")
        price = txn.details.get("price")
        return cls(
            id=txn.id,
            type=txn.type,
            amount_cents=txn.amount,
            amount_display=cents_to_display(txn.amount),
            timestamp=txn.timestamp.isoformat(),
            details=dict(txn.details),
            shares_display=shares_to_display(shares) if isinstance(shares, int) else None,
            price_display=price_to_display(price) if isinstance(price, int) else None,
        )


class TransactionListResponse(BaseModel):
    items: list[TransactionItem]
    total: int
