"""Domain models for pm_account: pure dataclasses, no framework dependency."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass
class User:
    id: str
    username: str
    email: str | None
    balance: int             # cents, never negative
    total_deposited: int = 0  # cents
    total_withdrawn: int = 0  # cents
    created_at: datetime | None = None
    last_login: datetime | None = None


@dataclass(frozen=True)
class Transaction:
    id: str
    type: str                # TransactionType value
    amount: int              # cents, positive=income negative=expense
    timestamp: datetime
    details: dict[str, Any] = field(default_factory=dict)
