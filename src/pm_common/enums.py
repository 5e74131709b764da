"""Global enums: values are the wire format used by the API."""

from enum import Enum


class MarketStatus(str, Enum):
    ACTIVE = "active"
    CLOSED = "closed"
    RESOLVED = "resolved"
    CANCELLED = "cancelled"


class Side(str, Enum):
    YES = "yes"
    NO = "no"


class TransactionType(str, Enum):
    TRADE = "trade"
    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"


class MarketCategory(str, Enum):
    CARD_PRICES = "card-prices"
    EVENTS = "events"
    SET_PERFORMANCE = "set-performance"
