"""In-process domain events and a synchronous pub-sub bus.

Trade and account services publish after a mutation has fully applied.
Subscribers (portfolio views, market views, log sinks) are optional: the
publisher never depends on any of them existing, and a subscriber that raises
is logged and skipped so later subscribers still run.
"""

import logging
from collections import defaultdict
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

logger = logging.getLogger("pm.events")


@dataclass(frozen=True)
class DomainEvent:
    user_id: str
    occurred_at: datetime


@dataclass(frozen=True)
class TradeCompleted(DomainEvent):
    market_id: int
    side: str
    shares: int          # centishares
    actual_cost: int     # cents
    price: int           # cents
    transaction_id: str


@dataclass(frozen=True)
class BalanceUpdated(DomainEvent):
    old_balance: int     # cents
    new_balance: int     # cents
    transaction_id: str


Handler = Callable[[DomainEvent], None]


class EventBus:
    """Synchronous pub-sub. Handlers run in registration order."""

    def __init__(self) -> None:
        self._handlers: dict[type[DomainEvent], list[Handler]] = defaultdict(list)

    def subscribe(self, event_type: type[DomainEvent], handler: Handler) -> None:
        self._handlers[event_type].append(handler)

    def unsubscribe(self, event_type: type[DomainEvent], handler: Handler) -> bool:
        """Remove *handler* from *event_type*. Returns True if found."""
        try:
            self._handlers[event_type].remove(handler)
            return True
        except ValueError:
            return False

    def publish(self, event: DomainEvent) -> None:
        for handler in list(self._handlers.get(type(event), [])):
            try:
                handler(event)
            except Exception:
                logger.exception(
                    "Error in handler %r for %s", handler, type(event).__name__
                )

    def handler_count(self, event_type: type[DomainEvent]) -> int:
        return len(self._handlers.get(event_type, []))
