"""PositionLedger: at most one position per (market_id, side).

A trade into an existing key mutates that position in place: shares and
invested accumulate, avg_price follows as invested / shares, and
purchase_date keeps the first trade's timestamp.
"""

from datetime import datetime

from src.pm_common.id_generator import generate_id
from src.pm_portfolio.domain.models import Position


class PositionLedger:
    def __init__(self) -> None:
        self._positions: dict[tuple[int, str], Position] = {}

    def upsert(
        self, market_id: int, side: str, shares: int, cost: int, timestamp: datetime
    ) -> Position:
        key = (market_id, side)
        existing = self._positions.get(key)
        if existing is None:
            position = Position(
                id=generate_id("pos"),
                market_id=market_id,
                side=side,
                shares=shares,
                invested=cost,
                purchase_date=timestamp,
            )
            self._positions[key] = position
            return position

        existing.shares += shares
        existing.invested += cost
        return existing

    def get(self, market_id: int, side: str) -> Position | None:
        return self._positions.get((market_id, side))

    def list_positions(self) -> list[Position]:
        return list(self._positions.values())

    def has_position_in_market(self, market_id: int) -> bool:
        return any(key[0] == market_id for key in self._positions)

    def total_invested(self) -> int:
        return sum(p.invested for p in self._positions.values())

    def __len__(self) -> int:
        return len(self._positions)
