"""Time-ordered business IDs for users, positions and transactions.

Snowflake-style: the integer part packs a millisecond timestamp above a
per-millisecond sequence, so IDs from one generator sort in creation order.
A single-process demo has no machine id to encode.

    generate_id("pos") -> 'pos_7243119206400000'
"""

import threading
import time

EPOCH_MS = 1_704_067_200_000  # 2024-01-01T00:00:00Z
SEQUENCE_BITS = 12
MAX_SEQUENCE = (1 << SEQUENCE_BITS) - 1


class IdGenerator:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._last_ms = -1
        self._sequence = 0

    def next_int(self) -> int:
        with self._lock:
            now_ms = int(time.time() * 1000)
            if now_ms < self._last_ms:
                # Clock stepped back; keep issuing from the last timestamp
                now_ms = self._last_ms
            if now_ms == self._last_ms:
                self._sequence = (self._sequence + 1) & MAX_SEQUENCE
                if self._sequence == 0:
                    while now_ms <= self._last_ms:
                        now_ms = int(time.time() * 1000)
            else:
                self._sequence = 0
            self._last_ms = now_ms
            return ((now_ms - EPOCH_MS) << SEQUENCE_BITS) | self._sequence

    def next_id(self, prefix: str | None = None) -> str:
        raw = str(self.next_int())
        return f"{prefix}_{raw}" if prefix else raw


_default = IdGenerator()


def generate_id(prefix: str | None = None) -> str:
    return _default.next_id(prefix)
