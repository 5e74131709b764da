"""Append-only transaction log. Entries are frozen and never removed."""

from src.pm_account.domain.models import Transaction


class TransactionLog:
    def __init__(self) -> None:
        self._entries: list[Transaction] = []

    def append(self, txn: Transaction) -> None:
        self._entries.append(txn)

    def list_entries(self, newest_first: bool = True) -> list[Transaction]:
        if not newest_first:
            return list(self._entries)
        # Same-timestamp entries keep latest-appended first
        return sorted(reversed(self._entries), key=lambda t: t.timestamp, reverse=True)

    def __len__(self) -> int:
        return len(self._entries)
