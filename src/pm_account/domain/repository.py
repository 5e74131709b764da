"""Repository Protocols: dependency inversion for testability.

Unit tests inject a stub that conforms to these Protocols.
Infrastructure layer provides the in-memory implementations.
"""

from typing import Protocol

from src.pm_account.domain.models import Transaction, User


class SessionStoreProtocol(Protocol):
    def get_current_user(self) -> User | None: ...

    def persist_user(self, user: User) -> None: ...

    def clear(self) -> None: ...

    def find_user(self, username: str) -> User | None: ...


class TransactionLogProtocol(Protocol):
    def append(self, txn: Transaction) -> None: ...

    def list_entries(self, newest_first: bool = True) -> list[Transaction]: ...

    def __len__(self) -> int: ...
