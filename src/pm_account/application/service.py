"""AccountApplicationService: demo session, balance, funds and history.

Balance mutations (deposit, withdraw) run under the store lock shared with
the trade service, so no two read-then-write sequences on a balance
interleave. Events are published only after the mutation has applied.
"""

import logging

from config.settings import settings
from src.pm_account.application.schemas import (
    BalanceResponse,
    DepositResponse,
    TransactionItem,
    TransactionListResponse,
    UserResponse,
    WithdrawResponse,
)
from src.pm_account.domain.models import Transaction, User
from src.pm_common.datetime_utils import utc_now
from src.pm_common.enums import TransactionType
from src.pm_common.errors import NotAuthenticatedError
from src.pm_common.events import BalanceUpdated
from src.pm_common.id_generator import generate_id
from src.pm_risk.rules.amount import check_amount_limit, check_positive_amount
from src.pm_risk.rules.balance_check import check_sufficient_balance
from src.store import DemoStore

logger = logging.getLogger("pm.account")


class AccountApplicationService:
    def __init__(
        self,
        store: DemoStore,
        starting_balance: int = settings.STARTING_BALANCE_CENTS,
        max_deposit: int = settings.MAX_DEPOSIT_CENTS,
    ) -> None:
        self._store = store
        self._starting_balance = starting_balance
        self._max_deposit = max_deposit

    def current_user(self) -> User:
        user = self._store.sessions.get_current_user()
        if user is None:
            raise NotAuthenticatedError()
        return user

    def _record(self, user: User, txn_type: TransactionType, amount: int, details: dict) -> Transaction:
        txn = Transaction(
            id=generate_id("txn"),
            type=txn_type.value,
            amount=amount,
            timestamp=utc_now(),
            details=details,
        )
        self._store.transactions_for(user.id).append(txn)
        return txn

    async def login(self, username: str, email: str | None = None) -> UserResponse:
        # Demo mode: any credentials work; first login creates the user
        user = self._store.sessions.find_user(username)
        if user is None:
            user = User(
                id=generate_id("user"),
                username=username,
                email=email,
                balance=0,
                created_at=utc_now(),
            )
            if self._starting_balance > 0:
                user.balance = self._starting_balance
                user.total_deposited = self._starting_balance
                self._record(
                    user, TransactionType.DEPOSIT, self._starting_balance,
                    {"method": "demo_funding"},
                )
            logger.info("Created demo user %s with %d cents", username, user.balance)

        user.last_login = utc_now()
        self._store.sessions.persist_user(user)
        return UserResponse.from_domain(user)

    async def logout(self) -> None:
        self._store.sessions.clear()

    async def me(self) -> UserResponse:
        return UserResponse.from_domain(self.current_user())

    async def get_balance(self) -> BalanceResponse:
        user = self.current_user()
        return BalanceResponse.from_cents(user_id=user.id, balance=user.balance)

    async def deposit(self, amount_cents: int) -> DepositResponse:
        async with self._store.lock:
            user = self.current_user()
            check_amount_limit(amount_cents, self._max_deposit)

            old_balance = user.balance
            user.balance += amount_cents
            user.total_deposited += amount_cents
            txn = self._record(
                user, TransactionType.DEPOSIT, amount_cents, {"method": "demo_funding"}
            )
            self._store.sessions.persist_user(user)

        logger.info("Deposit %d cents for %s", amount_cents, user.username)
        self._store.event_bus.publish(
            BalanceUpdated(
                user_id=user.id,
                occurred_at=txn.timestamp,
                old_balance=old_balance,
                new_balance=user.balance,
                transaction_id=txn.id,
            )
        )
        return DepositResponse.from_result(
            balance=user.balance, amount=amount_cents, txn_id=txn.id
        )

    async def withdraw(self, amount_cents: int) -> WithdrawResponse:
        async with self._store.lock:
            user = self.current_user()
            check_positive_amount(amount_cents)
            check_sufficient_balance(amount_cents, user.balance)

            old_balance = user.balance
            user.balance -= amount_cents
            user.total_withdrawn += amount_cents
            txn = self._record(
                user, TransactionType.WITHDRAWAL, -amount_cents, {"method": "demo_withdrawal"}
            )
            self._store.sessions.persist_user(user)

        logger.info("Withdraw %d cents for %s", amount_cents, user.username)
        self._store.event_bus.publish(
            BalanceUpdated(
                user_id=user.id,
                occurred_at=txn.timestamp,
                old_balance=old_balance,
                new_balance=user.balance,
                transaction_id=txn.id,
            )
        )
        return WithdrawResponse.from_result(
            balance=user.balance, amount=amount_cents, txn_id=txn.id
        )

    async def list_transactions(self, txn_type: str | None = None) -> TransactionListResponse:
        user = self.current_user()
        entries = self._store.transactions_for(user.id).list_entries(newest_first=True)
        if txn_type is not None:
            entries = [t for t in entries if t.type == txn_type]
        items = [TransactionItem.from_domain(t) for t in entries]
        return TransactionListResponse(items=items, total=len(items))
