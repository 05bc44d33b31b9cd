"""In-memory implementation of TransactionRepository.

Volatile reference engine used for tests and local development. All state
lives in one object guarded by a single reader/writer lock:

- ``transactions``: id -> Transaction
- ``user_transactions``: user -> ids owned by that user

Both indexes are only ever modified together while the write lock is held.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional

from ledger.domain.transactions import (
    Filter,
    MonthlyTotal,
    NewTransaction,
    PageOptions,
    TagDiff,
    Transaction,
    TransactionNotFoundError,
    TransactionRepository,
    TransactionStorageError,
    aggregate_monthly_totals,
    rank_transactees,
    sort_most_recent_first,
)
from ledger.infrastructure.persistence.memory.rw_lock import (
    LockTimeoutError,
    ReadWriteLock,
)

logger = logging.getLogger(__name__)


@dataclass
class _State:
    transactions: dict[int, Transaction] = field(default_factory=dict)
    user_transactions: dict[str, set[int]] = field(default_factory=dict)
    next_id: int = 1

    def owns(self, user: str, transaction_id: int) -> bool:
        return transaction_id in self.user_transactions.get(user, ())

    def owned_by(self, user: str) -> list[Transaction]:
        return [
            self.transactions[transaction_id]
            for transaction_id in self.user_transactions.get(user, ())
        ]


class TransactionRepositoryInMemory(TransactionRepository):
    """Lock-protected, map-based transaction repository."""

    def __init__(self, lock_timeout: float = 10.0):
        self._state = _State()
        self._lock = ReadWriteLock(timeout=lock_timeout)

    @asynccontextmanager
    async def _reading(
        self,
        operation: str,
        user: str,
        transaction_id: Optional[int] = None,
    ) -> AsyncIterator[_State]:
        try:
            async with self._lock.read():
                yield self._state
        except LockTimeoutError as e:
            logger.exception("Lock failure during %s (user=%s)", operation, user)
            raise TransactionStorageError(operation, transaction_id, user) from e

    @asynccontextmanager
    async def _writing(
        self,
        operation: str,
        user: str,
        transaction_id: Optional[int] = None,
    ) -> AsyncIterator[_State]:
        try:
            async with self._lock.write():
                yield self._state
        except LockTimeoutError as e:
            logger.exception("Lock failure during %s (user=%s)", operation, user)
            raise TransactionStorageError(operation, transaction_id, user) from e

    async def get_transaction(self, user: str, transaction_id: int) -> Transaction:
        async with self._reading("get transaction", user, transaction_id) as state:
            if not state.owns(user, transaction_id):
                raise TransactionNotFoundError(transaction_id)
            return state.transactions[transaction_id]

    async def get_all_transactions(
        self,
        user: str,
        filter: Filter = Filter.NONE,  # NOQA: A002
        page_options: Optional[PageOptions] = None,
    ) -> List[Transaction]:
        async with self._reading("get transactions", user) as state:
            transactions = state.owned_by(user)

        if not filter.is_empty:
            transactions = [t for t in transactions if filter.matches(t)]

        matching = sort_most_recent_first(transactions)
        if page_options is not None:
            matching = page_options.apply(matching)
        return matching

    async def create_new_transaction(
        self,
        user: str,
        new_transaction: NewTransaction,
    ) -> Transaction:
        async with self._writing("create transaction", user) as state:
            transaction_id = state.next_id
            state.next_id += 1

            transaction = new_transaction.to_transaction(transaction_id)
            state.transactions[transaction_id] = transaction
            state.user_transactions.setdefault(user, set()).add(transaction_id)

        logger.info("Transaction created: %s (user=%s)", transaction_id, user)
        return transaction

    async def update_transaction(
        self,
        user: str,
        transaction_id: int,
        updated_transaction: NewTransaction,
    ) -> Transaction:
        async with self._writing("update transaction", user, transaction_id) as state:
            if not state.owns(user, transaction_id):
                raise TransactionNotFoundError(transaction_id)

            existing = state.transactions[transaction_id]
            diff = TagDiff.between(existing.tags, updated_transaction.tags)
            transaction = updated_transaction.model_copy(
                update={"tags": diff.apply(existing.tags)},
            ).to_transaction(transaction_id)
            state.transactions[transaction_id] = transaction

        logger.info(
            "Transaction updated: %s (+%d/-%d tags)",
            transaction_id,
            len(diff.to_add),
            len(diff.to_remove),
        )
        return transaction

    async def delete_transaction(self, user: str, transaction_id: int) -> Transaction:
        async with self._writing("delete transaction", user, transaction_id) as state:
            if not state.owns(user, transaction_id):
                raise TransactionNotFoundError(transaction_id)

            transaction = state.transactions.pop(transaction_id)
            state.user_transactions[user].discard(transaction_id)

        logger.info("Transaction deleted: %s (user=%s)", transaction_id, user)
        return transaction

    async def get_monthly_totals(
        self,
        user: str,
        filter: Filter = Filter.NONE,  # NOQA: A002
    ) -> List[MonthlyTotal]:
        transactions = await self.get_all_transactions(user, filter)
        return aggregate_monthly_totals((t.date, t.amount) for t in transactions)

    async def get_all_categories(self, user: str) -> List[str]:
        async with self._reading("get categories", user) as state:
            return list({t.category for t in state.owned_by(user)})

    async def get_all_tags(self, user: str) -> List[str]:
        async with self._reading("get tags", user) as state:
            return list({tag for t in state.owned_by(user) for tag in t.tags})

    async def get_all_transactees(
        self,
        user: str,
        category: Optional[str] = None,
    ) -> List[str]:
        async with self._reading("get transactees", user) as state:
            transactions = state.owned_by(user)
        return rank_transactees(transactions, category)

    async def get_balance(self, user: str) -> Decimal:
        async with self._reading("get balance", user) as state:
            return sum((t.amount for t in state.owned_by(user)), Decimal("0"))
