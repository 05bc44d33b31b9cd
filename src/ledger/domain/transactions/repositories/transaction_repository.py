"""Transaction repository interface.

Defines the contract for Transaction persistence. Every operation is scoped
to the opaque ``user`` identifier passed as first argument; implementations
must never read or modify another user's transactions.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import List, Optional

from ledger.domain.transactions.aggregates import NewTransaction, Transaction
from ledger.domain.transactions.value_objects import Filter, MonthlyTotal, PageOptions


class TransactionRepository(ABC):
    """
    Repository interface for Transaction aggregates.

    Errors
    ------
    TransactionNotFoundError
        The id does not exist for this user (also for ids owned by others)
    TransactionStorageError
        The underlying store failed; never used for a missing record
    """

    @abstractmethod
    async def get_transaction(self, user: str, transaction_id: int) -> Transaction:
        """Find a single transaction by id."""

    @abstractmethod
    async def get_all_transactions(
        self,
        user: str,
        filter: Filter = Filter.NONE,  # NOQA: A002
        page_options: Optional[PageOptions] = None,
    ) -> List[Transaction]:
        """
        Find transactions matching ``filter``.

        Parameters
        ----------
        user
            Owner of the transactions
        filter
            Conjunctive predicates; ``Filter.NONE`` returns everything
        page_options
            Offset/limit applied after filtering and sorting

        Returns
        -------
        Transactions sorted by date descending, then id descending.
        A page past the end yields an empty list.
        """

    @abstractmethod
    async def create_new_transaction(
        self,
        user: str,
        new_transaction: NewTransaction,
    ) -> Transaction:
        """Persist a new transaction and assign it a fresh id."""

    @abstractmethod
    async def update_transaction(
        self,
        user: str,
        transaction_id: int,
        updated_transaction: NewTransaction,
    ) -> Transaction:
        """
        Replace all fields and the tag set of an existing transaction.

        The stored tag set is reconciled by diff: only added tags are inserted
        and only removed tags are deleted, atomically with the field update.
        """

    @abstractmethod
    async def delete_transaction(self, user: str, transaction_id: int) -> Transaction:
        """Delete a transaction and return its last state, tags included."""

    @abstractmethod
    async def get_monthly_totals(
        self,
        user: str,
        filter: Filter = Filter.NONE,  # NOQA: A002
    ) -> List[MonthlyTotal]:
        """Income and expense per calendar month, most recent first."""

    @abstractmethod
    async def get_all_categories(self, user: str) -> List[str]:
        """Distinct categories, unordered."""

    @abstractmethod
    async def get_all_tags(self, user: str) -> List[str]:
        """Distinct tags across all of the user's transactions, unordered."""

    @abstractmethod
    async def get_all_transactees(
        self,
        user: str,
        category: Optional[str] = None,
    ) -> List[str]:
        """
        Distinct transactees ordered by descending transaction count.

        With ``category`` only transactions of that category are counted.
        Ties are ordered by transactee name.
        """

    @abstractmethod
    async def get_balance(self, user: str) -> Decimal:
        """Sum of all amounts (income minus expense), zero if none."""
