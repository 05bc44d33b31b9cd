"""Transactions domain layer exports."""

# Aggregates
from ledger.domain.transactions.aggregates import NewTransaction, Transaction

# Exceptions
from ledger.domain.transactions.exceptions import (
    TransactionNotFoundError,
    TransactionStorageError,
)

# Repository Interfaces
from ledger.domain.transactions.repositories import TransactionRepository

# Domain Services
from ledger.domain.transactions.services import (
    TagDiff,
    aggregate_monthly_totals,
    rank_transactees,
    sort_most_recent_first,
)

# Value Objects
from ledger.domain.transactions.value_objects import Filter, MonthlyTotal, PageOptions

__all__ = [
    # Aggregates
    "NewTransaction",
    "Transaction",
    # Value Objects
    "Filter",
    "MonthlyTotal",
    "PageOptions",
    # Exceptions
    "TransactionNotFoundError",
    "TransactionStorageError",
    # Repository Interfaces
    "TransactionRepository",
    # Domain Services
    "TagDiff",
    "aggregate_monthly_totals",
    "rank_transactees",
    "sort_most_recent_first",
]
