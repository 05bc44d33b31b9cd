"""Repository interfaces for the transactions domain."""

from ledger.domain.transactions.repositories.transaction_repository import (
    TransactionRepository,
)

__all__ = ["TransactionRepository"]
