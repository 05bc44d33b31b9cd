"""Transaction aggregates."""

from ledger.domain.transactions.aggregates.transaction import (
    NewTransaction,
    Transaction,
)

__all__ = ["NewTransaction", "Transaction"]
