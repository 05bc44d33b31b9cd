"""Domain services for the transactions domain."""

from ledger.domain.transactions.services.monthly_aggregation import (
    aggregate_monthly_totals,
)
from ledger.domain.transactions.services.tag_reconciliation import TagDiff
from ledger.domain.transactions.services.transaction_ordering import (
    rank_transactees,
    sort_most_recent_first,
    transaction_sort_key,
)

__all__ = [
    "TagDiff",
    "aggregate_monthly_totals",
    "rank_transactees",
    "sort_most_recent_first",
    "transaction_sort_key",
]
