"""Ordering rules shared by every transaction engine."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from datetime import date
from typing import Optional

from ledger.domain.transactions.aggregates import Transaction


def transaction_sort_key(transaction: Transaction) -> tuple[date, int]:
    return (transaction.date, transaction.id)


def sort_most_recent_first(transactions: Iterable[Transaction]) -> list[Transaction]:
    """Sort by date descending, then id descending."""
    return sorted(transactions, key=transaction_sort_key, reverse=True)


def rank_transactees(
    transactions: Iterable[Transaction],
    category: Optional[str] = None,
) -> list[str]:
    """
    Rank distinct transactees by how many transactions reference them.

    With ``category`` set, only transactions of that category are counted;
    transactees that appear exclusively in other categories are still
    returned, ranked with a count of zero. Ties are ordered by name.
    """
    counts: Counter[str] = Counter()
    for transaction in transactions:
        if transaction.transactee is None:
            continue
        in_scope = category is None or transaction.category == category
        counts[transaction.transactee] += 1 if in_scope else 0

    return sorted(counts, key=lambda name: (-counts[name], name))
