"""Monthly income/expense aggregation shared by all engines."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from ledger.domain.shared.time import first_day_of_month
from ledger.domain.transactions.value_objects import MonthlyTotal


def aggregate_monthly_totals(
    rows: Iterable[tuple[date, Decimal]],
) -> list[MonthlyTotal]:
    """
    Group ``(date, amount)`` rows by calendar month.

    Positive amounts count as income, everything else as expense (stored as
    an absolute value). Only months with at least one row are emitted.

    Parameters
    ----------
    rows
        ``(date, amount)`` pairs in any order

    Returns
    -------
    One MonthlyTotal per non-empty month, most recent month first
    """
    income: dict[date, Decimal] = {}
    expense: dict[date, Decimal] = {}

    for txn_date, amount in rows:
        month = first_day_of_month(txn_date)
        income.setdefault(month, Decimal("0"))
        expense.setdefault(month, Decimal("0"))
        if amount > 0:
            income[month] += amount
        else:
            expense[month] -= amount

    return [
        MonthlyTotal(month=month, income=income[month], expense=expense[month])
        for month in sorted(income, reverse=True)
    ]
