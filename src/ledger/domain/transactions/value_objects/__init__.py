"""Value objects for the transactions domain."""

from ledger.domain.transactions.value_objects.filter import Filter
from ledger.domain.transactions.value_objects.monthly_total import MonthlyTotal
from ledger.domain.transactions.value_objects.page_options import PageOptions

__all__ = ["Filter", "MonthlyTotal", "PageOptions"]
