"""Filter value object for transaction queries."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, ClassVar, Optional

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from ledger.domain.transactions.aggregates import Transaction


class Filter(BaseModel):
    """Conjunctive set of optional predicates narrowing a transaction query.

    ``from_date`` and ``until`` are inclusive bounds on the transaction date.
    ``category`` and ``transactee`` are exact string matches. A missing
    predicate leaves that dimension unconstrained.
    """

    NONE: ClassVar[Filter]

    from_date: Optional[date] = Field(default=None, alias="from")
    until: Optional[date] = None
    category: Optional[str] = None
    transactee: Optional[str] = None

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @property
    def is_empty(self) -> bool:
        return (
            self.from_date is None
            and self.until is None
            and self.category is None
            and self.transactee is None
        )

    def matches(self, transaction: Transaction) -> bool:
        if self.from_date is not None and transaction.date < self.from_date:
            return False
        if self.until is not None and transaction.date > self.until:
            return False
        if self.category is not None and transaction.category != self.category:
            return False
        # A transactee filter never matches a transaction without one
        return self.transactee is None or transaction.transactee == self.transactee


Filter.NONE = Filter()
