"""Transaction aggregate for the ledger domain.

A transaction is a single dated ledger entry. The owning user is tracked by
the repositories only and never appears on the public view.
"""

from __future__ import annotations

from datetime import date as Date  # NOQA: N812
from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class NewTransaction(BaseModel):
    """Payload used to create a transaction or fully replace an existing one."""

    category: str = Field(min_length=1)
    transactee: Optional[str] = None
    note: Optional[str] = None
    date: Date
    # Whole cents, at most 13 digits before the point (NUMERIC(15, 2))
    amount: Decimal = Field(max_digits=15, decimal_places=2)
    tags: frozenset[str] = frozenset()

    model_config = ConfigDict(frozen=True)

    @field_validator("amount", mode="before")
    @classmethod
    def validate_amount(cls, v: Any) -> Decimal:
        # floats go through str() so 0.1 stays 0.1
        if isinstance(v, float):
            return Decimal(str(v))
        return v

    @field_validator("tags", mode="before")
    @classmethod
    def validate_tags(cls, v: Any) -> frozenset[str]:
        if v is None:
            return frozenset()
        if isinstance(v, str):
            msg = "tags must be an iterable of strings, not a single string"
            raise ValueError(msg)
        return frozenset(v)

    def to_transaction(self, transaction_id: int) -> Transaction:
        return Transaction(
            id=transaction_id,
            category=self.category,
            transactee=self.transactee,
            note=self.note,
            date=self.date,
            amount=self.amount,
            tags=self.tags,
        )


class Transaction(NewTransaction):
    """A persisted transaction with its engine-assigned id."""

    id: int

    def __repr__(self) -> str:
        return (
            f"Transaction(id={self.id}, date={self.date.isoformat()}, "
            f"category={self.category!r}, amount={self.amount})"
        )
