"""SQLAlchemy model for ledger transactions."""

from __future__ import annotations

import datetime as dt
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import Date, Index, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ledger.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)

if TYPE_CHECKING:
    from ledger.infrastructure.persistence.sqlalchemy.models.transaction_tag_model import (  # NOQA: E501
        TransactionTagModel,
    )


class TransactionModel(Base, TimestampMixin):
    """Database model for ledger transactions."""

    __tablename__ = "transactions"

    __table_args__ = (
        # Index for user-scoped, most-recent-first queries
        Index("ix_transactions_user_date", "user_id", "date"),
        Index("ix_transactions_user_category", "user_id", "category"),
        # Never reuse ids of deleted rows on SQLite
        {"sqlite_autoincrement": True},
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Ownership; the transaction store only scopes by this value
    user_id: Mapped[str] = mapped_column(String, nullable=False)

    category: Mapped[str] = mapped_column(String, nullable=False)
    transactee: Mapped[str | None] = mapped_column(String, nullable=True)
    note: Mapped[str | None] = mapped_column(Text, nullable=True)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False)

    # Signed: positive is income, negative is expense
    amount: Mapped[Decimal] = mapped_column(Numeric(15, 2), nullable=False)

    tags: Mapped[list[TransactionTagModel]] = relationship(
        "TransactionTagModel",
        back_populates="transaction",
        cascade="all, delete-orphan",
        lazy="selectin",  # One extra IN query per result set
    )

    def __repr__(self) -> str:
        return (
            f"<TransactionModel(id={self.id}, date={self.date}, "
            f"category={self.category}, amount={self.amount})>"
        )
