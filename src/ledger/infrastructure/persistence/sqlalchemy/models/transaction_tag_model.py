"""SQLAlchemy model for transaction tags."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ledger.infrastructure.persistence.sqlalchemy.models.base import Base

if TYPE_CHECKING:
    from ledger.infrastructure.persistence.sqlalchemy.models.transaction_model import (  # NOQA: E501
        TransactionModel,
    )


class TransactionTagModel(Base):
    """One tag of one transaction.

    The composite primary key keeps a tag unique per transaction.
    """

    __tablename__ = "transaction_tags"

    transaction_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("transactions.id", ondelete="CASCADE"),
        primary_key=True,
    )
    tag: Mapped[str] = mapped_column(String, primary_key=True, index=True)

    transaction: Mapped[TransactionModel] = relationship(
        "TransactionModel",
        back_populates="tags",
    )

    def __repr__(self) -> str:
        return (
            f"<TransactionTagModel(transaction_id={self.transaction_id}, "
            f"tag={self.tag})>"
        )
