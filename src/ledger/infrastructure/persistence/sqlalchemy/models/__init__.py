"""SQLAlchemy models for persistence layer."""

from ledger.infrastructure.persistence.sqlalchemy.models.base import Base
from ledger.infrastructure.persistence.sqlalchemy.models.transaction_model import (
    TransactionModel,
)
from ledger.infrastructure.persistence.sqlalchemy.models.transaction_tag_model import (
    TransactionTagModel,
)
from ledger.infrastructure.persistence.sqlalchemy.models.user_model import UserModel

__all__ = [
    "Base",
    "TransactionModel",
    "TransactionTagModel",
    "UserModel",
]
