"""SQLAlchemy repository implementations."""

from ledger.infrastructure.persistence.sqlalchemy.repositories.transaction_repository import (  # NOQA: E501
    TransactionRepositorySQLAlchemy,
)
from ledger.infrastructure.persistence.sqlalchemy.repositories.user_repository import (
    UserRepositorySQLAlchemy,
)

__all__ = [
    "TransactionRepositorySQLAlchemy",
    "UserRepositorySQLAlchemy",
]
