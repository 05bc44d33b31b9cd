"""SQLAlchemy (relational) persistence engine."""

from ledger.infrastructure.persistence.sqlalchemy.adapters import (
    SqlAlchemyHealthCheckAdapter,
)
from ledger.infrastructure.persistence.sqlalchemy.engine import (
    create_engine,
    create_session_maker,
)
from ledger.infrastructure.persistence.sqlalchemy.init_db import (
    create_tables,
    drop_tables,
)
from ledger.infrastructure.persistence.sqlalchemy.repositories import (
    TransactionRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)

__all__ = [
    "SqlAlchemyHealthCheckAdapter",
    "TransactionRepositorySQLAlchemy",
    "UserRepositorySQLAlchemy",
    "create_engine",
    "create_session_maker",
    "create_tables",
    "drop_tables",
]
