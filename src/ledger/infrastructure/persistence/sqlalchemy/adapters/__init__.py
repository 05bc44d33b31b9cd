"""SQLAlchemy adapters implementing application ports."""

from ledger.infrastructure.persistence.sqlalchemy.adapters.system import (
    SqlAlchemyHealthCheckAdapter,
)

__all__ = ["SqlAlchemyHealthCheckAdapter"]
