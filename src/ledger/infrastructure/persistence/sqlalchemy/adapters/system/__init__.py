"""System adapters."""

from ledger.infrastructure.persistence.sqlalchemy.adapters.system.sqlalchemy_health_check_adapter import (  # NOQA: E501
    SqlAlchemyHealthCheckAdapter,
)

__all__ = ["SqlAlchemyHealthCheckAdapter"]
