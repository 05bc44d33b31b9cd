"""User aggregates."""

from ledger.domain.user.aggregates.user import User

__all__ = ["User"]
