"""User domain layer exports."""

from ledger.domain.user.aggregates import User
from ledger.domain.user.exceptions import (
    UserAlreadyExistsError,
    UserNotFoundError,
    UserStorageError,
)
from ledger.domain.user.repositories import UserRepository

__all__ = [
    "User",
    "UserAlreadyExistsError",
    "UserNotFoundError",
    "UserRepository",
    "UserStorageError",
]
