"""Repository interfaces for the user domain."""

from ledger.domain.user.repositories.user_repository import UserRepository

__all__ = ["UserRepository"]
