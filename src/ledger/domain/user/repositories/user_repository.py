"""User repository interface."""

from abc import ABC, abstractmethod

from ledger.domain.user.aggregates import User


class UserRepository(ABC):
    """Repository interface for User aggregates."""

    @abstractmethod
    async def get_user(self, user_id: str) -> User:
        """Find a user by id. Raises UserNotFoundError."""

    @abstractmethod
    async def create_user(self, user: User) -> None:
        """Create a user. Raises UserAlreadyExistsError if the id is taken."""

    @abstractmethod
    async def update_password_hash(self, user_id: str, password_hash: str) -> None:
        """Replace the stored password hash. Raises UserNotFoundError."""

    @abstractmethod
    async def delete_user(self, user_id: str) -> None:
        """Delete a user by id. Raises UserNotFoundError."""
