"""In-memory implementation of UserRepository."""

from __future__ import annotations

import logging

from ledger.domain.user import (
    User,
    UserAlreadyExistsError,
    UserNotFoundError,
    UserRepository,
    UserStorageError,
)
from ledger.infrastructure.persistence.memory.rw_lock import (
    LockTimeoutError,
    ReadWriteLock,
)

logger = logging.getLogger(__name__)


class UserRepositoryInMemory(UserRepository):
    """Map of user id to password hash behind a reader/writer lock."""

    def __init__(self, lock_timeout: float = 10.0) -> None:
        self._password_hashes: dict[str, str] = {}
        self._lock = ReadWriteLock(timeout=lock_timeout)

    async def get_user(self, user_id: str) -> User:
        try:
            async with self._lock.read():
                password_hash = self._password_hashes.get(user_id)
        except LockTimeoutError as e:
            raise UserStorageError("get user", user_id) from e

        if password_hash is None:
            raise UserNotFoundError(user_id)
        return User(id=user_id, password_hash=password_hash)

    async def create_user(self, user: User) -> None:
        try:
            async with self._lock.write():
                if user.id in self._password_hashes:
                    raise UserAlreadyExistsError(user.id)
                self._password_hashes[user.id] = user.password_hash
        except LockTimeoutError as e:
            raise UserStorageError("create user", user.id) from e
        logger.info("Created user: %s", user.id)

    async def update_password_hash(self, user_id: str, password_hash: str) -> None:
        try:
            async with self._lock.write():
                if user_id not in self._password_hashes:
                    raise UserNotFoundError(user_id)
                self._password_hashes[user_id] = password_hash
        except LockTimeoutError as e:
            raise UserStorageError("update password", user_id) from e
        logger.debug("Updated password hash: %s", user_id)

    async def delete_user(self, user_id: str) -> None:
        try:
            async with self._lock.write():
                if self._password_hashes.pop(user_id, None) is None:
                    raise UserNotFoundError(user_id)
        except LockTimeoutError as e:
            raise UserStorageError("delete user", user_id) from e
        logger.info("Deleted user: %s", user_id)
