"""SQLAlchemy implementation of UserRepository."""

import logging

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from ledger.domain.user import (
    User,
    UserAlreadyExistsError,
    UserNotFoundError,
    UserRepository,
    UserStorageError,
)
from ledger.infrastructure.persistence.sqlalchemy.models import UserModel

logger = logging.getLogger(__name__)


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface."""

    def __init__(self, session_maker: async_sessionmaker[AsyncSession]) -> None:
        self._session_maker = session_maker

    async def get_user(self, user_id: str) -> User:
        stmt = select(UserModel).where(UserModel.id == user_id)
        try:
            async with self._session_maker() as session:
                model = (await session.execute(stmt)).scalar_one_or_none()
        except (SQLAlchemyError, OSError) as e:
            logger.exception("Unable to get user %s", user_id)
            raise UserStorageError("get user", user_id) from e

        if model is None:
            raise UserNotFoundError(user_id)
        return User(id=model.id, password_hash=model.password_hash)

    async def create_user(self, user: User) -> None:
        try:
            async with self._session_maker() as session, session.begin():
                session.add(UserModel(id=user.id, password_hash=user.password_hash))
        except IntegrityError as e:
            raise UserAlreadyExistsError(user.id) from e
        except (SQLAlchemyError, OSError) as e:
            logger.exception("Unable to create user %s", user.id)
            raise UserStorageError("create user", user.id) from e
        logger.info("Created user: %s", user.id)

    async def update_password_hash(self, user_id: str, password_hash: str) -> None:
        stmt = (
            update(UserModel)
            .where(UserModel.id == user_id)
            .values(password_hash=password_hash)
            .execution_options(synchronize_session=False)
        )
        await self._execute_for_single_row(stmt, "update password", user_id)
        logger.debug("Updated password hash: %s", user_id)

    async def delete_user(self, user_id: str) -> None:
        stmt = (
            delete(UserModel)
            .where(UserModel.id == user_id)
            .execution_options(synchronize_session=False)
        )
        await self._execute_for_single_row(stmt, "delete user", user_id)
        logger.info("Deleted user: %s", user_id)

    async def _execute_for_single_row(self, stmt, operation: str, user_id: str) -> None:
        try:
            async with self._session_maker() as session, session.begin():
                result = await session.execute(stmt)
                if result.rowcount == 0:
                    raise UserNotFoundError(user_id)
        except (SQLAlchemyError, OSError) as e:
            logger.exception("Unable to %s for %s", operation, user_id)
            raise UserStorageError(operation, user_id) from e
