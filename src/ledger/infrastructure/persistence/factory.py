"""Repository wiring: pick a storage engine from settings."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncEngine

from ledger.application.ports.system import HealthCheckPort
from ledger.domain.transactions import TransactionRepository
from ledger.domain.user import UserRepository
from ledger.infrastructure.persistence.memory import (
    InMemoryHealthCheck,
    TransactionRepositoryInMemory,
    UserRepositoryInMemory,
)
from ledger.infrastructure.persistence.sqlalchemy import (
    SqlAlchemyHealthCheckAdapter,
    TransactionRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
    create_engine,
    create_session_maker,
    create_tables,
)
from ledger_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)


@dataclass
class LedgerRepositories:
    """Repositories sharing one storage engine."""

    transactions: TransactionRepository
    users: UserRepository
    health_check: HealthCheckPort
    engine: Optional[AsyncEngine] = None

    async def dispose(self) -> None:
        """Release the connection pool (no-op for the in-memory backend)."""
        if self.engine is not None:
            await self.engine.dispose()
            self.engine = None


async def create_repositories(
    settings: Optional[Settings] = None,
    *,
    create_schema: bool = False,
) -> LedgerRepositories:
    """
    Build repositories for the configured backend.

    Parameters
    ----------
    settings
        Settings to use, defaults to ``get_settings()``
    create_schema
        Create missing tables before returning (relational backend only)

    Returns
    -------
    LedgerRepositories bound to one engine
    """
    settings = settings or get_settings()

    if settings.repository_backend == "memory":
        logger.info("Using in-memory repositories")
        return LedgerRepositories(
            transactions=TransactionRepositoryInMemory(
                lock_timeout=settings.memory_lock_timeout,
            ),
            users=UserRepositoryInMemory(lock_timeout=settings.memory_lock_timeout),
            health_check=InMemoryHealthCheck(),
        )

    engine = create_engine(settings)
    if create_schema:
        await create_tables(engine)

    session_maker = create_session_maker(engine)
    logger.info("Using SQLAlchemy repositories")
    return LedgerRepositories(
        transactions=TransactionRepositorySQLAlchemy(session_maker),
        users=UserRepositorySQLAlchemy(session_maker),
        health_check=SqlAlchemyHealthCheckAdapter(engine),
        engine=engine,
    )
