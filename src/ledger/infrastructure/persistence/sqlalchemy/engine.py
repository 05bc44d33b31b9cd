"""Async engine and session maker construction."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from ledger_config.settings import Settings

logger = logging.getLogger(__name__)


def _ensure_sqlite_directory(database_url: str) -> None:
    db_path = database_url.split("///")[-1]
    if db_path and db_path != ":memory:":
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)


def create_engine(settings: Settings) -> AsyncEngine:
    """
    Create the shared async engine.

    The engine owns the connection pool. For server databases the pool is
    bounded by ``database_pool_size`` + ``database_max_overflow`` and
    checkouts wait at most ``database_pool_timeout`` seconds.

    Returns
    -------
    AsyncEngine instance
    """
    options: dict[str, Any] = {
        "echo": settings.database_echo,
        "pool_pre_ping": True,  # Verify connections before use
    }
    if settings.is_sqlite:
        _ensure_sqlite_directory(settings.database_url)
    else:
        options.update(
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
            pool_timeout=settings.database_pool_timeout,
        )

    logger.debug(
        "Creating database engine for %s",
        settings.database_url.split("@")[-1],
    )
    return create_async_engine(settings.database_url, **options)


def create_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
