"""
Pytest fixtures for repository conformance tests.

Every repository fixture is parametrized over both storage engines, so each
test runs once against the in-memory engine and once against SQLAlchemy on a
fresh SQLite file.
"""

import pytest_asyncio
from sqlalchemy.ext.asyncio import create_async_engine

from ledger.infrastructure.persistence.memory import (
    TransactionRepositoryInMemory,
    UserRepositoryInMemory,
)
from ledger.infrastructure.persistence.sqlalchemy import (
    TransactionRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
    create_session_maker,
    create_tables,
)

# Import shared fixtures
from tests.shared.fixtures.database import sqlite_engine

# Make fixtures available
__all__ = ["sqlite_engine"]

ENGINES = ["memory", "sqlalchemy"]


@pytest_asyncio.fixture(params=ENGINES)
async def transaction_repository(request, tmp_path):
    """TransactionRepository backed by each engine in turn."""
    if request.param == "memory":
        yield TransactionRepositoryInMemory(lock_timeout=1.0)
        return

    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'ledger.db'}")
    await create_tables(engine)
    try:
        yield TransactionRepositorySQLAlchemy(create_session_maker(engine))
    finally:
        await engine.dispose()


@pytest_asyncio.fixture(params=ENGINES)
async def user_repository(request, tmp_path):
    """UserRepository backed by each engine in turn."""
    if request.param == "memory":
        yield UserRepositoryInMemory(lock_timeout=1.0)
        return

    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'users.db'}")
    await create_tables(engine)
    try:
        yield UserRepositorySQLAlchemy(create_session_maker(engine))
    finally:
        await engine.dispose()
