"""
Database fixtures for repository tests.

Unit tests run the relational engine against SQLite (aiosqlite) in a
per-test temporary file. Integration tests use a Testcontainers PostgreSQL
instance shared by the whole session.
"""

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import NullPool
from testcontainers.postgres import PostgresContainer

from ledger.infrastructure.persistence.sqlalchemy import create_tables, drop_tables

# Use same Postgres version as production
POSTGRES_IMAGE = "postgres:16-alpine"


@pytest_asyncio.fixture
async def sqlite_engine(tmp_path):
    """Fresh SQLite database file with all tables created."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'ledger.db'}")
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture(scope="session")
def postgres_container():
    """
    Start a PostgreSQL container for the test session.

    Each test gets a clean schema via table drop/create.
    """
    with PostgresContainer(POSTGRES_IMAGE) as postgres:
        yield postgres


@pytest_asyncio.fixture
async def postgres_engine(postgres_container):
    """Async engine on the test container with a freshly created schema."""
    connection_url = postgres_container.get_connection_url()
    # Testcontainers may return postgresql+psycopg2:// or postgresql://
    async_url = connection_url.replace(
        "postgresql+psycopg2://", "postgresql+asyncpg://"
    )
    async_url = async_url.replace("postgresql://", "postgresql+asyncpg://")

    engine = create_async_engine(async_url, poolclass=NullPool)
    await drop_tables(engine)
    await create_tables(engine)
    yield engine
    await drop_tables(engine)
    await engine.dispose()
