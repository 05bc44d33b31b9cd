"""Database initialization utilities."""

import asyncio
import logging
import sys

from sqlalchemy.ext.asyncio import AsyncEngine

from ledger.infrastructure.persistence.sqlalchemy.engine import create_engine
from ledger.infrastructure.persistence.sqlalchemy.models import Base
from ledger.infrastructure.system import configure_logging
from ledger_config.settings import get_settings

logger = logging.getLogger(__name__)


async def create_tables(engine: AsyncEngine) -> None:
    """
    Create all database tables (idempotent).

    Uses SQLAlchemy's create_all() which only creates missing tables.
    Existing tables and their data are never modified or deleted.
    """
    logger.info("Ensuring all database tables exist...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info("Database schema is up to date (missing tables created if needed)")


async def drop_tables(engine: AsyncEngine) -> None:
    """
    Drop all database tables (USE WITH CAUTION!).

    This is primarily for testing and development reset scenarios.
    """
    logger.warning("Dropping all database tables...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    logger.info("Database tables dropped successfully")


async def _init_database(reset: bool = False) -> None:
    settings = get_settings()
    engine = create_engine(settings)

    logger.info("Initializing database %s", settings.database_url.split("@")[-1])
    try:
        if reset:
            await drop_tables(engine)
        await create_tables(engine)
    finally:
        await engine.dispose()

    logger.info("Database initialized successfully!")


def db_init() -> None:
    """Initialize database (create tables). ``--reset`` drops them first."""
    configure_logging()
    reset = "--reset" in sys.argv
    asyncio.run(_init_database(reset=reset))
