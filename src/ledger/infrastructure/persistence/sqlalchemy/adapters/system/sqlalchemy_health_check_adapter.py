"""SQLAlchemy implementation of HealthCheckPort."""

import logging

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from ledger.application.ports.system import HealthCheckPort

logger = logging.getLogger(__name__)


class SqlAlchemyHealthCheckAdapter(HealthCheckPort):
    """Reports store reachability with a trivial round-trip query."""

    def __init__(self, engine: AsyncEngine):
        self._engine = engine

    async def check(self) -> bool:
        try:
            async with self._engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except (SQLAlchemyError, OSError):
            logger.warning("Database health check failed", exc_info=True)
            return False
        return True
