"""Tests for schema bootstrap."""

import pytest
from sqlalchemy import inspect

from ledger.infrastructure.persistence.sqlalchemy import create_tables, drop_tables


async def _table_names(engine) -> set[str]:
    async with engine.connect() as conn:
        return set(await conn.run_sync(lambda c: inspect(c).get_table_names()))


class TestInitDb:
    @pytest.mark.asyncio
    async def test_create_tables(self, sqlite_engine):
        assert {"transactions", "transaction_tags", "users"} <= await _table_names(
            sqlite_engine,
        )

    @pytest.mark.asyncio
    async def test_drop_and_recreate(self, sqlite_engine):
        await drop_tables(sqlite_engine)
        assert await _table_names(sqlite_engine) == set()

        await create_tables(sqlite_engine)
        assert "transactions" in await _table_names(sqlite_engine)
