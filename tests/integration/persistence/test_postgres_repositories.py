"""
Integration tests for the SQLAlchemy engine on PostgreSQL (asyncpg).

Covers behavior where PostgreSQL differs from SQLite: native NUMERIC
arithmetic, sequence-backed ids and the ON DELETE CASCADE foreign key.
"""

from datetime import date
from decimal import Decimal

import pytest
from sqlalchemy import delete, func, select

from ledger.domain.transactions import (
    Filter,
    MonthlyTotal,
    PageOptions,
    TransactionNotFoundError,
)
from ledger.domain.user import User, UserAlreadyExistsError
from ledger.infrastructure.persistence.sqlalchemy import (
    SqlAlchemyHealthCheckAdapter,
    TransactionRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
    create_session_maker,
)
from ledger.infrastructure.persistence.sqlalchemy.models import (
    TransactionModel,
    TransactionTagModel,
)
from tests.shared.fixtures.transactions import TEST_USER, TEST_USER_2, new_transaction

pytestmark = pytest.mark.integration


@pytest.fixture
def session_maker(postgres_engine):
    return create_session_maker(postgres_engine)


@pytest.fixture
def repository(session_maker):
    return TransactionRepositorySQLAlchemy(session_maker)


class TestPostgresTransactionRepository:
    @pytest.mark.asyncio
    async def test_round_trip_and_isolation(self, repository):
        created = await repository.create_new_transaction(
            TEST_USER,
            new_transaction(amount=Decimal("-12.34"), tags={"a", "b"}),
        )

        assert await repository.get_transaction(TEST_USER, created.id) == created
        with pytest.raises(TransactionNotFoundError):
            await repository.get_transaction(TEST_USER_2, created.id)

    @pytest.mark.asyncio
    async def test_sort_filter_and_pagination(self, repository):
        ids = []
        for day in (1, 2, 2, 3):
            created = await repository.create_new_transaction(
                TEST_USER,
                new_transaction(date=date(2022, 12, day)),
            )
            ids.append(created.id)

        page = await repository.get_all_transactions(
            TEST_USER,
            Filter(from_date=date(2022, 12, 2)),
            PageOptions(offset=1, limit=2),
        )

        # newest first: day 3, then the two day-2 rows by id descending
        assert [t.id for t in page] == [ids[2], ids[1]]

    @pytest.mark.asyncio
    async def test_update_reconciles_tags(self, repository):
        created = await repository.create_new_transaction(
            TEST_USER,
            new_transaction(tags={"a", "b"}),
        )

        await repository.update_transaction(
            TEST_USER,
            created.id,
            new_transaction(tags={"b", "c"}),
        )

        fetched = await repository.get_transaction(TEST_USER, created.id)
        assert fetched.tags == frozenset({"b", "c"})

    @pytest.mark.asyncio
    async def test_foreign_key_cascades_tag_rows(self, repository, session_maker):
        created = await repository.create_new_transaction(
            TEST_USER,
            new_transaction(tags={"a"}),
        )

        # bypass the ORM cascade to exercise the database constraint
        async with session_maker() as session, session.begin():
            await session.execute(
                delete(TransactionModel).where(TransactionModel.id == created.id),
            )

        async with session_maker() as session:
            remaining = await session.scalar(
                select(func.count()).select_from(TransactionTagModel),
            )
        assert remaining == 0

    @pytest.mark.asyncio
    async def test_aggregates(self, repository):
        rows = [
            (date(2022, 12, 2), Decimal("-20"), "Bob"),
            (date(2022, 12, 11), Decimal("10"), "Alice"),
            (date(2022, 12, 11), Decimal("15"), "Bob"),
            (date(2022, 11, 11), Decimal("30"), None),
        ]
        for txn_date, amount, transactee in rows:
            await repository.create_new_transaction(
                TEST_USER,
                new_transaction(date=txn_date, amount=amount, transactee=transactee),
            )

        assert await repository.get_monthly_totals(TEST_USER) == [
            MonthlyTotal(
                month=date(2022, 12, 1),
                income=Decimal("25"),
                expense=Decimal("20"),
            ),
            MonthlyTotal(month=date(2022, 11, 1), income=Decimal("30")),
        ]
        assert await repository.get_balance(TEST_USER) == Decimal("35")
        assert await repository.get_all_transactees(TEST_USER) == ["Bob", "Alice"]


    @pytest.mark.asyncio
    async def test_long_text_and_extreme_amount_round_trip(self, repository):
        """Unbounded VARCHAR columns and the full NUMERIC(15, 2) range."""
        created = await repository.create_new_transaction(
            TEST_USER,
            new_transaction(
                category="c" * 300,
                transactee="t" * 300,
                amount=Decimal("-9999999999999.99"),
                tags={"g" * 300},
            ),
        )

        assert await repository.get_transaction(TEST_USER, created.id) == created


class TestPostgresUserRepository:
    @pytest.mark.asyncio
    async def test_duplicate_user_raises_conflict(self, session_maker):
        repository = UserRepositorySQLAlchemy(session_maker)
        await repository.create_user(User(id="alice", password_hash="h"))

        with pytest.raises(UserAlreadyExistsError):
            await repository.create_user(User(id="alice", password_hash="h2"))


class TestPostgresHealthCheck:
    @pytest.mark.asyncio
    async def test_healthy(self, postgres_engine):
        assert await SqlAlchemyHealthCheckAdapter(postgres_engine).check() is True
