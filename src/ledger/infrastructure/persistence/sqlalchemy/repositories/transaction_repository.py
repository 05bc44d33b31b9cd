"""SQLAlchemy implementation of TransactionRepository.

Every operation opens its own session from the shared session maker. Writes
run inside ``session.begin()`` so multi-statement changes (row plus tags)
commit together or not at all.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from decimal import Decimal
from typing import List, Optional

from sqlalchemy import Select, case, delete, func, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from ledger.domain.transactions import (
    Filter,
    MonthlyTotal,
    NewTransaction,
    PageOptions,
    TagDiff,
    Transaction,
    TransactionNotFoundError,
    TransactionRepository,
    TransactionStorageError,
    aggregate_monthly_totals,
)
from ledger.infrastructure.persistence.sqlalchemy.models import (
    TransactionModel,
    TransactionTagModel,
)

logger = logging.getLogger(__name__)


@contextmanager
def _storage_errors(
    operation: str,
    user: str,
    transaction_id: Optional[int] = None,
) -> Iterator[None]:
    try:
        yield
    except (SQLAlchemyError, OSError) as e:
        logger.exception(
            "Storage failure during %s (user=%s, transaction=%s)",
            operation,
            user,
            transaction_id,
        )
        raise TransactionStorageError(operation, transaction_id, user) from e


class TransactionRepositorySQLAlchemy(TransactionRepository):
    """SQLAlchemy implementation of the transaction repository."""

    def __init__(self, session_maker: async_sessionmaker[AsyncSession]):
        self._session_maker = session_maker

    async def get_transaction(self, user: str, transaction_id: int) -> Transaction:
        with _storage_errors("get transaction", user, transaction_id):
            async with self._session_maker() as session:
                model = await self._find_model_by_id(session, user, transaction_id)
                if model is None:
                    raise TransactionNotFoundError(transaction_id)
                return self._map_to_domain(model)

    async def get_all_transactions(
        self,
        user: str,
        filter: Filter = Filter.NONE,  # NOQA: A002
        page_options: Optional[PageOptions] = None,
    ) -> List[Transaction]:
        stmt = self._apply_filter(self._base_user_query(user), filter)
        stmt = stmt.order_by(TransactionModel.date.desc(), TransactionModel.id.desc())
        if page_options is not None:
            stmt = stmt.offset(page_options.offset).limit(page_options.limit)

        with _storage_errors("get transactions", user):
            async with self._session_maker() as session:
                result = await session.execute(stmt)
                return [self._map_to_domain(m) for m in result.scalars().all()]

    async def create_new_transaction(
        self,
        user: str,
        new_transaction: NewTransaction,
    ) -> Transaction:
        model = TransactionModel(
            user_id=user,
            category=new_transaction.category,
            transactee=new_transaction.transactee,
            note=new_transaction.note,
            date=new_transaction.date,
            amount=new_transaction.amount,
            tags=[TransactionTagModel(tag=tag) for tag in sorted(new_transaction.tags)],
        )

        with _storage_errors("create transaction", user):
            async with self._session_maker() as session, session.begin():
                session.add(model)
                await session.flush()
                transaction_id = model.id

        logger.info("Transaction created: %s (user=%s)", transaction_id, user)
        return new_transaction.to_transaction(transaction_id)

    async def update_transaction(
        self,
        user: str,
        transaction_id: int,
        updated_transaction: NewTransaction,
    ) -> Transaction:
        stmt = (
            update(TransactionModel)
            .where(
                TransactionModel.user_id == user,
                TransactionModel.id == transaction_id,
            )
            .values(
                category=updated_transaction.category,
                transactee=updated_transaction.transactee,
                note=updated_transaction.note,
                date=updated_transaction.date,
                amount=updated_transaction.amount,
            )
            .execution_options(synchronize_session=False)
        )

        with _storage_errors("update transaction", user, transaction_id):
            async with self._session_maker() as session, session.begin():
                result = await session.execute(stmt)
                if result.rowcount == 0:
                    raise TransactionNotFoundError(transaction_id)

                existing = await self._find_tags(session, transaction_id)
                diff = TagDiff.between(existing, updated_transaction.tags)
                if not diff.is_empty:
                    await self._insert_tags(session, transaction_id, diff.to_add)
                    await self._delete_tags(session, transaction_id, diff.to_remove)

        logger.info(
            "Transaction updated: %s (+%d/-%d tags)",
            transaction_id,
            len(diff.to_add),
            len(diff.to_remove),
        )
        return updated_transaction.to_transaction(transaction_id)

    async def delete_transaction(self, user: str, transaction_id: int) -> Transaction:
        with _storage_errors("delete transaction", user, transaction_id):
            async with self._session_maker() as session, session.begin():
                model = await self._find_model_by_id(session, user, transaction_id)
                if model is None:
                    raise TransactionNotFoundError(transaction_id)

                transaction = self._map_to_domain(model)
                # cascade removes the tag rows in the same flush
                await session.delete(model)

        logger.info("Transaction deleted: %s (user=%s)", transaction_id, user)
        return transaction

    async def get_monthly_totals(
        self,
        user: str,
        filter: Filter = Filter.NONE,  # NOQA: A002
    ) -> List[MonthlyTotal]:
        # Month bucketing happens in Python via aggregate_monthly_totals
        stmt = select(TransactionModel.date, TransactionModel.amount).where(
            TransactionModel.user_id == user,
        )
        stmt = self._apply_filter(stmt, filter)

        with _storage_errors("get monthly totals", user):
            async with self._session_maker() as session:
                rows = (await session.execute(stmt)).all()

        return aggregate_monthly_totals(
            (row.date, Decimal(row.amount)) for row in rows
        )

    async def get_all_categories(self, user: str) -> List[str]:
        stmt = (
            select(TransactionModel.category)
            .where(TransactionModel.user_id == user)
            .distinct()
        )
        with _storage_errors("get categories", user):
            async with self._session_maker() as session:
                return list((await session.scalars(stmt)).all())

    async def get_all_tags(self, user: str) -> List[str]:
        stmt = (
            select(TransactionTagModel.tag)
            .join(TransactionModel, TransactionTagModel.transaction)
            .where(TransactionModel.user_id == user)
            .distinct()
        )
        with _storage_errors("get tags", user):
            async with self._session_maker() as session:
                return list((await session.scalars(stmt)).all())

    async def get_all_transactees(
        self,
        user: str,
        category: Optional[str] = None,
    ) -> List[str]:
        if category is None:
            count = func.count(TransactionModel.id)
        else:
            count = func.sum(case((TransactionModel.category == category, 1), else_=0))

        stmt = (
            select(TransactionModel.transactee, count.label("transaction_count"))
            .where(
                TransactionModel.user_id == user,
                TransactionModel.transactee.is_not(None),
            )
            .group_by(TransactionModel.transactee)
        )

        with _storage_errors("get transactees", user):
            async with self._session_maker() as session:
                rows = (await session.execute(stmt)).all()

        # Ties ordered by name in Python, not by database collation
        ranked = sorted(
            rows,
            key=lambda row: (-int(row.transaction_count), row.transactee),
        )
        return [row.transactee for row in ranked]

    async def get_balance(self, user: str) -> Decimal:
        stmt = select(func.sum(TransactionModel.amount)).where(
            TransactionModel.user_id == user,
        )
        with _storage_errors("get balance", user):
            async with self._session_maker() as session:
                balance = await session.scalar(stmt)

        return Decimal("0") if balance is None else Decimal(balance)

    def _base_user_query(self, user: str) -> Select:
        return select(TransactionModel).where(TransactionModel.user_id == user)

    def _apply_filter(self, stmt: Select, filter: Filter) -> Select:  # NOQA: A002
        if filter.is_empty:
            return stmt
        if filter.from_date is not None:
            stmt = stmt.where(TransactionModel.date >= filter.from_date)
        if filter.until is not None:
            stmt = stmt.where(TransactionModel.date <= filter.until)
        if filter.category is not None:
            stmt = stmt.where(TransactionModel.category == filter.category)
        if filter.transactee is not None:
            stmt = stmt.where(TransactionModel.transactee == filter.transactee)
        return stmt

    async def _find_model_by_id(
        self,
        session: AsyncSession,
        user: str,
        transaction_id: int,
    ) -> Optional[TransactionModel]:
        stmt = self._base_user_query(user).where(TransactionModel.id == transaction_id)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def _find_tags(self, session: AsyncSession, transaction_id: int) -> set[str]:
        stmt = select(TransactionTagModel.tag).where(
            TransactionTagModel.transaction_id == transaction_id,
        )
        return set((await session.scalars(stmt)).all())

    async def _insert_tags(
        self,
        session: AsyncSession,
        transaction_id: int,
        tags: Iterable[str],
    ) -> None:
        rows = [{"transaction_id": transaction_id, "tag": tag} for tag in sorted(tags)]
        if not rows:
            return
        await session.execute(insert(TransactionTagModel), rows)

    async def _delete_tags(
        self,
        session: AsyncSession,
        transaction_id: int,
        tags: Iterable[str],
    ) -> None:
        removed = sorted(tags)
        if not removed:
            return
        await session.execute(
            delete(TransactionTagModel)
            .where(
                TransactionTagModel.transaction_id == transaction_id,
                TransactionTagModel.tag.in_(removed),
            )
            .execution_options(synchronize_session=False),
        )

    def _map_to_domain(self, model: TransactionModel) -> Transaction:
        return Transaction(
            id=model.id,
            category=model.category,
            transactee=model.transactee,
            note=model.note,
            date=model.date,
            amount=model.amount,
            tags=frozenset(tag.tag for tag in model.tags),
        )
