"""PostgreSQL implementation of TransactionRepository."""

from dataclasses import replace
from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from multifinance.domain.entities import Transaction
from multifinance.domain.interfaces import TransactionRepository, UnitOfWork
from multifinance.infrastructure.database.models import TransactionModel
from .unit_of_work import SqlAlchemyUnitOfWork


class PostgresTransactionRepository(TransactionRepository):
    """
    PostgreSQL implementation of the ledger repository.

    Ledger entries are only ever inserted inside a unit of work.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def begin(self) -> UnitOfWork:
        """Open a unit of work on this repository's session."""
        return SqlAlchemyUnitOfWork(self._session)

    async def save(self, transaction: Transaction, uow: UnitOfWork) -> Transaction:
        """Insert a ledger entry inside ``uow``."""
        session = uow.session if isinstance(uow, SqlAlchemyUnitOfWork) else self._session

        model = TransactionModel(
            consumer_id=transaction.consumer_id,
            loan_id=transaction.loan_id,
            amount_cents=transaction.amount_cents,
            description=transaction.description,
            created_at=transaction.created_at,
        )

        session.add(model)
        await session.flush()

        return replace(transaction, id=model.id)

    async def get_by_loan(self, loan_id: int) -> List[Transaction]:
        """Retrieve the ledger entries of a loan ordered by ID."""
        stmt = (
            select(TransactionModel)
            .where(TransactionModel.loan_id == loan_id)
            .order_by(TransactionModel.id.asc())
        )
        result = await self._session.execute(stmt)
        models = result.scalars().all()

        return [self._to_entity(model) for model in models]

    def _to_entity(self, model: TransactionModel) -> Transaction:
        """Convert database model to domain entity."""
        return Transaction(
            id=model.id,
            consumer_id=model.consumer_id,
            loan_id=model.loan_id,
            amount_cents=model.amount_cents,
            description=model.description,
            created_at=model.created_at,
        )
