"""PostgreSQL implementation of LoanRepository."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from multifinance.domain.entities import Loan, LoanStatus
from multifinance.domain.exceptions import LoanNotFoundException
from multifinance.domain.interfaces import LoanRepository, UnitOfWork
from multifinance.infrastructure.database.models import LoanModel
from .unit_of_work import SqlAlchemyUnitOfWork


class PostgresLoanRepository(LoanRepository):
    """
    PostgreSQL implementation of the Loan repository.

    Uses SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_by_id(self, loan_id: int, lock: bool = False) -> Optional[Loan]:
        """Retrieve a live loan by ID, optionally with SELECT ... FOR UPDATE."""
        stmt = select(LoanModel).where(
            LoanModel.id == loan_id,
            LoanModel.deleted_at.is_(None),
        )
        if lock:
            stmt = stmt.with_for_update().execution_options(populate_existing=True)

        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_entity(model)

    async def get_by_consumer(self, consumer_id: int) -> List[Loan]:
        """Retrieve all live loans of a consumer ordered by ID."""
        stmt = (
            select(LoanModel)
            .where(
                LoanModel.consumer_id == consumer_id,
                LoanModel.deleted_at.is_(None),
            )
            .order_by(LoanModel.id.asc())
        )
        result = await self._session.execute(stmt)
        models = result.scalars().all()

        return [self._to_entity(model) for model in models]

    async def save(self, loan: Loan) -> Loan:
        """Persist a newly originated loan."""
        model = LoanModel(
            consumer_limit_id=loan.consumer_limit_id,
            consumer_id=loan.consumer_id,
            merchant_id=loan.merchant_id,
            principal_cents=loan.principal_cents,
            principal_paid_cents=loan.principal_paid_cents,
            contract_number=loan.contract_number,
            interest_rate=loan.interest_rate,
            interest_cents=loan.interest_cents,
            interest_paid_cents=loan.interest_paid_cents,
            status=loan.status.value,
            due_date=loan.due_date,
            installment=loan.installment,
            asset_name=loan.asset_name,
            created_at=loan.created_at,
        )

        self._session.add(model)
        await self._session.flush()

        loan.id = model.id
        return loan

    async def update_payment_state(
        self,
        loan: Loan,
        uow: Optional[UnitOfWork] = None,
    ) -> None:
        """
        Persist the payment state of a loan.

        Raises:
            LoanNotFoundException: If the loan no longer exists
        """
        session = uow.session if isinstance(uow, SqlAlchemyUnitOfWork) else self._session

        stmt = (
            update(LoanModel)
            .where(
                LoanModel.id == loan.id,
                LoanModel.deleted_at.is_(None),
            )
            .values(
                principal_paid_cents=loan.principal_paid_cents,
                interest_paid_cents=loan.interest_paid_cents,
                status=loan.status.value,
                installment=loan.installment,
                updated_at=loan.updated_at or datetime.utcnow(),
            )
        )
        result = await session.execute(stmt)

        if result.rowcount == 0:
            raise LoanNotFoundException(loan.id)

    async def soft_delete(self, loan_id: int) -> None:
        """Mark a loan as deleted."""
        stmt = (
            update(LoanModel)
            .where(
                LoanModel.id == loan_id,
                LoanModel.deleted_at.is_(None),
            )
            .values(deleted_at=datetime.utcnow())
        )
        await self._session.execute(stmt)
        await self._session.flush()

    def _to_entity(self, model: LoanModel) -> Loan:
        """Convert database model to domain entity."""
        return Loan(
            id=model.id,
            consumer_id=model.consumer_id,
            merchant_id=model.merchant_id,
            consumer_limit_id=model.consumer_limit_id,
            principal_cents=model.principal_cents,
            principal_paid_cents=model.principal_paid_cents,
            interest_rate=model.interest_rate,
            interest_cents=model.interest_cents,
            interest_paid_cents=model.interest_paid_cents,
            status=LoanStatus(model.status),
            due_date=model.due_date,
            installment=model.installment,
            contract_number=model.contract_number,
            asset_name=model.asset_name,
            created_at=model.created_at,
            updated_at=model.updated_at,
            deleted_at=model.deleted_at,
        )
