"""
Integration tests for the SQLAlchemy repositories.

These tests verify:
1. Soft-deleted rows are invisible to every read
2. Loan payment state round-trips through the database
3. The unit of work commits or discards the ledger insert
"""

from datetime import date, datetime

import pytest

from multifinance.domain.entities import (
    Consumer,
    ConsumerLimit,
    Loan,
    LoanStatus,
    Merchant,
    Transaction,
)
from multifinance.domain.exceptions import LoanNotFoundException
from multifinance.infrastructure.repositories import (
    PostgresConsumerLimitRepository,
    PostgresConsumerRepository,
    PostgresLoanRepository,
    PostgresMerchantRepository,
    PostgresTransactionRepository,
)


async def seed_loan(session) -> Loan:
    consumer = await PostgresConsumerRepository(session).save(
        Consumer(
            full_name="Siti Aminah",
            legal_name="Siti Aminah",
            place_of_birth="Bandung",
            date_of_birth=date(1992, 2, 29),
            salary_cents=8_000_000,
            nik="3273000000000001",
        )
    )
    merchant = await PostgresMerchantRepository(session).save(
        Merchant(name="Toko Motor", merchant_type="automotive")
    )
    consumer_limit = await PostgresConsumerLimitRepository(session).save(
        ConsumerLimit(consumer_id=consumer.id, tenure=6, limit_cents=5_000_000)
    )
    loan = await PostgresLoanRepository(session).save(
        Loan(
            consumer_id=consumer.id,
            merchant_id=merchant.id,
            consumer_limit_id=consumer_limit.id,
            principal_cents=600_000,
            interest_rate=5.0,
            interest_cents=30_000,
            due_date=date(2031, 1, 31),
            contract_number=f"{consumer.id}-Zx81Qp0LmA-{merchant.id}",
            asset_name="Helmet",
        )
    )
    await session.commit()
    return loan


class TestSoftDelete:
    """Soft-deleted rows never come back from reads."""

    @pytest.mark.asyncio
    async def test_deleted_loan_is_not_returned(self, test_session):
        loan = await seed_loan(test_session)
        repo = PostgresLoanRepository(test_session)

        await repo.soft_delete(loan.id)

        assert await repo.get_by_id(loan.id) is None
        assert await repo.get_by_id(loan.id, lock=True) is None
        assert await repo.get_by_consumer(loan.consumer_id) == []

    @pytest.mark.asyncio
    async def test_deleted_limit_is_not_returned(self, test_session):
        loan = await seed_loan(test_session)
        repo = PostgresConsumerLimitRepository(test_session)

        await repo.soft_delete(loan.consumer_limit_id)

        assert await repo.get_by_id(loan.consumer_limit_id) is None
        assert await repo.get_by_tenure_and_consumer(6, loan.consumer_id) is None
        assert await repo.get_by_consumer(loan.consumer_id) == []

    @pytest.mark.asyncio
    async def test_deleted_consumer_frees_nik_lookup(self, test_session):
        loan = await seed_loan(test_session)
        repo = PostgresConsumerRepository(test_session)

        await repo.soft_delete(loan.consumer_id)

        assert await repo.get_by_nik("3273000000000001") is None


class TestLoanPaymentState:
    """Payment state persistence."""

    @pytest.mark.asyncio
    async def test_payment_state_round_trips(self, test_session):
        loan = await seed_loan(test_session)
        repo = PostgresLoanRepository(test_session)

        locked = await repo.get_by_id(loan.id, lock=True)
        locked.record_payment(100_000, 5_000, LoanStatus.LATE, 1)
        await repo.update_payment_state(locked)
        await test_session.commit()

        stored = await repo.get_by_id(loan.id)
        assert stored.principal_paid_cents == 100_000
        assert stored.interest_paid_cents == 5_000
        assert stored.status == LoanStatus.LATE
        assert stored.installment == 1
        assert stored.due_date == date(2031, 1, 31)

    @pytest.mark.asyncio
    async def test_update_of_deleted_loan_raises(self, test_session):
        loan = await seed_loan(test_session)
        repo = PostgresLoanRepository(test_session)
        await repo.soft_delete(loan.id)

        with pytest.raises(LoanNotFoundException):
            await repo.update_payment_state(loan)


class TestUnitOfWork:
    """Ledger inserts follow the unit of work outcome."""

    def _transaction(self, loan: Loan) -> Transaction:
        return Transaction(
            consumer_id=loan.consumer_id,
            loan_id=loan.id,
            amount_cents=105_000,
            description=f"Payment for loan {loan.contract_number}",
            created_at=datetime.utcnow(),
        )

    @pytest.mark.asyncio
    async def test_commit_persists_transaction(self, test_session):
        loan = await seed_loan(test_session)
        repo = PostgresTransactionRepository(test_session)

        uow = await repo.begin()
        async with uow:
            saved = await repo.save(self._transaction(loan), uow)
            await uow.commit()

        assert saved.id is not None
        entries = await repo.get_by_loan(loan.id)
        assert [entry.amount_cents for entry in entries] == [105_000]

    @pytest.mark.asyncio
    async def test_failure_inside_scope_discards_transaction(self, test_session):
        loan = await seed_loan(test_session)
        repo = PostgresTransactionRepository(test_session)

        uow = await repo.begin()
        with pytest.raises(LoanNotFoundException):
            async with uow:
                await repo.save(self._transaction(loan), uow)
                raise LoanNotFoundException(loan.id)

        assert await repo.get_by_loan(loan.id) == []
