"""
Fixtures for service-level unit tests.

Provides:
- In-memory repositories implementing the domain ports
- A unit of work that stages writes until commit
- Services wired to the in-memory repositories
- A seeded consumer, merchant and credit line
"""

import asyncio
from dataclasses import replace
from datetime import date, datetime
from typing import Callable, Dict, List, Optional

import pytest
import pytest_asyncio

from multifinance.application.dto import ConsumerLimitRequest
from multifinance.application.services import (
    ConsumerLimitService,
    ConsumerService,
    LoanService,
    MerchantService,
    TransactionService,
)
from multifinance.core.concurrency import KeyedLock
from multifinance.domain.entities import (
    Consumer,
    ConsumerLimit,
    Loan,
    Merchant,
    Transaction,
)
from multifinance.domain.interfaces import (
    ConsumerLimitRepository,
    ConsumerRepository,
    LoanRepository,
    MerchantRepository,
    TransactionRepository,
    UnitOfWork,
)


# =============================================================================
# In-memory repositories
# =============================================================================

class InMemoryUnitOfWork(UnitOfWork):
    """Stages writes and applies them on commit."""

    def __init__(self):
        self.pending: List[Callable[[], None]] = []
        self.committed = False
        self.rolled_back = False

    def stage(self, write: Callable[[], None]) -> None:
        self.pending.append(write)

    async def commit(self) -> None:
        for write in self.pending:
            write()
        self.pending.clear()
        self.committed = True

    async def rollback(self) -> None:
        self.pending.clear()
        self.rolled_back = True


class InMemoryConsumerRepository(ConsumerRepository):
    def __init__(self):
        self.rows: Dict[int, Consumer] = {}

    async def save(self, consumer: Consumer) -> Consumer:
        consumer.id = len(self.rows) + 1
        self.rows[consumer.id] = replace(consumer)
        return consumer

    async def get_by_id(self, consumer_id: int) -> Optional[Consumer]:
        row = self.rows.get(consumer_id)
        if row is None or row.is_deleted:
            return None
        return replace(row)

    async def get_by_nik(self, nik: str) -> Optional[Consumer]:
        for row in self.rows.values():
            if row.nik == nik and not row.is_deleted:
                return replace(row)
        return None

    async def list(self, limit: int = 10, offset: int = 0) -> List[Consumer]:
        live = [replace(row) for row in self.rows.values() if not row.is_deleted]
        return live[offset:offset + limit]

    async def update(self, consumer: Consumer) -> Consumer:
        consumer.updated_at = datetime.utcnow()
        self.rows[consumer.id] = replace(consumer)
        return consumer

    async def soft_delete(self, consumer_id: int) -> None:
        self.rows[consumer_id].mark_deleted()


class InMemoryMerchantRepository(MerchantRepository):
    def __init__(self):
        self.rows: Dict[int, Merchant] = {}

    async def save(self, merchant: Merchant) -> Merchant:
        merchant.id = len(self.rows) + 1
        self.rows[merchant.id] = replace(merchant)
        return merchant

    async def get_by_id(self, merchant_id: int) -> Optional[Merchant]:
        row = self.rows.get(merchant_id)
        if row is None or row.is_deleted:
            return None
        return replace(row)

    async def list(self, limit: int = 10, offset: int = 0) -> List[Merchant]:
        live = [replace(row) for row in self.rows.values() if not row.is_deleted]
        return live[offset:offset + limit]

    async def update(self, merchant: Merchant) -> Merchant:
        self.rows[merchant.id] = replace(merchant)
        return merchant

    async def soft_delete(self, merchant_id: int) -> None:
        self.rows[merchant_id].mark_deleted()


class InMemoryConsumerLimitRepository(ConsumerLimitRepository):
    def __init__(self):
        self.rows: Dict[int, ConsumerLimit] = {}

    async def get_by_id(self, limit_id: int) -> Optional[ConsumerLimit]:
        row = self.rows.get(limit_id)
        if row is None or row.is_deleted:
            return None
        return replace(row)

    async def get_by_tenure_and_consumer(self, tenure: int, consumer_id: int) -> Optional[ConsumerLimit]:
        for row in self.rows.values():
            if row.tenure == tenure and row.consumer_id == consumer_id and not row.is_deleted:
                return replace(row)
        return None

    async def get_by_consumer(self, consumer_id: int) -> List[ConsumerLimit]:
        rows = [
            replace(row)
            for row in self.rows.values()
            if row.consumer_id == consumer_id and not row.is_deleted
        ]
        return sorted(rows, key=lambda row: row.tenure)

    async def save(self, consumer_limit: ConsumerLimit) -> ConsumerLimit:
        consumer_limit.id = len(self.rows) + 1
        self.rows[consumer_limit.id] = replace(consumer_limit)
        return consumer_limit

    async def update_amount(self, limit_id: int, limit_cents: int) -> None:
        self.rows[limit_id].limit_cents = limit_cents

    async def soft_delete(self, limit_id: int) -> None:
        self.rows[limit_id].mark_deleted()


class InMemoryLoanRepository(LoanRepository):
    """
    Loan repository with an optional delay on locked reads.

    The delay yields to the event loop between the read and the write
    of a payment, which exposes lost updates if payments overlap.
    """

    def __init__(self, read_delay: float = 0.0):
        self.rows: Dict[int, Loan] = {}
        self.read_delay = read_delay

    async def get_by_id(self, loan_id: int, lock: bool = False) -> Optional[Loan]:
        row = self.rows.get(loan_id)
        snapshot = None if row is None or row.is_deleted else replace(row)
        if lock and self.read_delay:
            await asyncio.sleep(self.read_delay)
        return snapshot

    async def get_by_consumer(self, consumer_id: int) -> List[Loan]:
        return [
            replace(row)
            for row in self.rows.values()
            if row.consumer_id == consumer_id and not row.is_deleted
        ]

    async def save(self, loan: Loan) -> Loan:
        loan.id = len(self.rows) + 1
        self.rows[loan.id] = replace(loan)
        return loan

    async def update_payment_state(self, loan: Loan, uow: Optional[UnitOfWork] = None) -> None:
        snapshot = replace(loan)

        def write() -> None:
            self.rows[snapshot.id] = snapshot

        if uow is not None:
            uow.stage(write)
        else:
            write()

    async def soft_delete(self, loan_id: int) -> None:
        self.rows[loan_id].mark_deleted()


class FailingLoanRepository(InMemoryLoanRepository):
    """Loan repository whose payment-state write always fails."""

    async def update_payment_state(self, loan: Loan, uow: Optional[UnitOfWork] = None) -> None:
        raise RuntimeError("loan update failed")


class SlowLoanRepository(InMemoryLoanRepository):
    """Loan repository whose reads never finish in time."""

    async def get_by_id(self, loan_id: int, lock: bool = False) -> Optional[Loan]:
        await asyncio.sleep(10)
        return await super().get_by_id(loan_id, lock)


class InMemoryTransactionRepository(TransactionRepository):
    def __init__(self):
        self.rows: List[Transaction] = []
        self.units: List[InMemoryUnitOfWork] = []

    async def begin(self) -> UnitOfWork:
        uow = InMemoryUnitOfWork()
        self.units.append(uow)
        return uow

    async def save(self, transaction: Transaction, uow: UnitOfWork) -> Transaction:
        saved = replace(transaction, id=len(self.rows) + len(uow.pending) + 1)
        uow.stage(lambda: self.rows.append(saved))
        return saved

    async def get_by_loan(self, loan_id: int) -> List[Transaction]:
        return [row for row in self.rows if row.loan_id == loan_id]


# =============================================================================
# Repository fixtures
# =============================================================================

@pytest.fixture
def consumer_repo() -> InMemoryConsumerRepository:
    return InMemoryConsumerRepository()


@pytest.fixture
def merchant_repo() -> InMemoryMerchantRepository:
    return InMemoryMerchantRepository()


@pytest.fixture
def limit_repo() -> InMemoryConsumerLimitRepository:
    return InMemoryConsumerLimitRepository()


@pytest.fixture
def loan_repo() -> InMemoryLoanRepository:
    return InMemoryLoanRepository()


@pytest.fixture
def transaction_repo() -> InMemoryTransactionRepository:
    return InMemoryTransactionRepository()


@pytest.fixture
def locks() -> KeyedLock:
    """A lock registry private to the test."""
    return KeyedLock()


# =============================================================================
# Service fixtures
# =============================================================================

@pytest.fixture
def consumer_service(consumer_repo) -> ConsumerService:
    return ConsumerService(consumer_repository=consumer_repo, timeout=5)


@pytest.fixture
def merchant_service(merchant_repo) -> MerchantService:
    return MerchantService(merchant_repository=merchant_repo, timeout=5)


@pytest.fixture
def limit_service(limit_repo, consumer_repo, loan_repo) -> ConsumerLimitService:
    return ConsumerLimitService(
        consumer_limit_repository=limit_repo,
        consumer_repository=consumer_repo,
        loan_repository=loan_repo,
        timeout=5,
    )


@pytest.fixture
def loan_service(loan_repo, consumer_repo, merchant_repo, limit_repo, locks) -> LoanService:
    return LoanService(
        loan_repository=loan_repo,
        consumer_repository=consumer_repo,
        merchant_repository=merchant_repo,
        consumer_limit_repository=limit_repo,
        timeout=5,
        locks=locks,
    )


@pytest.fixture
def transaction_service(transaction_repo, loan_repo, consumer_repo, limit_repo, locks) -> TransactionService:
    return TransactionService(
        transaction_repository=transaction_repo,
        loan_repository=loan_repo,
        consumer_repository=consumer_repo,
        consumer_limit_repository=limit_repo,
        timeout=5,
        locks=locks,
    )


# =============================================================================
# Seed data
# =============================================================================

def make_consumer(nik: str = "3171234567890001") -> Consumer:
    return Consumer(
        full_name="Budi Santoso",
        legal_name="Budi Santoso",
        place_of_birth="Jakarta",
        date_of_birth=date(1990, 5, 17),
        salary_cents=10_000_000,
        nik=nik,
    )


@pytest_asyncio.fixture
async def seeded(consumer_repo, merchant_repo, limit_service) -> dict:
    """
    One consumer, one merchant and a 3-month credit line of 1,000,000 cents.

    Returns the ids as a dict.
    """
    consumer = await consumer_repo.save(make_consumer())
    merchant = await merchant_repo.save(Merchant(name="Toko Elektronik", merchant_type="electronics"))
    consumer_limit = await limit_service.create_or_update_consumer_limit(
        ConsumerLimitRequest(consumer_id=consumer.id, tenure=3, limit_cents=1_000_000)
    )
    return {
        "consumer_id": consumer.id,
        "merchant_id": merchant.id,
        "consumer_limit_id": consumer_limit.consumer_limit_id,
    }
