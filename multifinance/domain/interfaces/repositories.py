"""Repository interfaces for data persistence."""

from abc import ABC, abstractmethod
from typing import List, Optional

from multifinance.domain.entities import (
    Consumer,
    ConsumerLimit,
    Loan,
    Merchant,
    Transaction,
)


class UnitOfWork(ABC):
    """
    Commit-or-rollback scope around a group of writes.

    Used as an async context manager: leaving the block with an
    exception rolls back everything written inside it. A successful
    block must call ``commit()`` explicitly.
    """

    @abstractmethod
    async def commit(self) -> None:
        """Make every write of the scope durable."""
        ...

    @abstractmethod
    async def rollback(self) -> None:
        """Discard every write of the scope."""
        ...

    async def __aenter__(self) -> "UnitOfWork":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if exc_type is not None:
            await self.rollback()


class ConsumerRepository(ABC):
    """Abstract repository for Consumer persistence."""

    @abstractmethod
    async def save(self, consumer: Consumer) -> Consumer:
        """
        Persist a new consumer.

        Returns:
            The consumer with its generated id populated
        """
        ...

    @abstractmethod
    async def get_by_id(self, consumer_id: int) -> Optional[Consumer]:
        """
        Retrieve a live consumer by ID.

        Returns:
            The consumer if found and not deleted, None otherwise
        """
        ...

    @abstractmethod
    async def get_by_nik(self, nik: str) -> Optional[Consumer]:
        """Retrieve a live consumer by national identity number."""
        ...

    @abstractmethod
    async def list(self, limit: int = 10, offset: int = 0) -> List[Consumer]:
        """List live consumers, oldest first."""
        ...

    @abstractmethod
    async def update(self, consumer: Consumer) -> Consumer:
        """Overwrite the mutable fields of a live consumer."""
        ...

    @abstractmethod
    async def soft_delete(self, consumer_id: int) -> None:
        """Mark a consumer as deleted."""
        ...


class MerchantRepository(ABC):
    """Abstract repository for Merchant persistence."""

    @abstractmethod
    async def save(self, merchant: Merchant) -> Merchant:
        ...

    @abstractmethod
    async def get_by_id(self, merchant_id: int) -> Optional[Merchant]:
        ...

    @abstractmethod
    async def list(self, limit: int = 10, offset: int = 0) -> List[Merchant]:
        ...

    @abstractmethod
    async def update(self, merchant: Merchant) -> Merchant:
        ...

    @abstractmethod
    async def soft_delete(self, merchant_id: int) -> None:
        ...


class ConsumerLimitRepository(ABC):
    """
    Abstract repository for ConsumerLimit persistence.

    Reads only ever return live (non-deleted) limits.
    """

    @abstractmethod
    async def get_by_id(self, limit_id: int) -> Optional[ConsumerLimit]:
        ...

    @abstractmethod
    async def get_by_tenure_and_consumer(
        self,
        tenure: int,
        consumer_id: int,
    ) -> Optional[ConsumerLimit]:
        """
        Retrieve the credit line of a consumer for one tenure.

        Args:
            tenure: Tenure in months
            consumer_id: The consumer's identifier

        Returns:
            The live limit if one exists, None otherwise
        """
        ...

    @abstractmethod
    async def get_by_consumer(self, consumer_id: int) -> List[ConsumerLimit]:
        """Retrieve every live limit of a consumer, ordered by tenure."""
        ...

    @abstractmethod
    async def save(self, consumer_limit: ConsumerLimit) -> ConsumerLimit:
        ...

    @abstractmethod
    async def update_amount(self, limit_id: int, limit_cents: int) -> None:
        """Change the amount of an existing limit. Nothing else is mutable."""
        ...

    @abstractmethod
    async def soft_delete(self, limit_id: int) -> None:
        ...


class LoanRepository(ABC):
    """Abstract repository for Loan persistence."""

    @abstractmethod
    async def get_by_id(self, loan_id: int, lock: bool = False) -> Optional[Loan]:
        """
        Retrieve a live loan by ID.

        Args:
            loan_id: The loan's identifier
            lock: Take a row-level write lock for the rest of the
                current storage transaction

        Returns:
            The loan if found and not deleted, None otherwise
        """
        ...

    @abstractmethod
    async def get_by_consumer(self, consumer_id: int) -> List[Loan]:
        """Retrieve every live loan of a consumer, oldest first."""
        ...

    @abstractmethod
    async def save(self, loan: Loan) -> Loan:
        ...

    @abstractmethod
    async def update_payment_state(
        self,
        loan: Loan,
        uow: Optional[UnitOfWork] = None,
    ) -> None:
        """
        Persist paid-to-date amounts, status and installment counter.

        Args:
            loan: Loan carrying the new payment state
            uow: Unit of work the write belongs to, if any
        """
        ...

    @abstractmethod
    async def soft_delete(self, loan_id: int) -> None:
        ...


class TransactionRepository(ABC):
    """
    Abstract repository for ledger entries.

    Ledger entries are append-only: there is no update or delete.
    """

    @abstractmethod
    async def begin(self) -> UnitOfWork:
        """Open a unit of work for an atomic group of writes."""
        ...

    @abstractmethod
    async def save(self, transaction: Transaction, uow: UnitOfWork) -> Transaction:
        """
        Insert a ledger entry inside a unit of work.

        Returns:
            The transaction with its generated id populated
        """
        ...

    @abstractmethod
    async def get_by_loan(self, loan_id: int) -> List[Transaction]:
        """Retrieve every ledger entry of a loan, oldest first."""
        ...
