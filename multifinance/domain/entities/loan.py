"""Loan entity - a single credit extension against a consumer limit."""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Optional


class LoanStatus(str, Enum):
    ON_GOING = "on_going"
    LATE = "late"
    FINISH = "finish"  # terminal


@dataclass
class Loan:
    """
    A loan originated against a ConsumerLimit.

    Created once at origination and afterwards mutated only by
    payment processing. Paid-to-date amounts never exceed their
    totals and the installment counter never exceeds the tenure of
    the owning limit.
    """

    consumer_id: int
    merchant_id: int
    consumer_limit_id: int
    principal_cents: int
    interest_rate: float
    interest_cents: int
    due_date: date
    contract_number: str
    asset_name: str
    principal_paid_cents: int = 0
    interest_paid_cents: int = 0
    status: LoanStatus = LoanStatus.ON_GOING
    installment: int = 0
    id: Optional[int] = None
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime | None = None
    deleted_at: datetime | None = None

    @property
    def outstanding_principal_cents(self) -> int:
        return self.principal_cents - self.principal_paid_cents

    @property
    def outstanding_interest_cents(self) -> int:
        return self.interest_cents - self.interest_paid_cents

    @property
    def is_finished(self) -> bool:
        return self.status == LoanStatus.FINISH

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def belongs_to(self, consumer_id: int) -> bool:
        return self.consumer_id == consumer_id

    def record_payment(
        self,
        principal_cents: int,
        interest_cents: int,
        status: LoanStatus,
        installment: int,
    ) -> None:
        """Apply a priced payment to the paid-to-date amounts and state."""
        self.principal_paid_cents += principal_cents
        self.interest_paid_cents += interest_cents
        self.status = status
        self.installment = installment
        self.updated_at = datetime.utcnow()

    def mark_deleted(self) -> None:
        self.deleted_at = datetime.utcnow()
