"""Data transfer objects for loan operations."""

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class LoanRequest:
    """Input data for originating a loan."""
    consumer_id: int
    merchant_id: int
    tenure: int
    principal_cents: int
    interest_rate: float
    asset_name: str

    def validate(self) -> List[str]:
        errors = []

        if self.consumer_id <= 0:
            errors.append("consumer_id must be positive")

        if self.merchant_id <= 0:
            errors.append("merchant_id must be positive")

        if self.principal_cents <= 0:
            errors.append("principal_cents must be positive")

        if self.interest_rate < 0:
            errors.append("interest_rate must not be negative")

        if not self.asset_name or not self.asset_name.strip():
            errors.append("asset_name is required")

        return errors


@dataclass(frozen=True)
class LoanResponse:
    """Response data for a loan."""

    loan_id: int
    consumer_id: int
    merchant_id: int
    consumer_limit_id: int
    contract_number: str
    asset_name: str
    principal_cents: int
    principal_paid_cents: int
    interest_rate: float
    interest_cents: int
    interest_paid_cents: int
    status: str
    installment: int
    due_date: str
    created_at: str

    @classmethod
    def from_entity(cls, loan) -> "LoanResponse":
        return cls(
            loan_id=loan.id,
            consumer_id=loan.consumer_id,
            merchant_id=loan.merchant_id,
            consumer_limit_id=loan.consumer_limit_id,
            contract_number=loan.contract_number,
            asset_name=loan.asset_name,
            principal_cents=loan.principal_cents,
            principal_paid_cents=loan.principal_paid_cents,
            interest_rate=loan.interest_rate,
            interest_cents=loan.interest_cents,
            interest_paid_cents=loan.interest_paid_cents,
            status=loan.status.value,
            installment=loan.installment,
            due_date=loan.due_date.isoformat(),
            created_at=loan.created_at.isoformat(),
        )
