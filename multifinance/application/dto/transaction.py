"""Data transfer objects for payment operations."""

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class PaymentRequest:
    """Input data for pricing or paying a loan."""
    consumer_id: int
    loan_id: int
    payment_type: str

    def validate(self) -> List[str]:
        errors = []

        if self.consumer_id <= 0:
            errors.append("consumer_id must be positive")

        if self.loan_id <= 0:
            errors.append("loan_id must be positive")

        return errors


@dataclass(frozen=True)
class PaymentQuoteResponse:
    """The amount due for the next payment on a loan."""

    loan_id: int
    consumer_id: int
    contract_number: str
    payment_type: str
    tenure: int
    installment: int
    due_date: str
    principal_paid_cents: int
    interest_paid_cents: int
    remaining_principal_cents: int
    remaining_interest_cents: int
    total_cents: int

    @classmethod
    def from_quote(cls, loan, quote) -> "PaymentQuoteResponse":
        return cls(
            loan_id=loan.id,
            consumer_id=loan.consumer_id,
            contract_number=quote.contract_number,
            payment_type=quote.payment_type.value,
            tenure=quote.tenure,
            installment=quote.installment,
            due_date=quote.due_date.isoformat(),
            principal_paid_cents=quote.principal_paid_cents,
            interest_paid_cents=quote.interest_paid_cents,
            remaining_principal_cents=quote.remaining_principal_cents,
            remaining_interest_cents=quote.remaining_interest_cents,
            total_cents=quote.total_cents,
        )


@dataclass(frozen=True)
class TransactionResponse:
    """Response data for a ledger entry."""

    transaction_id: int
    consumer_id: int
    loan_id: int
    amount_cents: int
    description: str
    created_at: str

    @classmethod
    def from_entity(cls, transaction) -> "TransactionResponse":
        return cls(
            transaction_id=transaction.id,
            consumer_id=transaction.consumer_id,
            loan_id=transaction.loan_id,
            amount_cents=transaction.amount_cents,
            description=transaction.description,
            created_at=transaction.created_at.isoformat(),
        )
