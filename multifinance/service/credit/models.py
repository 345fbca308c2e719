"""
Data models for payment pricing.

These are value objects produced by the pricing and lifecycle rules;
they are never persisted directly.
"""

from dataclasses import dataclass
from datetime import date

from multifinance.domain.entities import LoanStatus, PaymentType


@dataclass(frozen=True)
class PaymentQuote:
    """
    The amount due for one payment on a loan.

    Attributes:
        payment_type: How the payment was sized
        contract_number: Contract number of the priced loan
        tenure: Tenure of the loan's credit line, in months
        due_date: Final due date of the loan
        installment: Installment number this payment represents
            (unchanged for full payments)
        principal_paid_cents: Principal paid before this payment
        interest_paid_cents: Interest paid before this payment
        remaining_principal_cents: Principal covered by this payment
        remaining_interest_cents: Interest covered by this payment
        total_cents: Principal plus interest due
    """

    payment_type: PaymentType
    contract_number: str
    tenure: int
    due_date: date
    installment: int
    principal_paid_cents: int
    interest_paid_cents: int
    remaining_principal_cents: int
    remaining_interest_cents: int
    total_cents: int


@dataclass(frozen=True)
class LoanTransition:
    """Loan state after a payment has been applied."""

    status: LoanStatus
    installment: int
    principal_cents: int
    interest_cents: int
