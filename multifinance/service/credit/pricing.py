"""
Payment Calculator for the Multifinance credit engine.

Prices a payment on a loan without touching storage. Pricing is
idempotent for a given loan snapshot.
"""

from multifinance.domain.entities import Loan, PaymentType
from multifinance.domain.exceptions import (
    InvalidPaymentTypeException,
    LoanAlreadyFinishedException,
)

from .models import PaymentQuote


def parse_payment_type(value: str | PaymentType) -> PaymentType:
    """Validate a raw payment type against the payment type vocabulary."""
    try:
        return PaymentType(value)
    except ValueError:
        raise InvalidPaymentTypeException(str(value))


def price_payment(
    loan: Loan,
    tenure: int,
    payment_type: str | PaymentType,
) -> PaymentQuote:
    """
    Compute the amount due for a payment.

    Pricing rules:
        - full: everything still outstanding, installment unchanged
        - installment: principal / tenure and interest / tenure, always
          divided over the FULL tenure (every installment but the last is
          the same size), installment advanced by one

    Installment shares are whole cents (floor division) and never exceed
    what is still outstanding. The last installment of the tenure takes
    everything outstanding, so paying every installment settles the loan
    to the cent.

    Args:
        loan: Loan snapshot to price
        tenure: Tenure of the loan's credit line, in months
        payment_type: "full" or "installment"

    Returns:
        The PaymentQuote

    Raises:
        InvalidPaymentTypeException: Unknown payment type
        LoanAlreadyFinishedException: Loan is already settled
    """
    payment_type = parse_payment_type(payment_type)

    if loan.is_finished:
        raise LoanAlreadyFinishedException(loan.id)

    if payment_type == PaymentType.FULL:
        principal = loan.outstanding_principal_cents
        interest = loan.outstanding_interest_cents
        installment = loan.installment
    else:
        installment = loan.installment + 1
        if installment >= tenure:
            # last installment settles the floored residue
            principal = loan.outstanding_principal_cents
            interest = loan.outstanding_interest_cents
        else:
            principal = min(loan.principal_cents // tenure, loan.outstanding_principal_cents)
            interest = min(loan.interest_cents // tenure, loan.outstanding_interest_cents)

    return PaymentQuote(
        payment_type=payment_type,
        contract_number=loan.contract_number,
        tenure=tenure,
        due_date=loan.due_date,
        installment=installment,
        principal_paid_cents=loan.principal_paid_cents,
        interest_paid_cents=loan.interest_paid_cents,
        remaining_principal_cents=principal,
        remaining_interest_cents=interest,
        total_cents=principal + interest,
    )
