"""Loan state machine driven by successful payments."""

from datetime import date

from multifinance.domain.entities import LoanStatus, PaymentType

from .models import LoanTransition, PaymentQuote


def resolve_transition(quote: PaymentQuote, today: date | None = None) -> LoanTransition:
    """
    Determine the loan state after paying ``quote``.

    Rules:
        1. Paid after the due date: late, otherwise on_going
        2. Full payment, or the last installment of the tenure: finish,
           with the installment counter clamped to the tenure

    Args:
        quote: Priced payment
        today: Payment date (defaults to today)

    Returns:
        The new status, installment counter and paid-to-date amounts
    """
    today = today or date.today()

    status = LoanStatus.LATE if today > quote.due_date else LoanStatus.ON_GOING
    installment = quote.installment

    if quote.payment_type == PaymentType.FULL or quote.installment >= quote.tenure:
        status = LoanStatus.FINISH
        installment = quote.tenure

    return LoanTransition(
        status=status,
        installment=installment,
        principal_cents=quote.remaining_principal_cents,
        interest_cents=quote.remaining_interest_cents,
    )


def describe_payment(quote: PaymentQuote) -> str:
    """Ledger description of a payment."""
    return f"Payment for loan {quote.contract_number}"
