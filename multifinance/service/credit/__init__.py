"""
Credit rules for the Multifinance loan engine.

Pure functions only: nothing in this package touches storage.
"""

from .models import PaymentQuote, LoanTransition
from .ledger import calculate_exposure_cents, calculate_remaining_limit_cents
from .origination import (
    calculate_interest_cents,
    calculate_due_date,
    generate_contract_number,
)
from .pricing import parse_payment_type, price_payment
from .lifecycle import resolve_transition, describe_payment

__all__ = [
    # Models
    "PaymentQuote",
    "LoanTransition",
    # Limit Ledger
    "calculate_exposure_cents",
    "calculate_remaining_limit_cents",
    # Origination
    "calculate_interest_cents",
    "calculate_due_date",
    "generate_contract_number",
    # Pricing
    "parse_payment_type",
    "price_payment",
    # Lifecycle
    "resolve_transition",
    "describe_payment",
]
