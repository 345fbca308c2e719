"""Helpers used when a new loan is originated."""

import secrets
import string
from datetime import date
from decimal import Decimal, ROUND_HALF_UP

from dateutil.relativedelta import relativedelta

CONTRACT_ALPHABET = string.ascii_letters + string.digits


def calculate_interest_cents(principal_cents: int, interest_rate: float) -> int:
    """
    Flat interest charged once at origination.

    Args:
        principal_cents: Loan principal in cents
        interest_rate: Interest rate in percent (e.g. 2.5 for 2.5%)

    Returns:
        principal * rate / 100, rounded half-up to the cent
    """
    interest = Decimal(principal_cents) * Decimal(str(interest_rate)) / Decimal(100)
    return int(interest.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def calculate_due_date(tenure: int, start: date | None = None) -> date:
    """Final due date: ``tenure`` calendar months after ``start`` (today)."""
    return (start or date.today()) + relativedelta(months=tenure)


def generate_contract_number(
    consumer_id: int,
    merchant_id: int,
    token_length: int = 10,
) -> str:
    """
    Build a contract number of the form ``{consumer}-{token}-{merchant}``.

    The token is drawn from 62 alphanumerics with a CSPRNG, so with the
    default length collisions are practically impossible.
    """
    token = "".join(secrets.choice(CONTRACT_ALPHABET) for _ in range(token_length))
    return f"{consumer_id}-{token}-{merchant_id}"
