"""Transaction entity - an immutable ledger entry for one payment."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional


class PaymentType(str, Enum):
    """How a payment is sized."""

    FULL = "full"  # Settle everything outstanding
    INSTALLMENT = "installment"  # One evenly-sized share of the tenure


@dataclass(frozen=True)
class Transaction:
    """
    Immutable record of one payment event.

    Created exactly once per successful payment; never updated or
    deleted.

    Attributes:
        consumer_id: Consumer who paid
        loan_id: Loan the payment was applied to
        amount_cents: Total amount paid (principal + interest)
        description: Human-readable description
    """

    consumer_id: int
    loan_id: int
    amount_cents: int
    description: str
    id: Optional[int] = None
    created_at: datetime = field(default_factory=datetime.utcnow)
