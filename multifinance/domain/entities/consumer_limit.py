"""ConsumerLimit entity - a consumer's credit line for one tenure."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

# Tenures (in months) a credit line can be opened for.
VALID_TENURES = frozenset({1, 2, 3, 6})


def is_valid_tenure(tenure: int) -> bool:
    """Check a tenure against the fixed tenure vocabulary."""
    return tenure in VALID_TENURES


@dataclass
class ConsumerLimit:
    """
    Credit line for one consumer at one tenure.

    At most one live limit exists per (consumer_id, tenure); it is
    upserted on that key and only ever soft-deleted.

    Attributes:
        consumer_id: Owner of the credit line
        tenure: Repayment term in months, one of VALID_TENURES
        limit_cents: Maximum outstanding principal in cents
    """

    consumer_id: int
    tenure: int
    limit_cents: int
    id: Optional[int] = None
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime | None = None
    deleted_at: datetime | None = None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def mark_deleted(self) -> None:
        self.deleted_at = datetime.utcnow()
