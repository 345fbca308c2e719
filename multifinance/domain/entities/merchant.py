"""Merchant entity - the seller a loan finances a purchase from."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass
class Merchant:
    """A merchant that loans can be originated for."""

    name: str
    merchant_type: str
    id: Optional[int] = None
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime | None = None
    deleted_at: datetime | None = None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def mark_deleted(self) -> None:
        self.deleted_at = datetime.utcnow()
