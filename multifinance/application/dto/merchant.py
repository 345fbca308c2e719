"""Data transfer objects for merchant operations."""

from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class MerchantRequest:
    """Input data for creating or replacing a merchant."""
    name: str
    merchant_type: str

    def validate(self) -> List[str]:
        errors = []

        if not self.name or not self.name.strip():
            errors.append("name is required")

        if not self.merchant_type or not self.merchant_type.strip():
            errors.append("merchant_type is required")

        return errors


@dataclass(frozen=True)
class MerchantResponse:
    merchant_id: int
    name: str
    merchant_type: str
    created_at: str
    updated_at: Optional[str]

    @classmethod
    def from_entity(cls, merchant) -> "MerchantResponse":
        return cls(
            merchant_id=merchant.id,
            name=merchant.name,
            merchant_type=merchant.merchant_type,
            created_at=merchant.created_at.isoformat(),
            updated_at=merchant.updated_at.isoformat() if merchant.updated_at else None,
        )
