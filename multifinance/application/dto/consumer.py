"""Data transfer objects for consumer operations."""

from dataclasses import dataclass
from datetime import date
from typing import List, Optional


@dataclass(frozen=True)
class ConsumerRequest:
    """Input data for creating or replacing a consumer profile."""

    full_name: str
    legal_name: str
    place_of_birth: str
    date_of_birth: date
    salary_cents: int
    nik: str
    ktp_image_url: str = ""
    selfie_url: str = ""

    def validate(self) -> List[str]:
        errors = []

        for name in ("full_name", "legal_name", "place_of_birth", "nik"):
            value = getattr(self, name)
            if not value or not value.strip():
                errors.append(f"{name} is required")

        if self.salary_cents < 0:
            errors.append("salary_cents must not be negative")

        if self.date_of_birth >= date.today():
            errors.append("date_of_birth must be in the past")

        return errors


@dataclass(frozen=True)
class ConsumerResponse:
    """Response data for a consumer."""

    consumer_id: int
    full_name: str
    legal_name: str
    place_of_birth: str
    date_of_birth: str
    salary_cents: int
    nik: str
    ktp_image_url: str
    selfie_url: str
    created_at: str
    updated_at: Optional[str]

    @classmethod
    def from_entity(cls, consumer) -> "ConsumerResponse":
        return cls(
            consumer_id=consumer.id,
            full_name=consumer.full_name,
            legal_name=consumer.legal_name,
            place_of_birth=consumer.place_of_birth,
            date_of_birth=consumer.date_of_birth.isoformat(),
            salary_cents=consumer.salary_cents,
            nik=consumer.nik,
            ktp_image_url=consumer.ktp_image_url,
            selfie_url=consumer.selfie_url,
            created_at=consumer.created_at.isoformat(),
            updated_at=consumer.updated_at.isoformat() if consumer.updated_at else None,
        )
