"""Consumer entity - the borrower a credit line belongs to."""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional


@dataclass
class Consumer:
    """
    A registered borrower.

    Consumers are reference data for the credit engine: loans and
    limits only ever check that a live consumer exists.
    """

    full_name: str
    legal_name: str
    place_of_birth: str
    date_of_birth: date
    salary_cents: int
    nik: str
    ktp_image_url: str = ""
    selfie_url: str = ""
    id: Optional[int] = None
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime | None = None
    deleted_at: datetime | None = None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def mark_deleted(self) -> None:
        self.deleted_at = datetime.utcnow()
