"""Data transfer objects for credit limit operations."""

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class ConsumerLimitRequest:
    """Input data for upserting a credit line on (consumer, tenure)."""
    consumer_id: int
    tenure: int
    limit_cents: int

    def validate(self) -> List[str]:
        errors = []

        if self.consumer_id <= 0:
            errors.append("consumer_id must be positive")

        if self.limit_cents < 0:
            errors.append("limit_cents must not be negative")

        return errors


@dataclass(frozen=True)
class ConsumerLimitResponse:
    """Response data for a credit line."""

    consumer_limit_id: int
    consumer_id: int
    tenure: int
    limit_cents: int

    @classmethod
    def from_entity(cls, consumer_limit) -> "ConsumerLimitResponse":
        return cls(
            consumer_limit_id=consumer_limit.id,
            consumer_id=consumer_limit.consumer_id,
            tenure=consumer_limit.tenure,
            limit_cents=consumer_limit.limit_cents,
        )


@dataclass(frozen=True)
class RemainingLimitResponse:
    """A credit line together with the part of it still available."""

    consumer_limit_id: int
    consumer_id: int
    tenure: int
    limit_cents: int
    remaining_cents: int

    @classmethod
    def from_entity(cls, consumer_limit, remaining_cents: int) -> "RemainingLimitResponse":
        return cls(
            consumer_limit_id=consumer_limit.id,
            consumer_id=consumer_limit.consumer_id,
            tenure=consumer_limit.tenure,
            limit_cents=consumer_limit.limit_cents,
            remaining_cents=remaining_cents,
        )
