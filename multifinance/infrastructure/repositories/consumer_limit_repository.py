"""PostgreSQL implementation of ConsumerLimitRepository."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from multifinance.domain.entities import ConsumerLimit
from multifinance.domain.interfaces import ConsumerLimitRepository
from multifinance.infrastructure.database.models import ConsumerLimitModel


class PostgresConsumerLimitRepository(ConsumerLimitRepository):
    """
    PostgreSQL implementation of the ConsumerLimit repository.

    Every read filters out soft-deleted limits.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_by_id(self, limit_id: int) -> Optional[ConsumerLimit]:
        """Retrieve a live limit by ID."""
        stmt = select(ConsumerLimitModel).where(
            ConsumerLimitModel.id == limit_id,
            ConsumerLimitModel.deleted_at.is_(None),
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_entity(model)

    async def get_by_tenure_and_consumer(
        self,
        tenure: int,
        consumer_id: int,
    ) -> Optional[ConsumerLimit]:
        """Retrieve the live limit of a consumer for one tenure."""
        stmt = select(ConsumerLimitModel).where(
            ConsumerLimitModel.consumer_id == consumer_id,
            ConsumerLimitModel.tenure == tenure,
            ConsumerLimitModel.deleted_at.is_(None),
        )
        result = await self._session.execute(stmt)
        model = result.scalars().first()

        if model is None:
            return None

        return self._to_entity(model)

    async def get_by_consumer(self, consumer_id: int) -> List[ConsumerLimit]:
        """Retrieve all live limits of a consumer ordered by tenure."""
        stmt = (
            select(ConsumerLimitModel)
            .where(
                ConsumerLimitModel.consumer_id == consumer_id,
                ConsumerLimitModel.deleted_at.is_(None),
            )
            .order_by(ConsumerLimitModel.tenure.asc())
        )
        result = await self._session.execute(stmt)
        models = result.scalars().all()

        return [self._to_entity(model) for model in models]

    async def save(self, consumer_limit: ConsumerLimit) -> ConsumerLimit:
        """Persist a new limit."""
        model = ConsumerLimitModel(
            consumer_id=consumer_limit.consumer_id,
            tenure=consumer_limit.tenure,
            limit_cents=consumer_limit.limit_cents,
            created_at=consumer_limit.created_at,
        )

        self._session.add(model)
        await self._session.flush()

        consumer_limit.id = model.id
        return consumer_limit

    async def update_amount(self, limit_id: int, limit_cents: int) -> None:
        """Change the amount of a live limit."""
        stmt = (
            update(ConsumerLimitModel)
            .where(
                ConsumerLimitModel.id == limit_id,
                ConsumerLimitModel.deleted_at.is_(None),
            )
            .values(limit_cents=limit_cents, updated_at=datetime.utcnow())
        )
        await self._session.execute(stmt)
        await self._session.flush()

    async def soft_delete(self, limit_id: int) -> None:
        """Mark a limit as deleted."""
        stmt = (
            update(ConsumerLimitModel)
            .where(
                ConsumerLimitModel.id == limit_id,
                ConsumerLimitModel.deleted_at.is_(None),
            )
            .values(deleted_at=datetime.utcnow())
        )
        await self._session.execute(stmt)
        await self._session.flush()

    def _to_entity(self, model: ConsumerLimitModel) -> ConsumerLimit:
        """Convert database model to domain entity."""
        return ConsumerLimit(
            id=model.id,
            consumer_id=model.consumer_id,
            tenure=model.tenure,
            limit_cents=model.limit_cents,
            created_at=model.created_at,
            updated_at=model.updated_at,
            deleted_at=model.deleted_at,
        )
