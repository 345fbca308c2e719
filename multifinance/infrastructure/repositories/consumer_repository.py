"""PostgreSQL implementation of ConsumerRepository."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from multifinance.domain.entities import Consumer
from multifinance.domain.interfaces import ConsumerRepository
from multifinance.infrastructure.database.models import ConsumerModel


class PostgresConsumerRepository(ConsumerRepository):
    """
    PostgreSQL implementation of the Consumer repository.

    Uses SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, consumer: Consumer) -> Consumer:
        """Persist a consumer to the database."""
        model = ConsumerModel(
            full_name=consumer.full_name,
            legal_name=consumer.legal_name,
            place_of_birth=consumer.place_of_birth,
            date_of_birth=consumer.date_of_birth,
            salary_cents=consumer.salary_cents,
            nik=consumer.nik,
            ktp_image_url=consumer.ktp_image_url,
            selfie_url=consumer.selfie_url,
            created_at=consumer.created_at,
        )

        self._session.add(model)
        await self._session.flush()

        consumer.id = model.id
        return consumer

    async def get_by_id(self, consumer_id: int) -> Optional[Consumer]:
        """Retrieve a live consumer by ID."""
        stmt = select(ConsumerModel).where(
            ConsumerModel.id == consumer_id,
            ConsumerModel.deleted_at.is_(None),
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_entity(model)

    async def get_by_nik(self, nik: str) -> Optional[Consumer]:
        """Retrieve a live consumer by NIK."""
        stmt = select(ConsumerModel).where(
            ConsumerModel.nik == nik,
            ConsumerModel.deleted_at.is_(None),
        )
        result = await self._session.execute(stmt)
        model = result.scalars().first()

        if model is None:
            return None

        return self._to_entity(model)

    async def list(self, limit: int = 10, offset: int = 0) -> List[Consumer]:
        """List live consumers ordered by ID."""
        stmt = (
            select(ConsumerModel)
            .where(ConsumerModel.deleted_at.is_(None))
            .order_by(ConsumerModel.id.asc())
            .limit(limit)
            .offset(offset)
        )
        result = await self._session.execute(stmt)
        models = result.scalars().all()

        return [self._to_entity(model) for model in models]

    async def update(self, consumer: Consumer) -> Consumer:
        """Overwrite the profile fields of a live consumer."""
        consumer.updated_at = datetime.utcnow()
        stmt = (
            update(ConsumerModel)
            .where(
                ConsumerModel.id == consumer.id,
                ConsumerModel.deleted_at.is_(None),
            )
            .values(
                full_name=consumer.full_name,
                legal_name=consumer.legal_name,
                place_of_birth=consumer.place_of_birth,
                date_of_birth=consumer.date_of_birth,
                salary_cents=consumer.salary_cents,
                nik=consumer.nik,
                ktp_image_url=consumer.ktp_image_url,
                selfie_url=consumer.selfie_url,
                updated_at=consumer.updated_at,
            )
        )
        await self._session.execute(stmt)
        await self._session.flush()

        return consumer

    async def soft_delete(self, consumer_id: int) -> None:
        """Mark a consumer as deleted."""
        stmt = (
            update(ConsumerModel)
            .where(
                ConsumerModel.id == consumer_id,
                ConsumerModel.deleted_at.is_(None),
            )
            .values(deleted_at=datetime.utcnow())
        )
        await self._session.execute(stmt)
        await self._session.flush()

    def _to_entity(self, model: ConsumerModel) -> Consumer:
        """Convert database model to domain entity."""
        return Consumer(
            id=model.id,
            full_name=model.full_name,
            legal_name=model.legal_name,
            place_of_birth=model.place_of_birth,
            date_of_birth=model.date_of_birth,
            salary_cents=model.salary_cents,
            nik=model.nik,
            ktp_image_url=model.ktp_image_url,
            selfie_url=model.selfie_url,
            created_at=model.created_at,
            updated_at=model.updated_at,
            deleted_at=model.deleted_at,
        )
