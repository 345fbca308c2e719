"""PostgreSQL repository implementation for merchants."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from multifinance.domain.entities import Merchant
from multifinance.domain.interfaces import MerchantRepository
from multifinance.infrastructure.database.models import MerchantModel


class PostgresMerchantRepository(MerchantRepository):
    """PostgreSQL-backed merchant repository."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, merchant: Merchant) -> Merchant:
        model = MerchantModel(
            name=merchant.name,
            merchant_type=merchant.merchant_type,
            created_at=merchant.created_at,
        )

        self._session.add(model)
        await self._session.flush()

        merchant.id = model.id
        return merchant

    async def get_by_id(self, merchant_id: int) -> Optional[Merchant]:
        stmt = select(MerchantModel).where(
            MerchantModel.id == merchant_id,
            MerchantModel.deleted_at.is_(None),
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_entity(model)

    async def list(self, limit: int = 10, offset: int = 0) -> List[Merchant]:
        stmt = (
            select(MerchantModel)
            .where(MerchantModel.deleted_at.is_(None))
            .order_by(MerchantModel.id.asc())
            .limit(limit)
            .offset(offset)
        )
        result = await self._session.execute(stmt)
        models = result.scalars().all()

        return [self._to_entity(model) for model in models]

    async def update(self, merchant: Merchant) -> Merchant:
        merchant.updated_at = datetime.utcnow()
        stmt = (
            update(MerchantModel)
            .where(
                MerchantModel.id == merchant.id,
                MerchantModel.deleted_at.is_(None),
            )
            .values(
                name=merchant.name,
                merchant_type=merchant.merchant_type,
                updated_at=merchant.updated_at,
            )
        )
        await self._session.execute(stmt)
        await self._session.flush()

        return merchant

    async def soft_delete(self, merchant_id: int) -> None:
        stmt = (
            update(MerchantModel)
            .where(
                MerchantModel.id == merchant_id,
                MerchantModel.deleted_at.is_(None),
            )
            .values(deleted_at=datetime.utcnow())
        )
        await self._session.execute(stmt)
        await self._session.flush()

    def _to_entity(self, model: MerchantModel) -> Merchant:
        return Merchant(
            id=model.id,
            name=model.name,
            merchant_type=model.merchant_type,
            created_at=model.created_at,
            updated_at=model.updated_at,
            deleted_at=model.deleted_at,
        )
