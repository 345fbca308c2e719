"""Merchant service - maintenance of the merchants loans are drawn at."""

from typing import List

import structlog

from multifinance.core.concurrency import with_deadline
from multifinance.core.config import settings
from multifinance.domain.entities import Merchant
from multifinance.domain.exceptions import InvalidRequestException, MerchantNotFoundException
from multifinance.domain.interfaces import MerchantRepository
from multifinance.application.dto import MerchantRequest, MerchantResponse

logger = structlog.get_logger(__name__)


class MerchantService:
    """Application service for merchant use cases."""

    def __init__(
        self,
        merchant_repository: MerchantRepository,
        timeout: float | None = None,
    ):
        self._merchant_repo = merchant_repository
        self._timeout = timeout if timeout is not None else settings.request_timeout_seconds

    @with_deadline
    async def create_merchant(self, request: MerchantRequest) -> MerchantResponse:
        errors = request.validate()
        if errors:
            raise InvalidRequestException("; ".join(errors))

        merchant = await self._merchant_repo.save(
            Merchant(name=request.name, merchant_type=request.merchant_type)
        )
        logger.info("merchant_created", merchant_id=merchant.id)

        return MerchantResponse.from_entity(merchant)

    @with_deadline
    async def get_merchant(self, merchant_id: int) -> MerchantResponse:
        merchant = await self._get_live_merchant(merchant_id)
        return MerchantResponse.from_entity(merchant)

    @with_deadline
    async def list_merchants(self, page: int = 1, limit: int = 10) -> List[MerchantResponse]:
        offset = (max(page, 1) - 1) * limit
        merchants = await self._merchant_repo.list(limit=limit, offset=offset)
        return [MerchantResponse.from_entity(merchant) for merchant in merchants]

    @with_deadline
    async def update_merchant(
        self,
        merchant_id: int,
        request: MerchantRequest,
    ) -> MerchantResponse:
        errors = request.validate()
        if errors:
            raise InvalidRequestException("; ".join(errors))

        merchant = await self._get_live_merchant(merchant_id)
        merchant.name = request.name
        merchant.merchant_type = request.merchant_type

        merchant = await self._merchant_repo.update(merchant)
        logger.info("merchant_updated", merchant_id=merchant.id)

        return MerchantResponse.from_entity(merchant)

    @with_deadline
    async def delete_merchant(self, merchant_id: int) -> None:
        await self._get_live_merchant(merchant_id)
        await self._merchant_repo.soft_delete(merchant_id)
        logger.info("merchant_deleted", merchant_id=merchant_id)

    async def _get_live_merchant(self, merchant_id: int) -> Merchant:
        merchant = await self._merchant_repo.get_by_id(merchant_id)
        if merchant is None:
            logger.warning("merchant_not_found", merchant_id=merchant_id)
            raise MerchantNotFoundException(merchant_id)
        return merchant
