"""Consumer service - registration and maintenance of borrowers."""

from typing import List

import structlog

from multifinance.core.concurrency import with_deadline
from multifinance.core.config import settings
from multifinance.domain.entities import Consumer
from multifinance.domain.exceptions import (
    ConsumerNotFoundException,
    DuplicateConsumerException,
    InvalidRequestException,
)
from multifinance.domain.interfaces import ConsumerRepository
from multifinance.application.dto import ConsumerRequest, ConsumerResponse

logger = structlog.get_logger(__name__)


class ConsumerService:
    """
    Application service for consumer use cases.

    NIK is unique among live consumers.
    """

    def __init__(
        self,
        consumer_repository: ConsumerRepository,
        timeout: float | None = None,
    ):
        self._consumer_repo = consumer_repository
        self._timeout = timeout if timeout is not None else settings.request_timeout_seconds

    @with_deadline
    async def create_consumer(self, request: ConsumerRequest) -> ConsumerResponse:
        """
        Register a new consumer.

        Raises:
            InvalidRequestException: If request validation fails
            DuplicateConsumerException: If the NIK is already registered
        """
        errors = request.validate()
        if errors:
            raise InvalidRequestException("; ".join(errors))

        if await self._consumer_repo.get_by_nik(request.nik) is not None:
            raise DuplicateConsumerException(request.nik)

        consumer = Consumer(
            full_name=request.full_name,
            legal_name=request.legal_name,
            place_of_birth=request.place_of_birth,
            date_of_birth=request.date_of_birth,
            salary_cents=request.salary_cents,
            nik=request.nik,
            ktp_image_url=request.ktp_image_url,
            selfie_url=request.selfie_url,
        )
        consumer = await self._consumer_repo.save(consumer)

        logger.info("consumer_created", consumer_id=consumer.id)

        return ConsumerResponse.from_entity(consumer)

    @with_deadline
    async def get_consumer(self, consumer_id: int) -> ConsumerResponse:
        consumer = await self._get_live_consumer(consumer_id)
        return ConsumerResponse.from_entity(consumer)

    @with_deadline
    async def list_consumers(self, page: int = 1, limit: int = 10) -> List[ConsumerResponse]:
        """List live consumers one page at a time (pages start at 1)."""
        offset = (max(page, 1) - 1) * limit
        consumers = await self._consumer_repo.list(limit=limit, offset=offset)
        return [ConsumerResponse.from_entity(consumer) for consumer in consumers]

    @with_deadline
    async def update_consumer(
        self,
        consumer_id: int,
        request: ConsumerRequest,
    ) -> ConsumerResponse:
        """
        Replace the profile of a live consumer.

        Raises:
            ConsumerNotFoundException: If the consumer does not exist
            DuplicateConsumerException: If the new NIK belongs to someone else
        """
        errors = request.validate()
        if errors:
            raise InvalidRequestException("; ".join(errors))

        consumer = await self._get_live_consumer(consumer_id)

        holder = await self._consumer_repo.get_by_nik(request.nik)
        if holder is not None and holder.id != consumer.id:
            raise DuplicateConsumerException(request.nik)

        consumer.full_name = request.full_name
        consumer.legal_name = request.legal_name
        consumer.place_of_birth = request.place_of_birth
        consumer.date_of_birth = request.date_of_birth
        consumer.salary_cents = request.salary_cents
        consumer.nik = request.nik
        consumer.ktp_image_url = request.ktp_image_url
        consumer.selfie_url = request.selfie_url

        consumer = await self._consumer_repo.update(consumer)
        logger.info("consumer_updated", consumer_id=consumer.id)

        return ConsumerResponse.from_entity(consumer)

    @with_deadline
    async def delete_consumer(self, consumer_id: int) -> None:
        await self._get_live_consumer(consumer_id)
        await self._consumer_repo.soft_delete(consumer_id)
        logger.info("consumer_deleted", consumer_id=consumer_id)

    async def _get_live_consumer(self, consumer_id: int) -> Consumer:
        consumer = await self._consumer_repo.get_by_id(consumer_id)
        if consumer is None:
            logger.warning("consumer_not_found", consumer_id=consumer_id)
            raise ConsumerNotFoundException(consumer_id)
        return consumer
