"""Consumer limit service - credit lines and the Limit Ledger."""

from typing import List, Tuple

import structlog

from multifinance.core.concurrency import with_deadline
from multifinance.core.config import settings
from multifinance.domain.entities import ConsumerLimit, is_valid_tenure
from multifinance.domain.exceptions import (
    ConsumerNotFoundException,
    InvalidRequestException,
    InvalidTenureException,
    LimitNotFoundException,
)
from multifinance.domain.interfaces import (
    ConsumerLimitRepository,
    ConsumerRepository,
    LoanRepository,
)
from multifinance.application.dto import (
    ConsumerLimitRequest,
    ConsumerLimitResponse,
    RemainingLimitResponse,
)
from multifinance.service.credit import calculate_remaining_limit_cents

logger = structlog.get_logger(__name__)


async def load_remaining_limit(
    consumer_limit_repo: ConsumerLimitRepository,
    loan_repo: LoanRepository,
    consumer_id: int,
    tenure: int,
) -> Tuple[ConsumerLimit, int]:
    """
    Resolve a credit line and how much of it is still available.

    Args:
        consumer_limit_repo: Source of credit lines
        loan_repo: Source of the consumer's loans
        consumer_id: The consumer's identifier
        tenure: Tenure in months

    Returns:
        Tuple of (credit line, remaining cents)

    Raises:
        InvalidTenureException: If tenure is outside the tenure vocabulary
        LimitNotFoundException: If the consumer has no live limit for tenure
    """
    if not is_valid_tenure(tenure):
        raise InvalidTenureException(tenure)

    consumer_limit = await consumer_limit_repo.get_by_tenure_and_consumer(tenure, consumer_id)
    if consumer_limit is None:
        raise LimitNotFoundException(consumer_id=consumer_id, tenure=tenure)

    loans = await loan_repo.get_by_consumer(consumer_id)
    return consumer_limit, calculate_remaining_limit_cents(consumer_limit, loans)


class ConsumerLimitService:
    """
    Application service for credit line use cases.

    A consumer has at most one live limit per tenure; writes upsert on
    (consumer, tenure).
    """

    def __init__(
        self,
        consumer_limit_repository: ConsumerLimitRepository,
        consumer_repository: ConsumerRepository,
        loan_repository: LoanRepository,
        timeout: float | None = None,
    ):
        self._limit_repo = consumer_limit_repository
        self._consumer_repo = consumer_repository
        self._loan_repo = loan_repository
        self._timeout = timeout if timeout is not None else settings.request_timeout_seconds

    @with_deadline
    async def create_or_update_consumer_limit(
        self,
        request: ConsumerLimitRequest,
    ) -> ConsumerLimitResponse:
        """
        Set the limit of a consumer for one tenure.

        Updates the amount when a live limit already exists for
        (consumer, tenure), otherwise creates it.

        Raises:
            InvalidRequestException: If request validation fails
            InvalidTenureException: If tenure is outside the tenure vocabulary
            ConsumerNotFoundException: If the consumer does not exist
        """
        errors = request.validate()
        if errors:
            raise InvalidRequestException("; ".join(errors))

        if not is_valid_tenure(request.tenure):
            raise InvalidTenureException(request.tenure)

        if await self._consumer_repo.get_by_id(request.consumer_id) is None:
            raise ConsumerNotFoundException(request.consumer_id)

        log = logger.bind(consumer_id=request.consumer_id, tenure=request.tenure)

        existing = await self._limit_repo.get_by_tenure_and_consumer(
            request.tenure,
            request.consumer_id,
        )
        if existing is not None:
            await self._limit_repo.update_amount(existing.id, request.limit_cents)
            existing.limit_cents = request.limit_cents
            log.info("consumer_limit_updated", limit_cents=request.limit_cents)
            return ConsumerLimitResponse.from_entity(existing)

        consumer_limit = await self._limit_repo.save(
            ConsumerLimit(
                consumer_id=request.consumer_id,
                tenure=request.tenure,
                limit_cents=request.limit_cents,
            )
        )
        log.info("consumer_limit_created", limit_cents=request.limit_cents)

        return ConsumerLimitResponse.from_entity(consumer_limit)

    @with_deadline
    async def get_consumer_limits_by_consumer_id(
        self,
        consumer_id: int,
    ) -> List[ConsumerLimitResponse]:
        if await self._consumer_repo.get_by_id(consumer_id) is None:
            raise ConsumerNotFoundException(consumer_id)

        limits = await self._limit_repo.get_by_consumer(consumer_id)
        return [ConsumerLimitResponse.from_entity(limit) for limit in limits]

    @with_deadline
    async def get_consumer_limit_by_tenure(
        self,
        consumer_id: int,
        tenure: int,
    ) -> RemainingLimitResponse:
        """
        The credit line for (consumer, tenure) with its remaining amount.

        Only unfinished loans drawn on the same credit line count as
        exposure; loans under another tenure's limit are excluded.
        """
        consumer_limit, remaining = await load_remaining_limit(
            self._limit_repo,
            self._loan_repo,
            consumer_id,
            tenure,
        )
        return RemainingLimitResponse.from_entity(consumer_limit, remaining)

    @with_deadline
    async def delete_consumer_limit(self, limit_id: int) -> None:
        consumer_limit = await self._limit_repo.get_by_id(limit_id)
        if consumer_limit is None:
            raise LimitNotFoundException(limit_id=limit_id)

        await self._limit_repo.soft_delete(limit_id)
        logger.info(
            "consumer_limit_deleted",
            limit_id=limit_id,
            consumer_id=consumer_limit.consumer_id,
            tenure=consumer_limit.tenure,
        )
