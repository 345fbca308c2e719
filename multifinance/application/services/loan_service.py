"""Loan service - orchestrates the loan origination use case."""

from typing import List

import structlog

from multifinance.core.concurrency import KeyedLock, loan_locks, with_deadline
from multifinance.core.config import settings
from multifinance.core.metrics import record_loan_created, record_loan_rejected
from multifinance.domain.entities import Loan, LoanStatus
from multifinance.domain.exceptions import (
    ConsumerNotFoundException,
    DomainException,
    InsufficientLimitException,
    InvalidRequestException,
    LoanNotFoundException,
    MerchantNotFoundException,
)
from multifinance.domain.interfaces import (
    ConsumerLimitRepository,
    ConsumerRepository,
    LoanRepository,
    MerchantRepository,
)
from multifinance.application.dto import LoanRequest, LoanResponse
from multifinance.service.credit import (
    calculate_due_date,
    calculate_interest_cents,
    generate_contract_number,
)
from .consumer_limit_service import load_remaining_limit

logger = structlog.get_logger(__name__)


class LoanService:
    """
    Application service for loan use cases.

    Origination checks, in order: consumer, merchant, credit line,
    remaining limit. The first failing check is reported and nothing
    is written.
    """

    def __init__(
        self,
        loan_repository: LoanRepository,
        consumer_repository: ConsumerRepository,
        merchant_repository: MerchantRepository,
        consumer_limit_repository: ConsumerLimitRepository,
        timeout: float | None = None,
        locks: KeyedLock = loan_locks,
        contract_token_length: int | None = None,
    ):
        self._loan_repo = loan_repository
        self._consumer_repo = consumer_repository
        self._merchant_repo = merchant_repository
        self._limit_repo = consumer_limit_repository
        self._timeout = timeout if timeout is not None else settings.request_timeout_seconds
        self._locks = locks
        self._token_length = contract_token_length or settings.contract_token_length

    @with_deadline
    async def create_loan(self, request: LoanRequest) -> LoanResponse:
        """
        Originate a loan against the consumer's credit line.

        Args:
            request: Consumer, merchant, tenure, principal, rate and asset

        Returns:
            LoanResponse for the new on_going loan

        Raises:
            InvalidRequestException: If request validation fails
            ConsumerNotFoundException: If the consumer does not exist
            MerchantNotFoundException: If the merchant does not exist
            InvalidTenureException: If tenure is outside the tenure vocabulary
            LimitNotFoundException: If no credit line exists for the tenure
            InsufficientLimitException: If principal exceeds the remaining limit
        """
        log = logger.bind(
            consumer_id=request.consumer_id,
            merchant_id=request.merchant_id,
            tenure=request.tenure,
            principal=request.principal_cents,
        )
        log.info("loan_requested")

        try:
            loan = await self._originate(request)
        except DomainException as exc:
            record_loan_rejected(exc.code)
            log.warning("loan_origination_rejected", reason=exc.code)
            raise

        record_loan_created(loan.principal_cents)
        log.info(
            "loan_created",
            loan_id=loan.id,
            contract_number=loan.contract_number,
            interest=loan.interest_cents,
            due_date=loan.due_date.isoformat(),
        )

        return LoanResponse.from_entity(loan)

    @with_deadline
    async def get_loan_by_id(self, loan_id: int) -> LoanResponse:
        """
        Raises:
            LoanNotFoundException: If the loan does not exist
        """
        loan = await self._loan_repo.get_by_id(loan_id)
        if loan is None:
            logger.warning("loan_not_found", loan_id=loan_id)
            raise LoanNotFoundException(loan_id)
        return LoanResponse.from_entity(loan)

    @with_deadline
    async def get_loans_by_consumer_id(self, consumer_id: int) -> List[LoanResponse]:
        if await self._consumer_repo.get_by_id(consumer_id) is None:
            raise ConsumerNotFoundException(consumer_id)

        loans = await self._loan_repo.get_by_consumer(consumer_id)

        logger.info("consumer_loans_retrieved", consumer_id=consumer_id, count=len(loans))

        return [LoanResponse.from_entity(loan) for loan in loans]

    @with_deadline
    async def delete_loan(self, loan_id: int) -> None:
        """
        Soft-delete a loan.

        Holds the loan's payment lock, so a loan is never deleted
        between pricing and commit of a payment.
        """
        async with self._locks.acquire(loan_id):
            loan = await self._loan_repo.get_by_id(loan_id)
            if loan is None:
                raise LoanNotFoundException(loan_id)

            await self._loan_repo.soft_delete(loan_id)

        logger.info("loan_deleted", loan_id=loan_id, status=loan.status.value)

    async def _originate(self, request: LoanRequest) -> Loan:
        errors = request.validate()
        if errors:
            raise InvalidRequestException("; ".join(errors))

        if await self._consumer_repo.get_by_id(request.consumer_id) is None:
            raise ConsumerNotFoundException(request.consumer_id)

        if await self._merchant_repo.get_by_id(request.merchant_id) is None:
            raise MerchantNotFoundException(request.merchant_id)

        consumer_limit, remaining = await load_remaining_limit(
            self._limit_repo,
            self._loan_repo,
            request.consumer_id,
            request.tenure,
        )

        if request.principal_cents > remaining:
            raise InsufficientLimitException(request.principal_cents, remaining)

        loan = Loan(
            consumer_id=request.consumer_id,
            merchant_id=request.merchant_id,
            consumer_limit_id=consumer_limit.id,
            principal_cents=request.principal_cents,
            interest_rate=request.interest_rate,
            interest_cents=calculate_interest_cents(request.principal_cents, request.interest_rate),
            due_date=calculate_due_date(consumer_limit.tenure),
            contract_number=generate_contract_number(
                request.consumer_id,
                request.merchant_id,
                self._token_length,
            ),
            asset_name=request.asset_name,
            status=LoanStatus.ON_GOING,
            installment=0,
        )

        return await self._loan_repo.save(loan)
