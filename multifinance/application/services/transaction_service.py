"""Transaction service - prices and processes loan payments."""

from typing import List, Tuple

import structlog

from multifinance.core.concurrency import KeyedLock, loan_locks, with_deadline
from multifinance.core.config import settings
from multifinance.core.metrics import (
    record_payment_committed,
    record_payment_failed,
    record_payment_rejected,
    track_payment_latency,
)
from multifinance.domain.entities import Loan, PaymentType, Transaction
from multifinance.domain.exceptions import (
    ConsumerNotFoundException,
    DomainException,
    InvalidRequestException,
    LimitNotFoundException,
    LoanAlreadyFinishedException,
    LoanNotFoundException,
    LoanOwnershipMismatchException,
)
from multifinance.domain.interfaces import (
    ConsumerLimitRepository,
    ConsumerRepository,
    LoanRepository,
    TransactionRepository,
)
from multifinance.application.dto import (
    PaymentQuoteResponse,
    PaymentRequest,
    TransactionResponse,
)
from multifinance.service.credit import (
    PaymentQuote,
    describe_payment,
    parse_payment_type,
    price_payment,
    resolve_transition,
)

logger = structlog.get_logger(__name__)


class TransactionService:
    """
    Application service for payment use cases.

    A payment is priced and written under the loan's lock: the ledger
    insert and the loan update commit together or not at all.
    """

    def __init__(
        self,
        transaction_repository: TransactionRepository,
        loan_repository: LoanRepository,
        consumer_repository: ConsumerRepository,
        consumer_limit_repository: ConsumerLimitRepository,
        timeout: float | None = None,
        locks: KeyedLock = loan_locks,
    ):
        self._transaction_repo = transaction_repository
        self._loan_repo = loan_repository
        self._consumer_repo = consumer_repository
        self._limit_repo = consumer_limit_repository
        self._timeout = timeout if timeout is not None else settings.request_timeout_seconds
        self._locks = locks

    @with_deadline
    async def get_remaining_payment(
        self,
        consumer_id: int,
        loan_id: int,
        payment_type: str,
    ) -> PaymentQuoteResponse:
        """
        Price the next payment on a loan without writing anything.

        Raises:
            InvalidPaymentTypeException: Unknown payment type
            ConsumerNotFoundException: If the consumer does not exist
            LoanNotFoundException: If the loan does not exist
            LoanOwnershipMismatchException: If the loan is someone else's
            LoanAlreadyFinishedException: If the loan is settled
            LimitNotFoundException: If the loan's credit line is gone
        """
        loan, quote = await self._price(consumer_id, loan_id, payment_type)
        return PaymentQuoteResponse.from_quote(loan, quote)

    @with_deadline
    async def create_transaction(self, request: PaymentRequest) -> TransactionResponse:
        """
        Pay a loan.

        Prices against a locked, fresh read of the loan, inserts the
        ledger entry and advances the loan state in one unit of work.

        Args:
            request: Consumer, loan and payment type

        Returns:
            TransactionResponse for the committed ledger entry

        Raises:
            Everything get_remaining_payment raises, plus any storage
            error of the writes (after rolling both back)
        """
        errors = request.validate()
        if errors:
            raise InvalidRequestException("; ".join(errors))

        log = logger.bind(
            consumer_id=request.consumer_id,
            loan_id=request.loan_id,
            payment_type=request.payment_type,
        )

        with track_payment_latency():
            async with self._locks.acquire(request.loan_id):
                try:
                    loan, quote = await self._price(
                        request.consumer_id,
                        request.loan_id,
                        request.payment_type,
                        lock=True,
                    )
                except DomainException as exc:
                    record_payment_rejected(self._metric_label(request.payment_type))
                    log.warning("payment_rejected", reason=exc.code)
                    raise

                transaction = await self._commit_payment(loan, quote, log)

        record_payment_committed(quote.payment_type.value, quote.total_cents, loan.is_finished)
        log.info(
            "payment_committed",
            transaction_id=transaction.id,
            amount=transaction.amount_cents,
            status=loan.status.value,
            installment=loan.installment,
        )

        return TransactionResponse.from_entity(transaction)

    @with_deadline
    async def get_transactions_by_loan(self, loan_id: int) -> List[TransactionResponse]:
        if await self._loan_repo.get_by_id(loan_id) is None:
            raise LoanNotFoundException(loan_id)

        transactions = await self._transaction_repo.get_by_loan(loan_id)
        return [TransactionResponse.from_entity(txn) for txn in transactions]

    async def _price(
        self,
        consumer_id: int,
        loan_id: int,
        payment_type: str,
        lock: bool = False,
    ) -> Tuple[Loan, PaymentQuote]:
        payment_type = parse_payment_type(payment_type)

        if await self._consumer_repo.get_by_id(consumer_id) is None:
            raise ConsumerNotFoundException(consumer_id)

        loan = await self._loan_repo.get_by_id(loan_id, lock=lock)
        if loan is None:
            raise LoanNotFoundException(loan_id)

        if not loan.belongs_to(consumer_id):
            raise LoanOwnershipMismatchException(loan_id, consumer_id)

        if loan.is_finished:
            raise LoanAlreadyFinishedException(loan_id)

        consumer_limit = await self._limit_repo.get_by_id(loan.consumer_limit_id)
        if consumer_limit is None:
            raise LimitNotFoundException(limit_id=loan.consumer_limit_id)

        return loan, price_payment(loan, consumer_limit.tenure, payment_type)

    async def _commit_payment(self, loan: Loan, quote: PaymentQuote, log) -> Transaction:
        transition = resolve_transition(quote)
        loan.record_payment(
            principal_cents=transition.principal_cents,
            interest_cents=transition.interest_cents,
            status=transition.status,
            installment=transition.installment,
        )

        transaction = Transaction(
            consumer_id=loan.consumer_id,
            loan_id=loan.id,
            amount_cents=quote.total_cents,
            description=describe_payment(quote),
        )

        uow = await self._transaction_repo.begin()
        try:
            async with uow:
                transaction = await self._transaction_repo.save(transaction, uow)
                await self._loan_repo.update_payment_state(loan, uow)
                await uow.commit()
        except Exception as exc:
            record_payment_failed(quote.payment_type.value)
            log.error("payment_rolled_back", error=str(exc), error_type=type(exc).__name__)
            raise

        return transaction

    @staticmethod
    def _metric_label(payment_type: str) -> str:
        if payment_type in (PaymentType.FULL.value, PaymentType.INSTALLMENT.value):
            return payment_type
        return "invalid"
