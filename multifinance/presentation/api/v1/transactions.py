"""Payment API endpoints."""

from typing import Annotated, List

from fastapi import APIRouter, Depends, Path, Query

from multifinance.application.dto import PaymentRequest
from multifinance.application.services import TransactionService
from multifinance.core.dependencies import get_transaction_service
from multifinance.presentation.schemas import (
    ErrorResponseSchema,
    PaymentQuoteResponseSchema,
    PaymentRequestSchema,
    TransactionResponseSchema,
)

transaction_router = APIRouter(
    prefix="/transactions",
    responses={
        400: {"model": ErrorResponseSchema, "description": "Invalid payment"},
        404: {"model": ErrorResponseSchema, "description": "Consumer, loan or limit not found"},
        504: {"model": ErrorResponseSchema, "description": "Deadline exceeded"},
    },
)


@transaction_router.get(
    "/remaining-payment",
    response_model=PaymentQuoteResponseSchema,
    summary="Quote Payment",
    description="""
    Price the next payment on a loan without paying it.

    `full` settles everything outstanding; `installment` is one evenly
    sized share of principal and interest over the tenure.
    """,
)
async def get_remaining_payment(
    consumer_id: Annotated[int, Query(gt=0)],
    loan_id: Annotated[int, Query(gt=0)],
    payment_type: Annotated[str, Query(description="installment or full")],
    transaction_service: Annotated[TransactionService, Depends(get_transaction_service)],
) -> PaymentQuoteResponseSchema:
    response = await transaction_service.get_remaining_payment(consumer_id, loan_id, payment_type)
    return PaymentQuoteResponseSchema.model_validate(response)


@transaction_router.post(
    "",
    response_model=TransactionResponseSchema,
    status_code=201,
    summary="Pay Loan",
    description="""
    Pay a loan. The ledger entry and the loan update are committed
    together; on failure neither is written.
    """,
)
async def create_transaction(
    request: PaymentRequestSchema,
    transaction_service: Annotated[TransactionService, Depends(get_transaction_service)],
) -> TransactionResponseSchema:
    response = await transaction_service.create_transaction(
        PaymentRequest(
            consumer_id=request.consumer_id,
            loan_id=request.loan_id,
            payment_type=request.payment_type,
        )
    )
    return TransactionResponseSchema.model_validate(response)


@transaction_router.get(
    "/loan/{loan_id}",
    response_model=List[TransactionResponseSchema],
    summary="Get Loan Transactions",
)
async def get_loan_transactions(
    loan_id: Annotated[int, Path(gt=0)],
    transaction_service: Annotated[TransactionService, Depends(get_transaction_service)],
) -> List[TransactionResponseSchema]:
    transactions = await transaction_service.get_transactions_by_loan(loan_id)
    return [TransactionResponseSchema.model_validate(txn) for txn in transactions]
