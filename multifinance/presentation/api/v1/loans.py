"""Loan API endpoints."""

from typing import Annotated, List

from fastapi import APIRouter, Depends, Path, Response

from multifinance.application.dto import LoanRequest
from multifinance.application.services import LoanService
from multifinance.core.dependencies import get_loan_service
from multifinance.presentation.schemas import (
    ErrorResponseSchema,
    InsufficientLimitErrorSchema,
    LoanRequestSchema,
    LoanResponseSchema,
)

loan_router = APIRouter(
    prefix="/loans",
    responses={
        404: {"model": ErrorResponseSchema, "description": "Loan or referenced entity not found"},
    },
)


@loan_router.post(
    "",
    response_model=LoanResponseSchema,
    status_code=201,
    summary="Originate Loan",
    description="""
    Originate a loan against the consumer's credit line for the tenure.

    The principal must not exceed the remaining limit of that credit
    line. Interest is charged once, as a flat percentage of the
    principal.
    """,
    responses={
        400: {"model": ErrorResponseSchema, "description": "Invalid request or tenure"},
        422: {"model": InsufficientLimitErrorSchema, "description": "Insufficient limit"},
    },
)
async def create_loan(
    request: LoanRequestSchema,
    loan_service: Annotated[LoanService, Depends(get_loan_service)],
) -> LoanResponseSchema:
    dto = LoanRequest(
        consumer_id=request.consumer_id,
        merchant_id=request.merchant_id,
        tenure=request.tenure,
        principal_cents=request.principal_cents,
        interest_rate=request.interest_rate,
        asset_name=request.asset_name,
    )
    response = await loan_service.create_loan(dto)
    return LoanResponseSchema.model_validate(response)


@loan_router.get(
    "/{loan_id}",
    response_model=LoanResponseSchema,
    summary="Get Loan",
)
async def get_loan(
    loan_id: Annotated[int, Path(gt=0)],
    loan_service: Annotated[LoanService, Depends(get_loan_service)],
) -> LoanResponseSchema:
    response = await loan_service.get_loan_by_id(loan_id)
    return LoanResponseSchema.model_validate(response)


@loan_router.get(
    "/consumer/{consumer_id}",
    response_model=List[LoanResponseSchema],
    summary="Get Consumer Loans",
)
async def get_consumer_loans(
    consumer_id: Annotated[int, Path(gt=0)],
    loan_service: Annotated[LoanService, Depends(get_loan_service)],
) -> List[LoanResponseSchema]:
    loans = await loan_service.get_loans_by_consumer_id(consumer_id)
    return [LoanResponseSchema.model_validate(loan) for loan in loans]


@loan_router.delete(
    "/{loan_id}",
    status_code=204,
    summary="Delete Loan",
)
async def delete_loan(
    loan_id: Annotated[int, Path(gt=0)],
    loan_service: Annotated[LoanService, Depends(get_loan_service)],
) -> Response:
    await loan_service.delete_loan(loan_id)
    return Response(status_code=204)
