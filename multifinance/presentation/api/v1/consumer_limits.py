"""Consumer limit API endpoints."""

from typing import Annotated, List

from fastapi import APIRouter, Depends, Path, Response

from multifinance.application.dto import ConsumerLimitRequest
from multifinance.application.services import ConsumerLimitService
from multifinance.core.dependencies import get_consumer_limit_service
from multifinance.presentation.schemas import (
    ConsumerLimitRequestSchema,
    ConsumerLimitResponseSchema,
    ErrorResponseSchema,
    RemainingLimitResponseSchema,
)

consumer_limit_router = APIRouter(
    prefix="/consumer-limits",
    responses={
        400: {"model": ErrorResponseSchema, "description": "Invalid request or tenure"},
        404: {"model": ErrorResponseSchema, "description": "Consumer or limit not found"},
    },
)


@consumer_limit_router.post(
    "",
    response_model=ConsumerLimitResponseSchema,
    summary="Set Consumer Limit",
    description="""
    Create or update the credit line of a consumer for one tenure.

    A consumer has at most one live limit per tenure; posting again for
    the same (consumer, tenure) replaces the amount.
    """,
)
async def create_or_update_consumer_limit(
    request: ConsumerLimitRequestSchema,
    limit_service: Annotated[ConsumerLimitService, Depends(get_consumer_limit_service)],
) -> ConsumerLimitResponseSchema:
    response = await limit_service.create_or_update_consumer_limit(
        ConsumerLimitRequest(
            consumer_id=request.consumer_id,
            tenure=request.tenure,
            limit_cents=request.limit_cents,
        )
    )
    return ConsumerLimitResponseSchema.model_validate(response)


@consumer_limit_router.get(
    "/{consumer_id}",
    response_model=List[ConsumerLimitResponseSchema],
    summary="Get Consumer Limits",
)
async def get_consumer_limits(
    consumer_id: Annotated[int, Path(gt=0)],
    limit_service: Annotated[ConsumerLimitService, Depends(get_consumer_limit_service)],
) -> List[ConsumerLimitResponseSchema]:
    limits = await limit_service.get_consumer_limits_by_consumer_id(consumer_id)
    return [ConsumerLimitResponseSchema.model_validate(limit) for limit in limits]


@consumer_limit_router.get(
    "/{consumer_id}/{tenure}",
    response_model=RemainingLimitResponseSchema,
    summary="Get Remaining Limit",
    description="Credit line for one tenure and how much of it is still available.",
)
async def get_consumer_limit_by_tenure(
    consumer_id: Annotated[int, Path(gt=0)],
    tenure: Annotated[int, Path(description="Tenure in months: 1, 2, 3 or 6")],
    limit_service: Annotated[ConsumerLimitService, Depends(get_consumer_limit_service)],
) -> RemainingLimitResponseSchema:
    response = await limit_service.get_consumer_limit_by_tenure(consumer_id, tenure)
    return RemainingLimitResponseSchema.model_validate(response)


@consumer_limit_router.delete(
    "/{limit_id}",
    status_code=204,
    summary="Delete Consumer Limit",
)
async def delete_consumer_limit(
    limit_id: Annotated[int, Path(gt=0)],
    limit_service: Annotated[ConsumerLimitService, Depends(get_consumer_limit_service)],
) -> Response:
    await limit_service.delete_consumer_limit(limit_id)
    return Response(status_code=204)
