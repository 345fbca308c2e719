"""Consumer API endpoints."""

from typing import Annotated, List

from fastapi import APIRouter, Depends, Path, Query, Response

from multifinance.application.dto import ConsumerRequest
from multifinance.application.services import ConsumerService
from multifinance.core.dependencies import get_consumer_service
from multifinance.presentation.schemas import (
    ConsumerRequestSchema,
    ConsumerResponseSchema,
    ErrorResponseSchema,
)

consumer_router = APIRouter(
    prefix="/consumers",
    responses={
        400: {"model": ErrorResponseSchema, "description": "Invalid request"},
        404: {"model": ErrorResponseSchema, "description": "Consumer not found"},
    },
)


def _to_dto(request: ConsumerRequestSchema) -> ConsumerRequest:
    return ConsumerRequest(
        full_name=request.full_name,
        legal_name=request.legal_name,
        place_of_birth=request.place_of_birth,
        date_of_birth=request.date_of_birth,
        salary_cents=request.salary_cents,
        nik=request.nik,
        ktp_image_url=request.ktp_image_url,
        selfie_url=request.selfie_url,
    )


@consumer_router.post(
    "",
    response_model=ConsumerResponseSchema,
    status_code=201,
    summary="Register Consumer",
    responses={
        409: {"model": ErrorResponseSchema, "description": "NIK already registered"},
    },
)
async def create_consumer(
    request: ConsumerRequestSchema,
    consumer_service: Annotated[ConsumerService, Depends(get_consumer_service)],
) -> ConsumerResponseSchema:
    response = await consumer_service.create_consumer(_to_dto(request))
    return ConsumerResponseSchema.model_validate(response)


@consumer_router.get(
    "",
    response_model=List[ConsumerResponseSchema],
    summary="List Consumers",
)
async def list_consumers(
    page: Annotated[int, Query(ge=1, description="Page number, starting at 1")] = 1,
    limit: Annotated[int, Query(ge=1, le=100, description="Page size")] = 10,
    consumer_service: Annotated[ConsumerService, Depends(get_consumer_service)] = None,
) -> List[ConsumerResponseSchema]:
    consumers = await consumer_service.list_consumers(page=page, limit=limit)
    return [ConsumerResponseSchema.model_validate(c) for c in consumers]


@consumer_router.get(
    "/{consumer_id}",
    response_model=ConsumerResponseSchema,
    summary="Get Consumer",
)
async def get_consumer(
    consumer_id: Annotated[int, Path(gt=0)],
    consumer_service: Annotated[ConsumerService, Depends(get_consumer_service)],
) -> ConsumerResponseSchema:
    response = await consumer_service.get_consumer(consumer_id)
    return ConsumerResponseSchema.model_validate(response)


@consumer_router.put(
    "/{consumer_id}",
    response_model=ConsumerResponseSchema,
    summary="Update Consumer",
    responses={
        409: {"model": ErrorResponseSchema, "description": "NIK already registered"},
    },
)
async def update_consumer(
    consumer_id: Annotated[int, Path(gt=0)],
    request: ConsumerRequestSchema,
    consumer_service: Annotated[ConsumerService, Depends(get_consumer_service)],
) -> ConsumerResponseSchema:
    response = await consumer_service.update_consumer(consumer_id, _to_dto(request))
    return ConsumerResponseSchema.model_validate(response)


@consumer_router.delete(
    "/{consumer_id}",
    status_code=204,
    summary="Delete Consumer",
)
async def delete_consumer(
    consumer_id: Annotated[int, Path(gt=0)],
    consumer_service: Annotated[ConsumerService, Depends(get_consumer_service)],
) -> Response:
    await consumer_service.delete_consumer(consumer_id)
    return Response(status_code=204)
