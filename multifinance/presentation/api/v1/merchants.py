"""Merchant API endpoints."""

from typing import Annotated, List

from fastapi import APIRouter, Depends, Path, Query, Response

from multifinance.application.dto import MerchantRequest
from multifinance.application.services import MerchantService
from multifinance.core.dependencies import get_merchant_service
from multifinance.presentation.schemas import (
    ErrorResponseSchema,
    MerchantRequestSchema,
    MerchantResponseSchema,
)

merchant_router = APIRouter(
    prefix="/merchants",
    responses={
        400: {"model": ErrorResponseSchema, "description": "Invalid request"},
        404: {"model": ErrorResponseSchema, "description": "Merchant not found"},
    },
)


@merchant_router.post(
    "",
    response_model=MerchantResponseSchema,
    status_code=201,
    summary="Register Merchant",
)
async def create_merchant(
    request: MerchantRequestSchema,
    merchant_service: Annotated[MerchantService, Depends(get_merchant_service)],
) -> MerchantResponseSchema:
    response = await merchant_service.create_merchant(
        MerchantRequest(name=request.name, merchant_type=request.merchant_type)
    )
    return MerchantResponseSchema.model_validate(response)


@merchant_router.get(
    "",
    response_model=List[MerchantResponseSchema],
    summary="List Merchants",
)
async def list_merchants(
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=1, le=100)] = 10,
    merchant_service: Annotated[MerchantService, Depends(get_merchant_service)] = None,
) -> List[MerchantResponseSchema]:
    merchants = await merchant_service.list_merchants(page=page, limit=limit)
    return [MerchantResponseSchema.model_validate(m) for m in merchants]


@merchant_router.get(
    "/{merchant_id}",
    response_model=MerchantResponseSchema,
    summary="Get Merchant",
)
async def get_merchant(
    merchant_id: Annotated[int, Path(gt=0)],
    merchant_service: Annotated[MerchantService, Depends(get_merchant_service)],
) -> MerchantResponseSchema:
    response = await merchant_service.get_merchant(merchant_id)
    return MerchantResponseSchema.model_validate(response)


@merchant_router.put(
    "/{merchant_id}",
    response_model=MerchantResponseSchema,
    summary="Update Merchant",
)
async def update_merchant(
    merchant_id: Annotated[int, Path(gt=0)],
    request: MerchantRequestSchema,
    merchant_service: Annotated[MerchantService, Depends(get_merchant_service)],
) -> MerchantResponseSchema:
    response = await merchant_service.update_merchant(
        merchant_id,
        MerchantRequest(name=request.name, merchant_type=request.merchant_type),
    )
    return MerchantResponseSchema.model_validate(response)


@merchant_router.delete(
    "/{merchant_id}",
    status_code=204,
    summary="Delete Merchant",
)
async def delete_merchant(
    merchant_id: Annotated[int, Path(gt=0)],
    merchant_service: Annotated[MerchantService, Depends(get_merchant_service)],
) -> Response:
    await merchant_service.delete_merchant(merchant_id)
    return Response(status_code=204)
