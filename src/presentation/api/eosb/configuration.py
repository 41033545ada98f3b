"""API endpoint exposing dropdown values and calculation rules."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from src.application.services import EOSBService
from src.core.dependencies import get_eosb_service
from src.core.rate_limit import api_rate_limit, limiter
from src.presentation.schemas import ApiResponse, ConfigurationSchema, ErrorResponseSchema

configuration_router = APIRouter()


@configuration_router.get(
    "/config",
    response_model=ApiResponse[ConfigurationSchema],
    response_model_exclude_none=True,
    summary="Get Configuration Data",
    description="""
    Retrieve dropdown values and calculation rules for the frontend.

    The rates are the ones the calculator applies, so clients never need
    to hard-code them.
    """,
    responses={
        500: {"model": ErrorResponseSchema, "description": "Internal server error"},
    },
)
@limiter.limit(api_rate_limit)
async def get_configuration(
    request: Request,
    eosb_service: Annotated[EOSBService, Depends(get_eosb_service)],
) -> ApiResponse[ConfigurationSchema]:
    return ApiResponse[ConfigurationSchema](
        success=True,
        data=ConfigurationSchema.model_validate(eosb_service.get_configuration()),
        message="Configuration data retrieved successfully",
    )
