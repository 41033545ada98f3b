"""EOSB calculation API endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from src.application.services import EOSBService
from src.core.dependencies import get_eosb_service
from src.core.rate_limit import api_rate_limit, limiter
from src.presentation.schemas import (
    ApiResponse,
    BenefitResultSchema,
    EmploymentRecordSchema,
    ErrorResponseSchema,
)

calculation_router = APIRouter(
    responses={
        400: {"model": ErrorResponseSchema, "description": "Validation error"},
        429: {"model": ErrorResponseSchema, "description": "Rate limit exceeded"},
        500: {"model": ErrorResponseSchema, "description": "Internal server error"},
    },
)


@calculation_router.post(
    "/calculate",
    response_model=ApiResponse[BenefitResultSchema],
    response_model_exclude_none=True,
    status_code=200,
    summary="Calculate End of Service Benefits (EOSB)",
    description="""
    Calculate EOSB according to UAE Labour Law Article 132:
    **Gratuity = (Monthly Salary / 30) x Eligible Days**

    ### Calculation Rules
    - **First 5 years**: 21 days per year
    - **After 5 years**: 30 days per year
    - **Minimum service**: 1 year (365 days)

    ### Resignation Penalties (Unlimited Contracts Only)
    - **< 1 year**: No gratuity
    - **1-3 years**: 1/3 of calculated gratuity
    - **3-5 years**: 2/3 of calculated gratuity
    - **5+ years**: Full gratuity
    """,
    responses={
        200: {"description": "EOSB calculation completed successfully"},
    },
)
@limiter.limit(api_rate_limit)
async def calculate_eosb(
    request: Request,
    payload: EmploymentRecordSchema,
    eosb_service: Annotated[EOSBService, Depends(get_eosb_service)],
) -> ApiResponse[BenefitResultSchema]:
    """
    Calculate the end-of-service benefit for one employee.

    Ineligible employees still get a 200 with isEligible=false and a reason.
    """
    result = eosb_service.calculate(payload.to_record())

    return ApiResponse[BenefitResultSchema](
        success=True,
        data=BenefitResultSchema.model_validate(result.to_dict()),
        message="EOSB calculation completed successfully",
    )
