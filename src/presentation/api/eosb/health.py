"""Health check endpoint for service monitoring."""

from datetime import datetime, timezone

from fastapi import APIRouter, Request

from src import __version__
from src.core.rate_limit import api_rate_limit, limiter
from src.presentation.schemas import ApiResponse, HealthSchema

health_router = APIRouter()


@health_router.get(
    "/health",
    response_model=ApiResponse[HealthSchema],
    response_model_exclude_none=True,
    summary="Health Check",
    description="Check if the API service is running and healthy.",
)
@limiter.limit(api_rate_limit)
async def health_check(request: Request) -> ApiResponse[HealthSchema]:
    timestamp = datetime.now(timezone.utc).isoformat(timespec="milliseconds")
    return ApiResponse[HealthSchema](
        success=True,
        data=HealthSchema(
            status="OK",
            timestamp=timestamp.replace("+00:00", "Z"),
            version=__version__,
        ),
        message="Service is healthy",
    )
