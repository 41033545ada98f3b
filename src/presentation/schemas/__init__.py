"""Pydantic schemas for API request/response validation."""

from .envelope import ApiResponse, error_body
from .banner import ServiceBannerSchema
from .calculation import (
    EmploymentRecordSchema,
    BenefitResultSchema,
    GratuityBreakdownSchema,
    TierBreakdownSchema,
)
from .configuration import ConfigurationSchema, HealthSchema
from .error import ErrorResponseSchema

__all__ = [
    "ApiResponse",
    "error_body",
    "ServiceBannerSchema",
    "EmploymentRecordSchema",
    "BenefitResultSchema",
    "GratuityBreakdownSchema",
    "TierBreakdownSchema",
    "ConfigurationSchema",
    "HealthSchema",
    "ErrorResponseSchema",
]
