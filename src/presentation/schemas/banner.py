"""Pydantic schema for the service banner at GET /."""

from typing import Dict, List

from pydantic import BaseModel, Field


class ServiceBannerSchema(BaseModel):
    """
    Banner describing the service.

    Unlike the API envelope, the banner fields sit at the top level next
    to success and message.
    """

    success: bool = True
    message: str = Field(..., examples=["UAE EOSB Calculator API"])
    version: str = Field(..., examples=["1.0.0"])
    documentation: Dict[str, str] = Field(
        ...,
        description="Swagger UI and OpenAPI document paths",
    )
    endpoints: Dict[str, str] = Field(
        ...,
        description="API routes by name",
    )
    features: List[str] = Field(
        default_factory=list,
        description="What the calculator covers",
    )
