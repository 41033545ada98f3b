"""Pydantic schema for the response envelope shared by every endpoint."""

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, Field

DataT = TypeVar("DataT")


class ApiResponse(BaseModel, Generic[DataT]):
    """
    Envelope wrapping every API response, success or failure.

    Optional fields left as None are dropped from the JSON body.
    """

    success: bool = Field(
        ...,
        description="Whether the request succeeded",
    )
    data: Optional[DataT] = Field(
        None,
        description="Response payload",
    )
    message: Optional[str] = Field(
        None,
        description="Human-readable message",
        examples=["EOSB calculation completed successfully"],
    )
    error: Optional[str] = Field(
        None,
        description="Error category, present on failures",
        examples=["Validation failed"],
    )


def error_body(error: str, message: Optional[str] = None) -> dict:
    """JSON body of a failure envelope."""
    return ApiResponse[None](
        success=False,
        error=error,
        message=message,
    ).model_dump(exclude_none=True)
