"""Pydantic schema for API error responses."""

from pydantic import BaseModel, Field


class ErrorResponseSchema(BaseModel):
    """Failure envelope, documented for error status codes."""
    success: bool = Field(
        False,
        description="Always false for errors",
    )
    error: str = Field(
        ...,
        description="Error category",
        examples=["Validation failed"],
    )
    message: str | None = Field(
        None,
        description="Human-readable description of what went wrong",
        examples=["Basic salary must be a positive number, Invalid termination type"],
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "success": False,
                    "error": "Validation failed",
                    "message": "Last working day must be after joining date",
                }
            ]
        }
    }
