"""Pydantic schema for API error responses."""

from pydantic import BaseModel, Field


class ErrorResponseSchema(BaseModel):
    """Standard error response format for all API errors."""
    error: str = Field(
        ...,
        description="Error code",
        examples=["NO_VALID_LOAN"],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
        examples=["No valid loan found for any period!"],
    )
    request_id: str | None = Field(
        None,
        description="Request ID for tracing",
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "error": "INVALID_LOAN_AMOUNT",
                    "message": "Invalid loan amount!",
                    "request_id": "abc123",
                }
            ]
        }
    }
