"""
Data models for the Luhn Validation Server.

Defines Pydantic models for request decoding and response encoding.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ============================================================================
# Request Models (API Input)
# ============================================================================

class CardNumberRequest(BaseModel):
    """Request body carrying the card number to check."""
    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={
            "example": {
                "number": "4003600000000014"
            }
        }
    )

    # Absent keys decode to an empty number rather than failing
    number: str = Field(default="", description="Card number as a string of digits")

    @field_validator("number", mode="before")
    @classmethod
    def null_number_is_empty(cls, v: Any) -> Any:
        """Treat an explicit null number like an absent one."""
        return "" if v is None else v


# ============================================================================
# Response Models (API Output)
# ============================================================================

class ValidationResponse(BaseModel):
    """Response for a card number check."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "valid": True
            }
        }
    )

    valid: bool = Field(..., description="True if the number passes the Luhn checksum")


__all__ = ["CardNumberRequest", "ValidationResponse"]
