"""
API routes for the Luhn Validation Server.

Defines the single card-number validation endpoint.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Request, Response, status
from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError
from starlette.requests import ClientDisconnect
import structlog

from .config import Settings, get_settings
from .errors import (
    InvalidCardNumberError,
    InvalidPayloadError,
    ResponseEncodingError,
)
from .models import CardNumberRequest, ValidationResponse
from .services.luhn import InvalidInputError, is_valid_luhn

logger = structlog.get_logger(__name__)

router = APIRouter()

# A null body decodes to None and is treated as an empty payload
_payload_adapter = TypeAdapter(Optional[CardNumberRequest])


# ============================================================================
# Helper Functions
# ============================================================================

async def get_card_payload(request: Request) -> CardNumberRequest:
    """
    Read the request body and decode it into a card number payload.

    The Content-Type header is not enforced.

    Args:
        request: FastAPI request object

    Returns:
        Decoded CardNumberRequest

    Raises:
        InvalidPayloadError if the body is unreadable or not a valid payload
    """
    try:
        body = await request.body()
    except ClientDisconnect as e:
        logger.warning("request_body_unreadable", error=str(e))
        raise InvalidPayloadError() from e

    try:
        payload = _payload_adapter.validate_json(body)
    except ValidationError as e:
        logger.info(
            "invalid_json_payload",
            errors=[error["type"] for error in e.errors()]
        )
        raise InvalidPayloadError() from e

    return payload if payload is not None else CardNumberRequest()


def encode_validation_result(result: ValidationResponse) -> bytes:
    """
    Serialize a validation result to JSON.

    Raises:
        ResponseEncodingError if serialization fails
    """
    try:
        return result.model_dump_json().encode("utf-8")
    except (PydanticSerializationError, ValueError, TypeError) as e:
        logger.error("response_encoding_failed", error=str(e))
        raise ResponseEncodingError() from e


# ============================================================================
# Card Validation Endpoint
# ============================================================================

@router.post(
    "/",
    response_model=ValidationResponse,
    responses={
        200: {"description": "Checksum evaluated (valid or not)"},
        400: {"description": "Invalid JSON payload or non-digit card number"},
        405: {"description": "Invalid request method"},
        500: {"description": "Error creating response"}
    },
    tags=["Validation"],
    summary="Validate a card number",
    description="Check a card number against the Luhn checksum."
)
async def validate_card_number(
    payload: CardNumberRequest = Depends(get_card_payload),
    settings: Settings = Depends(get_settings)
) -> Response:
    """
    Validate a card number.

    A failed checksum is a successful response with valid=false.

    Args:
        payload: Decoded request body
        settings: Application settings

    Returns:
        JSON response with the validation result

    Raises:
        InvalidCardNumberError if strict mode rejects the input
        ResponseEncodingError if the result cannot be serialized
    """
    try:
        valid = is_valid_luhn(payload.number, strict=settings.strict_digits)
    except InvalidInputError as e:
        logger.info(
            "card_number_rejected",
            length=len(payload.number),
            position=e.position
        )
        raise InvalidCardNumberError() from e

    logger.info(
        "card_number_checked",
        length=len(payload.number),
        valid=valid
    )

    content = encode_validation_result(ValidationResponse(valid=valid))

    return Response(
        content=content,
        status_code=status.HTTP_200_OK,
        media_type="application/json"
    )


# Export router
__all__ = ["router", "get_card_payload", "encode_validation_result"]
