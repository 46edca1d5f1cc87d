"""
HTTP-facing errors for the Luhn Validation Server.

Every error response is a short plain-text message; the exception's
``detail`` is the exact body text.
"""

from typing import Dict, Optional

from fastapi import HTTPException, status


class PlainTextHTTPError(HTTPException):
    """
    Base exception for errors rendered as plain-text responses.
    """

    message = "Internal server error"
    status_code_default = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, headers: Optional[Dict[str, str]] = None):
        super().__init__(
            status_code=self.status_code_default,
            detail=self.message,
            headers=headers
        )


class InvalidPayloadError(PlainTextHTTPError):
    """Request body could not be decoded into a card number payload."""
    message = "Invalid JSON payload"
    status_code_default = status.HTTP_400_BAD_REQUEST


class InvalidCardNumberError(PlainTextHTTPError):
    """Card number contains characters other than decimal digits."""
    message = "Invalid card number"
    status_code_default = status.HTTP_400_BAD_REQUEST


class ResponseEncodingError(PlainTextHTTPError):
    """Validation result could not be serialized."""
    message = "Error creating response"
    status_code_default = status.HTTP_500_INTERNAL_SERVER_ERROR


METHOD_NOT_ALLOWED_MESSAGE = "Invalid request method"
INTERNAL_ERROR_MESSAGE = PlainTextHTTPError.message


__all__ = [
    "PlainTextHTTPError",
    "InvalidPayloadError",
    "InvalidCardNumberError",
    "ResponseEncodingError",
    "METHOD_NOT_ALLOWED_MESSAGE",
    "INTERNAL_ERROR_MESSAGE",
]
