"""
Domain services for the Luhn Validation Server.
"""

from .luhn import InvalidInputError, digit_value, is_valid_luhn

__all__ = ["InvalidInputError", "digit_value", "is_valid_luhn"]
