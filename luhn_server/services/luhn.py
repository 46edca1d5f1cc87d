"""
Luhn checksum validation for card numbers.

Implements the mod-10 check used by payment card numbers:
- Walk the digits from right to left
- Double every second digit, subtracting 9 when the result exceeds 9
- The number is valid when the total is a multiple of 10
"""

_ZERO = ord("0")


class InvalidInputError(ValueError):
    """
    Raised when a card number contains a character outside '0'-'9'.
    """

    def __init__(self, character: str, position: int):
        """
        Initialize error.

        Args:
            character: Offending character
            position: Index of the character in the input string
        """
        self.character = character
        self.position = position
        super().__init__(
            f"Non-digit character {character!r} at position {position}"
        )


def digit_value(character: str, position: int) -> int:
    """
    Convert a single digit character to its 0-9 value.

    Args:
        character: One character of the card number
        position: Index of the character, reported on failure

    Returns:
        Numeric value of the digit

    Raises:
        InvalidInputError if the character is not a decimal digit
    """
    if not "0" <= character <= "9":
        raise InvalidInputError(character, position)
    return ord(character) - _ZERO


def is_valid_luhn(card_number: str, strict: bool = True) -> bool:
    """
    Check a card number against the Luhn checksum.

    An empty string sums to 0 and is therefore reported valid.

    Args:
        card_number: String of decimal digits
        strict: Reject non-digit characters. When False, the UTF-8 bytes of
            the input are walked instead and each byte's offset from '0'
            is taken unchecked, wrapping modulo 256.

    Returns:
        True if the checksum holds, False otherwise

    Raises:
        InvalidInputError in strict mode when a non-digit is found
    """
    if strict:
        digits = (
            digit_value(card_number[position], position)
            for position in range(len(card_number) - 1, -1, -1)
        )
    else:
        raw = card_number.encode("utf-8", "surrogatepass")
        digits = ((byte - _ZERO) & 0xFF for byte in reversed(raw))

    total = 0
    double_this_digit = False

    for digit in digits:
        if double_this_digit:
            digit *= 2
            if digit > 9:
                digit -= 9

        total += digit
        double_this_digit = not double_this_digit

    return total % 10 == 0


__all__ = ["InvalidInputError", "digit_value", "is_valid_luhn"]
