"""
String helpers.

Base conversion of positional notation strings, digits 0-9 then a-f
(case insensitive), into signed 32-bit integers.
"""

from ..core.errors import ConversionOverflowError, InvalidArgumentError, NullArgumentError
from ..core.logging import get_context_logger

logger = get_context_logger(__name__, component="strings")

MIN_SCALE = 2
MAX_SCALE = 16
INT32_BITS = 32
INT32_MAX = 2 ** (INT32_BITS - 1) - 1


def char_to_digit(char: str) -> int:
    """
    Value of a single digit character, or -1 if it is not a digit.

    Accepts 0-9, a-f and A-F.
    """
    if "0" <= char <= "9":
        return ord(char) - ord("0")
    if "a" <= char <= "f":
        return 10 + ord(char) - ord("a")
    if "A" <= char <= "F":
        return 10 + ord(char) - ord("A")
    return -1


def is_binary(text: str) -> bool:
    return all(char in "01" for char in text)


def convert_to_int(text: str, scale: int) -> int:
    """
    Convert a number written in base ``scale`` to a signed 32-bit int.

    Args:
        text: Digits of the number, most significant first
        scale: Base of the notation, from 2 to 16

    Returns:
        The integer value

    Raises:
        NullArgumentError: If text is None or empty
        InvalidArgumentError: If scale is outside [2, 16] or text holds a
            character that is not a digit of that scale
        ConversionOverflowError: If text has 32 or more digits, or the value
            does not fit a signed 32-bit int

    Example:
        >>> convert_to_int("1AeF101", 16)
        28242177
    """
    if text is None or text == "":
        raise NullArgumentError("text")

    if scale < MIN_SCALE or scale > MAX_SCALE:
        logger.debug("Rejected scale", extra_data={"scale": scale})
        raise InvalidArgumentError(
            f"scale should be in range [{MIN_SCALE}; {MAX_SCALE}], got {scale}", argument="scale"
        )

    if len(text) >= INT32_BITS:
        logger.debug("Rejected oversized input", extra_data={"length": len(text), "scale": scale})
        raise ConversionOverflowError(
            f"length of text for scale {scale} should be less than {INT32_BITS}",
            length=len(text),
            scale=scale,
        )

    if scale == 2 and not is_binary(text):
        raise InvalidArgumentError(f"{text!r} isn't a binary number", argument="text")

    result = 0
    for char in text:
        digit = char_to_digit(char)
        if digit < 0 or digit >= scale:
            logger.debug("Rejected digit", extra_data={"char": char, "scale": scale})
            raise InvalidArgumentError(
                f"{char!r} is not a digit in base {scale}", argument="text"
            )
        result = result * scale + digit

    if result > INT32_MAX:
        raise ConversionOverflowError(
            f"{text!r} in base {scale} does not fit a 32-bit integer", value=result, scale=scale
        )

    return result
