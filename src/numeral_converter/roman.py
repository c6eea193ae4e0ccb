import logging

from numeral_converter.constants import DIGIT_VALUES, MAX_VALUE, MIN_VALUE, SYMBOL_LADDER
from numeral_converter.exceptions import (
    EmptyInputError,
    InvalidDigitError,
    MalformedNumeralError,
    NumeralError,
    OutOfRangeError,
)

__all__ = ["decode", "encode", "is_valid"]

logger = logging.getLogger(__name__)
debug = logger.debug


def encode(value: int) -> str:
    """
    Convert an integer to its canonical Roman numeral.

    Args:
        value: integer in the range 1 to 3999

    Returns:
        numeral: upper case Roman numeral, e.g. ``MCMXCIV`` for 1994

    Raises:
        TypeError: value is not an integer
        OutOfRangeError: value is less than 1 or greater than 3999
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected integer, got {type(value).__name__}")

    if value < MIN_VALUE or value > MAX_VALUE:
        raise OutOfRangeError(value)

    roman_num = ""
    for roman_symbol, int_value in SYMBOL_LADDER:
        while value >= int_value:
            roman_num += roman_symbol
            value -= int_value

        if value == 0:
            break

    return roman_num


def decode(text: str, strict: bool = False) -> int:
    """
    Convert a Roman numeral to an integer.

    Lower case digits are accepted. By default any sequence of Roman digits
    decodes, including non-canonical ones such as ``IIII`` or ``VX``.

    Args:
        text: Roman numeral to decode
        strict: reject numerals that :func:`encode` would not produce

    Returns:
        value: the decoded integer

    Raises:
        EmptyInputError: text is empty
        InvalidDigitError: text contains a character that is not a Roman digit
        MalformedNumeralError: ``strict`` is set and text is not canonical
    """
    if len(text) == 0:
        raise EmptyInputError()
    text = "".join(_upper_digit(c) for c in text)

    # Start above every digit so the first one is never subtractive
    previous_digit = DIGIT_VALUES["M"]
    value = 0
    for i, c in enumerate(text):
        digit = DIGIT_VALUES.get(c)
        if digit is None:
            raise InvalidDigitError(c, i, text)
        value += digit

        # Previous digit was added but should have been subtracted
        if previous_digit < digit:
            value -= 2 * previous_digit
        previous_digit = digit

    if strict and not _is_canonical(text, value):
        debug("decode: %s is not canonical (decodes to %d)", text, value)
        raise MalformedNumeralError(text, value)

    return value


def _upper_digit(c: str) -> str:
    # One character per position; "ß" upper-cases to "SS"
    upper = c.upper()
    return upper if len(upper) == 1 else c


def _is_canonical(text: str, value: int) -> bool:
    if value < MIN_VALUE or value > MAX_VALUE:
        return False
    return encode(value) == text


def is_valid(text: str, strict: bool = False) -> bool:
    """Return ``True`` if ``text`` decodes without error."""
    try:
        _ = decode(text, strict=strict)
    except NumeralError:
        return False
    return True
