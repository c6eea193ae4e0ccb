from numeral_converter.constants import MAX_VALUE, MIN_VALUE

__all__ = [
    "EmptyInputError",
    "InvalidDigitError",
    "MalformedNumeralError",
    "NumeralError",
    "OutOfRangeError",
]


class NumeralError(Exception):
    """Base class for other exceptions."""


class OutOfRangeError(NumeralError, ValueError):
    """Raised when encoding a number that has no Roman numeral."""

    def __init__(self, value: int):
        self.value = value
        super().__init__(
            f"Number out of range for Roman numerals (must be {MIN_VALUE} to {MAX_VALUE})"
        )


class EmptyInputError(NumeralError, ValueError):
    """Raised when decoding an empty string."""

    def __init__(self):
        super().__init__("Empty string is not a valid Roman numeral")


class InvalidDigitError(NumeralError, ValueError):
    """
    Raised when a numeral contains a character that is not a Roman digit.

    Attributes:
        char: the offending character
        position: zero-based index of ``char`` in ``source``
        source: the numeral being decoded, in upper case
    """

    def __init__(self, char: str, position: int, source: str):
        self.char = char
        self.position = position
        self.source = source
        super().__init__(f"Invalid Roman digit {char!r} (position {position} in {source!r})")


class MalformedNumeralError(NumeralError, ValueError):
    """Raised by strict decoding for numerals that are not in canonical form."""

    def __init__(self, source: str, value: int):
        self.source = source
        self.value = value
        super().__init__(f"Malformed Roman numeral {source!r} (decodes to {value})")
