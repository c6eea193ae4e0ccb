from types import MappingProxyType

__all__ = [
    "DIGIT_VALUES",
    "MAX_VALUE",
    "MIN_VALUE",
    "SYMBOL_LADDER",
]

MIN_VALUE = 1
MAX_VALUE = 3999

# Single Roman digits; used when decoding
DIGIT_VALUES = MappingProxyType(
    {
        "I": 1,
        "V": 5,
        "X": 10,
        "L": 50,
        "C": 100,
        "D": 500,
        "M": 1000,
    }
)

# Greedy encoding order; values must strictly descend
SYMBOL_LADDER = (
    ("M", 1000),
    ("CM", 900),
    ("D", 500),
    ("CD", 400),
    ("C", 100),
    ("XC", 90),
    ("L", 50),
    ("XL", 40),
    ("X", 10),
    ("IX", 9),
    ("V", 5),
    ("IV", 4),
    ("I", 1),
)
