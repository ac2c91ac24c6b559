"""
Split quantity strings into a numeric literal and a unit suffix.

The grammar is positional: the first unit-signal character starts the suffix, and exponent
markers ('e', 'E') are signal characters like any SI prefix. So '4e9' splits into ('4', 'e9')
and '2Gi' into ('2', 'Gi'). Suffix validity beyond the trailing-letter check is left to the
unit table.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import re

# Local ----------------------------------------------------------------------------------------------------------------
from .errors import InvalidFormat

# Unit-signal characters
_UNIT_CHARS = frozenset("eEinumkKMGTP")

_LITERAL_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")


# Methods --------------------------------------------------------------------------------------------------------------

def contains_digit(value: str) -> bool:
    """True if the value contains at least one digit."""
    return any(ch.isdigit() for ch in value)


def index_of_unit(value: str) -> int:
    """
    Return the index of the first unit-signal character, or len(value) if there is none.

    Examples:
        >>> index_of_unit("500m")
        3
        >>> index_of_unit("1000")
        4
    """
    for idx, ch in enumerate(value):
        if ch in _UNIT_CHARS:
            return idx
    return len(value)


def split_quantity(value: str | None) -> tuple[str, str]:
    """
    Split a quantity string into (literal, suffix).

    Raises:
        InvalidFormat: If the value is None or empty, or the suffix contains digits
            but ends with a letter (e.g. '4e9x').
        TypeError: If the value is not a string.

    Examples:
        >>> split_quantity("129e-6")
        ('129', 'e-6')
        >>> split_quantity(".5")
        ('.5', '')
    """
    if value is None:
        raise InvalidFormat("Invalid quantity string: None")
    if not isinstance(value, str):
        raise TypeError(f"Quantity string must be a str, got {type(value).__name__}")
    if not value:
        raise InvalidFormat("Invalid quantity string: ''")

    idx = index_of_unit(value)
    literal, suffix = value[:idx], value[idx:]

    if contains_digit(suffix) and suffix[-1].isalpha():
        raise InvalidFormat(f"Invalid quantity string: {value!r}")

    return literal, suffix


def is_plain_literal(literal: str) -> bool:
    """
    True if the literal is a plain decimal number: optional sign, digits, optional fraction.

    Leading-dot literals like '.5' are accepted; exponents, whitespace, underscores and
    special values ('NaN', 'Infinity') are not.
    """
    return _LITERAL_RE.fullmatch(literal) is not None
