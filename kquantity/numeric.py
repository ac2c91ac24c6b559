"""
Coerce numeric inputs to Decimal and render Decimals in plain notation.

Quantity arithmetic never touches binary floats: every input is turned into an exact
Decimal first, and every output literal is rendered without an exponent and without
trailing zeros.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from decimal import Decimal, InvalidOperation

# Local ----------------------------------------------------------------------------------------------------------------
from .errors import InvalidFormat
from .units import exact_context


# Methods --------------------------------------------------------------------------------------------------------------

def as_decimal(value: Decimal | int | float | str) -> Decimal:
    """
    Convert a numeric value to a finite Decimal without binary floating point expansion.

    Parameters
    ----------
    value : Decimal | int | float | str
        Decimal and int are taken as is. Float goes through str(), so 0.1 becomes
        Decimal('0.1') rather than its binary expansion. Strings are parsed by Decimal.

    Returns
    -------
    Decimal
        A finite Decimal.

    Raises
    ------
    TypeError
        For bool and unsupported types.
    InvalidFormat
        For unparsable strings and non-finite values (NaN, Infinity).

    Examples
    --------
    >>> as_decimal(0.001)
    Decimal('0.001')
    >>> as_decimal("1.5e3")
    Decimal('1.5E+3')
    """
    # bool is a subclass of int
    if isinstance(value, bool):
        raise TypeError(f"boolean values not supported, got {value}")

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        result = Decimal(str(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value)
        except InvalidOperation as exc:
            raise InvalidFormat(f"Invalid numeric value: {value!r}") from exc
    else:
        raise TypeError(
            f"unsupported numeric type: {type(value).__name__}. "
            f"Expected Decimal, int, float or str"
        )

    if not result.is_finite():
        raise InvalidFormat(f"Non-finite numeric value: {value!r}")
    return result


def plain_string(value: Decimal) -> str:
    """
    Render a Decimal in plain notation with trailing zeros stripped.

    Zero, including negative zero, is rendered as '0'.

    Examples
    --------
    >>> plain_string(Decimal("1.5E+3"))
    '1500'
    >>> plain_string(Decimal("0.00100"))
    '0.001'
    """
    if value.is_zero():
        return "0"
    return format(value.normalize(exact_context), "f")
