"""
Auto-scaled SI display of numerical amounts.

Picks the largest SI suffix from n, u, m, '', k, M, G, T whose threshold the value reaches
and rounds the scaled value to three fractional digits, half-up.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from decimal import Decimal

# Local ----------------------------------------------------------------------------------------------------------------
from .numeric import as_decimal, plain_string
from .quantity import Quantity
from .units import decimal_multipliers, exact_context, quantity_conf, si_thresholds, si_units

_ONE = Decimal(1)
_MILLI = decimal_multipliers["m"]
_ONE_AND_A_HALF = Decimal("1.5")


# Methods --------------------------------------------------------------------------------------------------------------

def si_scaled(value: Decimal | int | float | str) -> Quantity:
    """
    Express a numerical amount with an automatically chosen SI suffix.

    Two boundary cases are fixed:
        - values in [0.001, 1) display as exactly '1m';
        - at the base (no suffix) tier, a scaled value of 1.5 displays as '1500m'.

    Values below every threshold (zero, negatives, anything under 1n) are returned as
    plain numbers with an empty suffix.

    Examples:
        >>> str(si_scaled(Decimal("2500000")))
        '2.5M'
        >>> str(si_scaled(0.001))
        '1m'
        >>> str(si_scaled("1.5"))
        '1500m'
    """
    value = as_decimal(value)

    if _MILLI <= value < _ONE:
        return Quantity("1", "m")

    quantum = _ONE.scaleb(-quantity_conf.SCALE_DIGITS)
    for unit, threshold in zip(reversed(si_units), reversed(si_thresholds)):
        if value < threshold:
            continue

        # Thresholds are powers of ten, scaling is exact
        scaled = value.scaleb(-threshold.adjusted(), exact_context)
        scaled = scaled.quantize(quantum, rounding=quantity_conf.ROUNDING, context=exact_context)

        if unit == "" and scaled == _ONE_AND_A_HALF:
            return Quantity("1500", "m")
        return Quantity(plain_string(scaled), unit)

    return Quantity(plain_string(value), "")
