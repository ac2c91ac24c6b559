#
# KQuantity Unit Table
#

# Standard library -----------------------------------------------------------------------------------------------------
import logging
import re
from decimal import Decimal, Context, DecimalException, ROUND_HALF_UP, MAX_PREC, MAX_EMAX, MIN_EMIN
from types import MappingProxyType

# Local ----------------------------------------------------------------------------------------------------------------
from .errors import InvalidFormat
from .grammar import contains_digit

logger = logging.getLogger(__name__)


# @formatter:off

class QuantityConf:
    DIVISION_PRECISION = 16
    QUOTIENT_EXTRA_DIGITS = 60
    ROUNDING = ROUND_HALF_UP
    SCALE_DIGITS = 3


quantity_conf = QuantityConf()

binary_multipliers = MappingProxyType({
    "Ki": Decimal(2**10), "Mi": Decimal(2**20), "Gi": Decimal(2**30),
    "Ti": Decimal(2**40), "Pi": Decimal(2**50), "Ei": Decimal(2**60),
})

decimal_multipliers = MappingProxyType({
    "n": Decimal(1).scaleb(-9), "u": Decimal(1).scaleb(-6), "m": Decimal(1).scaleb(-3),
    "": Decimal(1),
    "k": Decimal(10**3), "M": Decimal(10**6), "G": Decimal(10**9),
    "T": Decimal(10**12), "P": Decimal(10**15), "E": Decimal(10**18),
})

si_units = ("n", "u", "m", "", "k", "M", "G", "T")
si_thresholds = tuple(decimal_multipliers[unit] for unit in si_units)

# Exact arithmetic: products and sums of finite decimals never round here
exact_context = Context(prec=MAX_PREC, rounding=ROUND_HALF_UP, Emax=MAX_EMAX, Emin=MIN_EMIN)

# @formatter:on

_EXPONENT_RE = re.compile(r"[+-]?[0-9]+")


# Methods --------------------------------------------------------------------------------------------------------------

def division_context(value: Decimal) -> Context:
    """
    Decimal context wide enough to hold the exact quotient of value by any unit multiplier.

    Multipliers are 2**k (k <= 60) or 10**n, so the quotient terminates and needs at most
    the digits of value plus the 42 digits of 5**60. Precision never drops below
    QuantityConf.DIVISION_PRECISION.
    """
    prec = max(QuantityConf.DIVISION_PRECISION, len(value.as_tuple().digits) + QuantityConf.QUOTIENT_EXTRA_DIGITS)
    return Context(prec=prec, rounding=QuantityConf.ROUNDING, Emax=MAX_EMAX, Emin=MIN_EMIN)


def multiplier_for(suffix: str) -> Decimal:
    """
    Return the exact multiplicative factor of a unit suffix.

    Resolution order:
        1. A suffix longer than one character that contains a digit is a decimal exponent
           token, e.g. 'e9', 'E-6', 'e+3'; the factor is 10**n.
        2. Binary ('Ki'..'Ei') and decimal SI ('n'..'E') tokens, or '' for 1.
        3. Anything else is rejected.

    Raises:
        InvalidFormat: If the suffix is not a recognized unit token.

    Examples:
        >>> multiplier_for("Ki")
        Decimal('1024')
        >>> multiplier_for("e-3")
        Decimal('0.001')
    """
    if contains_digit(suffix) and len(suffix) > 1:
        exponent_str = suffix[1:]
        if not _EXPONENT_RE.fullmatch(exponent_str):
            logger.debug("rejected exponent suffix %r", suffix)
            raise InvalidFormat(f"Invalid quantity exponent: {suffix!r}")
        try:
            return Decimal(1).scaleb(int(exponent_str), exact_context)
        except (DecimalException, ValueError) as exc:
            raise InvalidFormat(f"Quantity exponent out of range: {suffix!r}") from exc

    if suffix in binary_multipliers:
        return binary_multipliers[suffix]
    if suffix in decimal_multipliers:
        return decimal_multipliers[suffix]

    logger.debug("rejected unit suffix %r", suffix)
    raise InvalidFormat(f"Invalid quantity format: {suffix!r}")


# Module Sanity Checks -------------------------------------------------------------------------------------------------

# Ensure the SI display tables are synchronized and ascending.
if len(si_units) != len(si_thresholds) or list(si_thresholds) != sorted(si_thresholds):
    raise AssertionError(
        "Configuration Error: si_units and si_thresholds must be aligned and ascending."
    )
