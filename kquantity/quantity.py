#
# KQuantity Resource Quantity
#

# Standard library -----------------------------------------------------------------------------------------------------
import functools
import logging
from dataclasses import dataclass, field
from decimal import Decimal, DecimalException, ROUND_DOWN
from typing import Any, Callable, Self

# Local ----------------------------------------------------------------------------------------------------------------
from .errors import InvalidFormat
from .grammar import is_plain_literal, split_quantity
from .numeric import as_decimal, plain_string
from .units import division_context, exact_context, multiplier_for

logger = logging.getLogger(__name__)


# Classes --------------------------------------------------------------------------------------------------------------

@functools.total_ordering
@dataclass(eq=False)
class Quantity:
    """
    Fixed-point resource quantity such as '500m', '2Gi', '1.5k' or '4e9'.

    A quantity is a numeric literal (amount) paired with a unit suffix (format). Equality,
    ordering and hashing use the numerical amount, so Quantity("1", "Ki") == Quantity("1024").
    Arithmetic is exact and always returns a new Quantity.

    Construction:
        Quantity("2Gi")       - one argument, the string is parsed into ('2', 'Gi')
        Quantity("2", "Gi")   - amount and format stored as given
        Quantity()            - empty, for document binders that fill fields later

    The additional_properties mapping carries unknown document fields verbatim. It never
    takes part in arithmetic, comparison or hashing.
    """

    amount: str | None = None
    format: str | None = None
    additional_properties: dict[str, Any] = field(default_factory=dict, repr=False)

    def __post_init__(self):
        if self.format is not None:
            return
        if self.amount is None:
            self.format = ""
        else:
            self.amount, self.format = split_quantity(self.amount)

    @classmethod
    def parse(cls, value: str) -> Self:
        """
        Parse a quantity string into a Quantity.

        Raises:
            InvalidFormat: If the value is empty or carries a malformed exponent suffix.

        Examples:
            >>> Quantity.parse("129e-6")
            Quantity(amount='129', format='e-6')
        """
        amount, fmt = split_quantity(value)
        return cls(amount, fmt)

    @classmethod
    def from_numerical_amount(cls, value: Decimal | int | float | str, desired_format: str | None = None) -> Self:
        """
        Create a Quantity from a numerical amount expressed in the desired format.

        With an empty format the amount is rendered as is. Otherwise it is divided by the
        format multiplier; every multiplier is a power of two or ten, so the quotient is
        exact. Trailing zeros are stripped in both cases.

        Examples:
            >>> Quantity.from_numerical_amount(Decimal("3221225472"), "Gi")
            Quantity(amount='3', format='Gi')
            >>> Quantity.from_numerical_amount(Decimal("1500.000"))
            Quantity(amount='1500', format='')
        """
        value = as_decimal(value)
        if not desired_format:
            return cls(plain_string(value))

        scaled = division_context(value).divide(value, multiplier_for(desired_format))
        logger.debug("scaled %s to %s%s", value, scaled, desired_format)
        return cls(plain_string(scaled), desired_format)

    @property
    def numerical_amount(self) -> Decimal:
        """
        The amount with the format multiplier applied: bytes for memory, cores for CPU.

        Raises:
            InvalidFormat: If the amount is empty or the format is not a recognized unit.
        """
        return amount_in_bytes(self)

    def set_additional_property(self, name: str, value: Any) -> None:
        self.additional_properties[name] = value

    # ----- Arithmetic -----

    def add(self, other: "Quantity") -> "Quantity":
        """
        Add another quantity. The result keeps this quantity's format, unless this quantity
        or the sum is zero, in which case the format of other is used.
        """
        return self._combine(other, exact_context.add)

    def subtract(self, other: "Quantity") -> "Quantity":
        """
        Subtract another quantity. The result keeps this quantity's format, unless this
        quantity or the difference is zero, in which case the format of other is used.
        """
        return self._combine(other, exact_context.subtract)

    def multiply(self, multiplicand: int) -> "Quantity":
        """Multiply by an integer scalar, keeping this quantity's format."""
        if isinstance(multiplicand, bool) or not isinstance(multiplicand, int):
            raise TypeError(f"multiplicand must be an int, got {type(multiplicand).__name__}")

        amount = exact_context.multiply(self.numerical_amount, Decimal(multiplicand))
        return Quantity.from_numerical_amount(amount, self.format)

    def _combine(self, other: "Quantity", func: Callable[[Decimal, Decimal], Decimal]) -> "Quantity":
        if not isinstance(other, Quantity):
            raise TypeError(f"Quantity expected, got {type(other).__name__}")

        base = self.numerical_amount
        amount = func(base, other.numerical_amount)
        # Zero has no scale, use the other operand's format
        fmt = other.format if base.is_zero() or amount.is_zero() else self.format
        return Quantity.from_numerical_amount(amount, fmt)

    def __add__(self, other):
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return self.multiply(other)

    __rmul__ = __mul__

    # ----- Ordering and equality -----

    def compare_to(self, other: "Quantity") -> int:
        """Three-way comparison of numerical amounts: -1, 0 or 1."""
        return compare(self, other)

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, Quantity):
            return NotImplemented
        return compare(self, other) == 0

    def __lt__(self, other):
        if not isinstance(other, Quantity):
            return NotImplemented
        return compare(self, other) < 0

    def __hash__(self):
        # Integral part only, so equal quantities in different formats hash alike.
        # Decimal hashes integral values like int without expanding the digits.
        return hash(self.numerical_amount.to_integral_value(rounding=ROUND_DOWN, context=exact_context))

    # ----- Display -----

    def to_human_readable(self) -> "Quantity":
        """Re-express the numerical amount with an automatically chosen SI suffix."""
        # display imports Quantity at module level
        from .display import si_scaled

        return si_scaled(self.numerical_amount)

    def __str__(self):
        return f"{self.amount or ''}{self.format or ''}"


# Methods --------------------------------------------------------------------------------------------------------------

def parse(value: str) -> Quantity:
    """Parse a quantity string, see Quantity.parse()."""
    return Quantity.parse(value)


def amount_in_bytes(quantity: Quantity) -> Decimal:
    """
    Resolve a quantity to its numerical amount: literal x format multiplier, computed exactly.

    The amount and format are concatenated and parsed again, so a quantity built
    from unsplit parts such as Quantity("5k", "") still resolves correctly.

    Raises:
        InvalidFormat: If the amount is empty, the literal is not a plain decimal, or
            the format is not a recognized unit.

    Examples:
        >>> amount_in_bytes(Quantity("4e9"))
        Decimal('4E+9')
        >>> amount_in_bytes(Quantity(".5"))
        Decimal('0.5')
    """
    if quantity.amount is None:
        value = ""
    else:
        value = quantity.amount + (quantity.format or "")

    if not value:
        raise InvalidFormat("Invalid quantity value: amount and format are empty")

    if value.startswith("."):
        value = "0" + value

    literal, suffix = split_quantity(value)
    if not is_plain_literal(literal):
        raise InvalidFormat(f"Invalid quantity amount: {literal!r} in {value!r}")

    multiplier = multiplier_for(suffix)
    try:
        return exact_context.multiply(Decimal(literal), multiplier)
    except DecimalException as exc:
        raise InvalidFormat(f"Quantity out of range: {value!r}") from exc


def compare(x: Quantity, y: Quantity) -> int:
    """
    Compare two quantities by numerical amount, independent of their formats.

    Returns:
        -1, 0 or 1 as x is less than, equal to, or greater than y.
    """
    a, b = x.numerical_amount, y.numerical_amount
    return (a > b) - (a < b)
