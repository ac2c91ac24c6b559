"""
KQuantity - fixed-point resource quantities such as '500m', '2Gi', '1.5k' or '4e9'.
"""

from .display import si_scaled
from .errors import InvalidFormat
from .quantity import Quantity, amount_in_bytes, compare, parse
from .units import multiplier_for, quantity_conf

__all__ = [
    "InvalidFormat",
    "Quantity",
    "amount_in_bytes",
    "compare",
    "multiplier_for",
    "parse",
    "quantity_conf",
    "si_scaled",
]
