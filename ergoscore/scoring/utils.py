"""Shared numeric helpers for the scoring functions.

Table lookups go through ``clamp_index`` and ``lookup`` so every method
bounds its indices the same way. Rounding goes through Decimal with
ROUND_HALF_UP so reported multipliers don't drift with float repr.
"""
import math
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Optional, Sequence


def to_decimal(value: float, places: int = 2) -> Decimal:
    """Convert float to Decimal with explicit precision and ROUND_HALF_UP rounding.

    Args:
        value: Numeric value to convert.
        places: Number of decimal places to quantize to.

    Returns:
        Decimal with the specified precision.
    """
    if isinstance(value, Decimal):
        return value.quantize(Decimal(10) ** -places, rounding=ROUND_HALF_UP)
    return Decimal(str(value)).quantize(
        Decimal(10) ** -places,
        rounding=ROUND_HALF_UP,
    )


def round_half_up(value: float, places: int = 2) -> float:
    """Round to ``places`` decimals; non-finite values become 0.0."""
    if not math.isfinite(value):
        return 0.0
    return float(to_decimal(value, places))


def clamp(value, min_val, max_val):
    """Clamp a value to [min_val, max_val]."""
    return max(min_val, min(max_val, value))


def clamp_index(value: float, upper: int) -> int:
    """Floor ``value`` and clamp it to a valid table index in [0, upper]."""
    return clamp(math.floor(value), 0, upper)


def lookup(table: Sequence[Any], *indices: int) -> Optional[Any]:
    """Walk nested sequences by index.

    Returns None instead of raising when an index falls outside its row,
    which only happens if a table is malformed.
    """
    node: Any = table
    for index in indices:
        if not 0 <= index < len(node):
            return None
        node = node[index]
    return node
