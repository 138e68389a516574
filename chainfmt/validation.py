"""
Input validation for the formatters.

Every formatter runs its input through ``coerce_number`` before formatting,
so invalid values are detected up front instead of through an exception
raised halfway through rendering.
"""

import math
from decimal import Decimal
from typing import Any, Optional

from .constants import MAX_FRACTION_DIGITS


def coerce_number(value: Any) -> Optional[float]:
    """
    Convert a number-like value to a float.

    Accepts ints, floats, Decimals, booleans and numeric strings (surrounding
    whitespace allowed, an empty string counts as zero). Thousands separators,
    digit underscores and magnitude suffixes are *not* accepted here; use
    ``parse_big_number`` for human shorthand.

    Args:
        value: Any input.

    Returns:
        The float value (may be NaN or infinite), or None when the value is
        not number-like.
    """
    if value is None:
        return None
    if isinstance(value, (bool, int, float, Decimal)):
        try:
            return float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        if "_" in text:
            return None
        try:
            return float(text)
        except ValueError:
            return None
    return None


def is_finite_number(value: Optional[float]) -> bool:
    """Return True for a coerced value that can be formatted as digits."""
    return value is not None and math.isfinite(value)


def to_decimal(value: float) -> Decimal:
    """Exact decimal form of the shortest repr of ``value``."""
    return Decimal(repr(float(value)))


def coerce_places(value: Any) -> Optional[int]:
    """
    Validate a decimal-places argument.

    Returns the count clamped to 0..MAX_FRACTION_DIGITS, or None when it is
    not an integer-like value.
    """
    if isinstance(value, bool):
        return None
    try:
        places = int(value)
    except (TypeError, ValueError, OverflowError):
        return None
    return min(max(places, 0), MAX_FRACTION_DIGITS)
