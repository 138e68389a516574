"""
Number formatting utilities.

Every formatter here validates its input first and falls back to a fixed
string shape instead of raising, so display code can call them on anything.
"""

import math
import re
from typing import Any

from .config import settings
from .constants import MAGNITUDE_TIERS
from .locale_format import (
    COMPACT_FORMAT,
    TWO_DECIMAL_FORMAT,
    USD_FORMAT,
    NumberFormat,
    fixed_format,
    round_half_up,
)
from .validation import coerce_number, coerce_places, is_finite_number, to_decimal

_DIGIT_GROUPS = re.compile(r"\B(?=(\d{3})+(?!\d))")
_LEADING_INTEGER = re.compile(r"^([+-]?)(\d+)(.*)$", re.DOTALL)


def _to_fixed(value: float, precision: int) -> str:
    rounded = round_half_up(to_decimal(value), precision)
    return format(rounded, f".{precision}f")


def format_big_number(number: Any, precision: int = 1) -> str:
    """
    Abbreviate a number with a k/M/B/T suffix.

    Args:
        number: Number or numeric string.
        precision: Decimal places kept after scaling.

    Returns:
        str: e.g. "1.5k", "2.5M", "-1.2k", "999.0"; "0" for missing or
        non-numeric input.
    """
    value = coerce_number(number)
    if not is_finite_number(value):
        return "0"

    precision = coerce_places(precision)
    if precision is None:
        return "0"
    sign = "-" if math.copysign(1.0, value) < 0 else ""
    magnitude = abs(value)

    for threshold, suffix in MAGNITUDE_TIERS:
        if magnitude >= threshold:
            return f"{sign}{_to_fixed(magnitude / threshold, precision)}{suffix}"
    return f"{sign}{_to_fixed(magnitude, precision)}"


def format_compact(value: Any, fmt: NumberFormat = COMPACT_FORMAT) -> Any:
    """
    Format a number in compact notation (e.g., 1.2K, 34M).

    Returns the raw value untouched if it is not number-like.
    """
    if value is None:
        return fmt.format(0.0)
    number = coerce_number(value)
    if number is None:
        return value
    return fmt.format(number)


def format_number(value: Any, decimals: int = 2, grouping: bool = True) -> str:
    """
    Format a number with a fixed number of decimals.

    Values strictly between 0 and 0.01 (in absolute terms) switch to four
    decimals so they do not collapse to "0.00".

    Args:
        value: Number or numeric string.
        decimals: Decimal places.
        grouping: Use thousands separators.

    Returns:
        str: e.g. "1,234.50"; "0.00" for None, str(value) when not numeric.
    """
    if value is None:
        return "0.00"
    number = coerce_number(value)
    if not is_finite_number(number):
        return str(value)

    if 0 < abs(number) < 0.01:
        decimals = settings.small_value_decimals
    places = coerce_places(decimals)
    if places is None:
        return str(value)
    return fixed_format(places, bool(grouping)).format(number)


def format_currency(amount: Any, fmt: NumberFormat = USD_FORMAT) -> str:
    """
    Format an amount as US dollars.

    Examples:
        1234.5 -> "$1,234.50"
        None   -> "$0.00"
    """
    if amount is None:
        return fmt.format(0.0)
    number = coerce_number(amount)
    if not is_finite_number(number):
        return f"{fmt.currency_symbol}{amount}"
    return fmt.format(number)


def format_with_commas(value: Any, fmt: NumberFormat = TWO_DECIMAL_FORMAT) -> Any:
    """Format with thousands separators and exactly two decimals."""
    if value is None:
        return fmt.format(0.0)
    number = coerce_number(value)
    if not is_finite_number(number):
        return value
    return fmt.format(number)


def _plain_string(number: Any) -> str:
    # 1234.0 reads as 1234 in a display string
    if isinstance(number, float) and number.is_integer() and abs(number) < 1e16:
        return str(int(number))
    return str(number)


def insert_commas(number: Any) -> Any:
    """
    Insert commas between digit groups of a number's integer part.

    Unlike ``format_with_commas`` this never rounds: the digits are taken
    as they are.

    Examples:
        1234567      -> "1,234,567"
        "1234.5678"  -> "1,234.5678"
    """
    if number is None:
        return number
    text = _plain_string(number)
    match = _LEADING_INTEGER.match(text)
    if not match:
        return text
    sign, integer, rest = match.groups()
    return f"{sign}{_DIGIT_GROUPS.sub(',', integer)}{rest}"
