"""
Token unit conversion for display (wei -> ether, wei -> gwei, ...).

Named units go through eth_utils' ``from_wei``; a bare decimal count is a
power-of-ten shift on the exact integer, so no amount passes through a float.
"""

import logging
from decimal import Decimal, localcontext
from typing import Any, Optional, Union

from eth_utils import from_wei, is_0x_prefixed, to_int

from .constants import ETHER_DECIMALS, ETHER_UNIT, GWEI_UNIT
from .locale_format import round_half_up
from .validation import coerce_places

logger = logging.getLogger(__name__)

Unit = Union[int, str]

# Same headroom eth_utils uses for its own divisions
_UNIT_PRECISION = 999


def _to_int(value: Any) -> Optional[int]:
    """Integer amount from an int, a decimal string or a 0x hex string."""
    if isinstance(value, bool):
        return None
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    try:
        if isinstance(value, int):
            return to_int(value)
        if isinstance(value, str):
            text = value.strip()
            negative = text.startswith("-")
            body = text[1:] if negative else text
            if is_0x_prefixed(body):
                amount = to_int(hexstr=body)
            elif body.isdigit():
                amount = to_int(text=body)
            else:
                return None
            return -amount if negative else amount
    except (TypeError, ValueError):
        return None
    return None


def _convert(amount: int, unit: Unit) -> Optional[Decimal]:
    """Unsigned amount expressed in ``unit``, or None for an unknown unit."""
    if isinstance(unit, str):
        try:
            return Decimal(from_wei(amount, unit.strip().lower()))
        except ValueError:
            return None
    if isinstance(unit, bool) or not isinstance(unit, int) or unit < 0:
        return None
    with localcontext() as ctx:
        ctx.prec = _UNIT_PRECISION
        return Decimal(amount).scaleb(-unit)


def _render(converted: Decimal, whole_units: bool) -> str:
    integer, _, fraction = format(converted, "f").partition(".")
    if whole_units:
        return integer
    return f"{integer}.{fraction.rstrip('0') or '0'}"


def format_units(value: Any, decimals: Unit = ETHER_DECIMALS) -> str:
    """
    Render an integer amount divided by 10**decimals, exactly.

    At least one fraction digit is always shown and trailing zeros are
    dropped.

    Args:
        value: Integer amount (int, decimal string or 0x hex string).
        decimals: Number of decimals, or a unit name such as "gwei".

    Returns:
        str: e.g. "1.0", "1.5", "0.000000000000000001"; "0" when the
        amount or the unit is invalid.

    Example:
        >>> format_units(1500000000000000000)
        '1.5'
    """
    amount = _to_int(value)
    converted = None if amount is None else _convert(abs(amount), decimals)
    if converted is None:
        logger.warning(f"Cannot format {value!r} with decimals={decimals!r}")
        return "0"

    sign = "-" if amount < 0 else ""
    whole_units = decimals == 0 or (
        isinstance(decimals, str) and decimals.strip().lower() == "wei"
    )
    return f"{sign}{_render(converted, whole_units)}"


def format_eth(value: Any, decimals: Unit = ETHER_UNIT) -> str:
    """Format a wei amount as ether."""
    if not value:
        return "0"
    return format_units(value, decimals)


def format_token_value(value: Any, decimals: Unit = ETHER_DECIMALS) -> str:
    """Format a raw token amount using the token's decimals."""
    if not value:
        return "0"
    return format_units(value, decimals)


def format_gas_price(gas_price: Any) -> str:
    """Format a gas price given in wei as Gwei (e.g., "20.5 Gwei")."""
    if not gas_price:
        return "0"
    return f"{format_units(gas_price, GWEI_UNIT)} Gwei"


def format_big_int(
    value: Any, decimals: Unit = ETHER_DECIMALS, precision: int = 4
) -> str:
    """
    Format a raw token amount with a fixed number of decimal places.

    Example:
        >>> format_big_int(1234567890000000000)
        '1.2346'
    """
    if not value:
        return "0"
    places = coerce_places(precision)
    if places is None:
        return "0"
    rounded = round_half_up(Decimal(format_units(value, decimals)), places)
    return format(rounded, f".{places}f")
