"""
Locale number format configurations.

A ``NumberFormat`` is an immutable description of how to render a number
(locale, style, grouping, fraction digits). The standard instances are built
once at import time and passed to the formatters as their ``fmt`` argument,
so callers can inject their own configuration without touching globals.
"""

import functools
import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext

from .constants import COMPACT_TIERS, MAX_FRACTION_DIGITS
from .validation import to_decimal

# locale -> (group separator, decimal separator)
SUPPORTED_LOCALES = {"en-US": (",", ".")}
STYLES = ("decimal", "currency", "compact")

# Enough digits to quantize any finite double without InvalidOperation
_DECIMAL_PRECISION = 800

# Ascending (threshold exponent, suffix) pairs for compact notation
_COMPACT_STEPS = [(0, "")] + [
    (round(math.log10(threshold)), suffix) for threshold, suffix in reversed(COMPACT_TIERS)
]


def round_half_up(value: Decimal, places: int) -> Decimal:
    """Round to ``places`` decimals, halves away from zero."""
    with localcontext() as ctx:
        ctx.prec = _DECIMAL_PRECISION
        return value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)


def _round_compact(value: Decimal) -> Decimal:
    # Two significant digits below 100, whole numbers from 100 upwards
    if value >= 100:
        return round_half_up(value, 0)
    if value == 0:
        return Decimal(0)
    return round_half_up(value, 1 - value.adjusted())


@dataclass(frozen=True)
class NumberFormat:
    """
    Immutable number formatting configuration.

    Attributes:
        locale: Locale tag; only ``en-US`` is supported.
        style: ``decimal``, ``currency`` or ``compact``.
        grouping: Insert thousands separators.
        min_fraction_digits: Fraction digits always shown.
        max_fraction_digits: Fraction digits kept after rounding.
        currency_symbol: Symbol used by the ``currency`` style.
    """

    locale: str = "en-US"
    style: str = "decimal"
    grouping: bool = True
    min_fraction_digits: int = 0
    max_fraction_digits: int = 3
    currency_symbol: str = "$"

    def __post_init__(self):
        if self.locale not in SUPPORTED_LOCALES:
            raise ValueError(f"Unsupported locale: {self.locale}")
        if self.style not in STYLES:
            raise ValueError(f"Unsupported style: {self.style}")
        if not 0 <= self.min_fraction_digits <= self.max_fraction_digits <= MAX_FRACTION_DIGITS:
            raise ValueError(
                "Fraction digits must satisfy "
                f"0 <= min_fraction_digits <= max_fraction_digits <= {MAX_FRACTION_DIGITS}"
            )

    @property
    def group_separator(self) -> str:
        return SUPPORTED_LOCALES[self.locale][0]

    @property
    def decimal_separator(self) -> str:
        return SUPPORTED_LOCALES[self.locale][1]

    def format(self, value: float) -> str:
        """
        Render a finite float according to this configuration.

        Callers validate their input first (see ``chainfmt.validation``);
        only the compact style renders NaN and infinities.
        """
        if self.style == "compact":
            return self._format_compact(value)

        sign = "-" if value < 0 else ""
        digits = self._format_digits(to_decimal(abs(value)))
        if self.style == "currency":
            return f"{sign}{self.currency_symbol}{digits}"
        return f"{sign}{digits}"

    def _format_digits(self, magnitude: Decimal) -> str:
        rounded = round_half_up(magnitude, self.max_fraction_digits)
        text = format(rounded, f"{',' if self.grouping else ''}.{self.max_fraction_digits}f")
        integer, _, fraction = text.partition(".")
        keep = max(len(fraction.rstrip("0")), self.min_fraction_digits)
        fraction = fraction[:keep]
        integer = integer.replace(",", self.group_separator)
        return f"{integer}{self.decimal_separator}{fraction}" if fraction else integer

    def _format_compact(self, value: float) -> str:
        if math.isnan(value):
            return "NaN"
        sign = "-" if math.copysign(1.0, value) < 0 else ""
        if math.isinf(value):
            return f"{sign}∞"

        magnitude = abs(value)
        step = 0
        for index, (exponent, _) in enumerate(_COMPACT_STEPS):
            if magnitude >= 10**exponent:
                step = index

        exact = to_decimal(magnitude)
        rounded = _round_compact(exact.scaleb(-_COMPACT_STEPS[step][0]))
        # 999.95K rounds to 1000K, which reads as 1M
        if rounded >= 1000 and step < len(_COMPACT_STEPS) - 1:
            step += 1
            rounded = _round_compact(exact.scaleb(-_COMPACT_STEPS[step][0]))

        rounded = rounded.normalize()
        # en-US only groups compact figures from five integer digits up
        if self.grouping and rounded >= 10000:
            text = format(rounded, ",f").replace(",", self.group_separator)
        else:
            text = format(rounded, "f")
        text = text.replace(".", self.decimal_separator)
        return f"{sign}{text}{_COMPACT_STEPS[step][1]}"


@functools.lru_cache(maxsize=None)
def fixed_format(decimals: int, grouping: bool = True) -> NumberFormat:
    """Exactly ``decimals`` fraction digits; instances are cached per shape."""
    return NumberFormat(
        grouping=grouping,
        min_fraction_digits=decimals,
        max_fraction_digits=decimals,
    )


# Standard instances, built once
DECIMAL_FORMAT = NumberFormat()
USD_FORMAT = NumberFormat(
    style="currency",
    min_fraction_digits=2,
    max_fraction_digits=2,
)
TWO_DECIMAL_FORMAT = fixed_format(2)
COMPACT_FORMAT = NumberFormat(style="compact")
