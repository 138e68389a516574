"""
Parsing of human-entered shorthand numbers (e.g., 2.5k, 1.2B, 1,000).
"""

import logging
from numbers import Number
from typing import Any, Optional, Tuple

from .constants import SUFFIX_MULTIPLIERS

logger = logging.getLogger(__name__)


def _is_decimal_literal(text: str) -> bool:
    """At least one digit and at most one decimal point."""
    return text.count(".") <= 1 and any(ch.isdigit() for ch in text)


def tokenize_big_number(text: str) -> Optional[Tuple[str, str]]:
    """
    Split normalized shorthand into its numeral and suffix.

    Grammar: a run of ASCII digits and dots, optional whitespace, then at
    most one of k/m/b/t, then end of text.

    Args:
        text: Input already stripped, comma-free and lowercased.

    Returns:
        (numeral, suffix) with suffix "" when absent, or None if the text
        does not follow the grammar.
    """
    end = 0
    while end < len(text) and (text[end] in "0123456789."):
        end += 1
    numeral, rest = text[:end], text[end:].lstrip()

    if not _is_decimal_literal(numeral):
        return None
    if not rest:
        return numeral, ""
    if len(rest) == 1 and rest in SUFFIX_MULTIPLIERS:
        return numeral, rest
    return None


def parse_big_number(value: Any) -> float:
    """
    Parse shorthand like "2.5k", "1,000" or "3 M" into a number.

    Numbers pass through unchanged and falsy values give 0. Anything that
    does not parse logs a warning and gives 0; this never raises.

    Examples:
        parse_big_number("2.5k")  -> 2500.0
        parse_big_number("1,000") -> 1000.0
        parse_big_number("abc")   -> 0
    """
    if isinstance(value, Number) and not isinstance(value, bool):
        return value
    try:
        # Arrays and Series refuse truth testing
        if not value:
            return 0
        raw = str(value)
    except Exception as e:
        logger.error(f"Error parsing {type(value).__name__} input: {e}")
        return 0

    normalized = raw.strip().replace(",", "").lower()
    token = tokenize_big_number(normalized)
    if token is None:
        logger.warning(f'Could not parse "{raw}", returning 0')
        return 0

    numeral, suffix = token
    multiplier = SUFFIX_MULTIPLIERS.get(suffix, 1)
    return float(numeral) * multiplier
