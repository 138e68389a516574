"""
Fixed-width hex string normalization.
"""

from typing import Any

from .constants import DEFAULT_HEX_LENGTH, HEX_PREFIX


def format_hex(value: Any, length: int = DEFAULT_HEX_LENGTH) -> str:
    """
    Normalize a hex string to exactly ``length`` characters.

    The result is lowercase and 0x-prefixed, right-padded with "0" when
    short and truncated when long. The body is not checked for hex digits.

    Args:
        value: Hex string, with or without the 0x prefix.
        length: Target length including the prefix (66 = 0x + 32 bytes).

    Returns:
        str: The normalized string, or "0x" for empty input.
    """
    if not value:
        return HEX_PREFIX

    text = str(value).lower()
    if not text.startswith(HEX_PREFIX):
        text = HEX_PREFIX + text

    if len(text) < length:
        return text.ljust(length, "0")
    return text[:length]
