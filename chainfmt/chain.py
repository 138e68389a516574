"""
Display helpers for on-chain values: transaction status and addresses.
"""

from typing import Any

from .constants import ADDRESS_FALLBACK, ELLIPSIS, STATUS_LABELS, UNKNOWN_STATUS


def format_status(status: Any) -> str:
    """
    Map a transaction status code to its label.

    1 -> "Success", -1 -> "Pending", 0 -> "Failed"; anything else
    (booleans included) -> "Unknown".
    """
    if isinstance(status, bool):
        return UNKNOWN_STATUS
    try:
        return STATUS_LABELS.get(status, UNKNOWN_STATUS)
    except TypeError:
        # Unhashable input
        return UNKNOWN_STATUS


def format_address(address: Any, start: int = 6, end: int = 4) -> str:
    """
    Shorten an address by eliding its middle.

    Examples:
        format_address("0x1234567890abcdef1234") -> "0x1234...1234"
    """
    if not address:
        return ""
    if not isinstance(address, str):
        return ADDRESS_FALLBACK
    if len(address) <= start + end:
        return address
    return f"{address[:start]}{ELLIPSIS}{address[-end:]}"
