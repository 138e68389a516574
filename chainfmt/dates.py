"""
Date and time formatting utilities.
"""

import logging
from datetime import datetime, tzinfo
from typing import Optional

logger = logging.getLogger(__name__)


def format_date(timestamp: float, tz: Optional[tzinfo] = None) -> str:
    """
    Convert a Unix timestamp (seconds) into an en-US date/time string.

    Args:
        timestamp: Seconds since the epoch.
        tz: Target timezone; local time when omitted.

    Returns:
        str: e.g. "1/15/2024, 3:04:05 PM", or "" for an invalid timestamp.
    """
    try:
        dt = datetime.fromtimestamp(float(timestamp), tz)
    except (TypeError, ValueError, OverflowError, OSError) as e:
        logger.warning(f"Invalid timestamp {timestamp!r}: {e}")
        return ""

    hour = dt.hour % 12 or 12
    meridiem = "AM" if dt.hour < 12 else "PM"
    return (
        f"{dt.month}/{dt.day}/{dt.year}, "
        f"{hour}:{dt.minute:02d}:{dt.second:02d} {meridiem}"
    )
