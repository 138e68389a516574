"""
Shared constants for chainfmt.
Centralized lookup tables for suffixes, tiers, units and statuses.
"""

# =============================================================================
# MAGNITUDE SUFFIXES
# =============================================================================
# Parser side: lowercase letter -> multiplier
SUFFIX_MULTIPLIERS = {
    "k": 1e3,  # thousand
    "m": 1e6,  # million
    "b": 1e9,  # billion
    "t": 1e12,  # trillion
}

# Formatter side, checked in descending order (first match wins)
MAGNITUDE_TIERS = (
    (1e12, "T"),
    (1e9, "B"),
    (1e6, "M"),
    (1e3, "k"),
)

# Compact notation (en-US short form)
COMPACT_TIERS = (
    (1e12, "T"),
    (1e9, "B"),
    (1e6, "M"),
    (1e3, "K"),
)

# =============================================================================
# HEX
# =============================================================================
HEX_PREFIX = "0x"
DEFAULT_HEX_LENGTH = 66  # 0x + 32 bytes

# =============================================================================
# TOKEN UNITS
# =============================================================================
ETHER_UNIT = "ether"
GWEI_UNIT = "gwei"
ETHER_DECIMALS = 18

# =============================================================================
# PRECISION
# =============================================================================
MAX_FRACTION_DIGITS = 100

# =============================================================================
# TRANSACTION STATUS
# =============================================================================
STATUS_LABELS = {
    1: "Success",
    -1: "Pending",
    0: "Failed",
}
UNKNOWN_STATUS = "Unknown"

# =============================================================================
# FALLBACKS
# =============================================================================
ADDRESS_FALLBACK = "0x000...000"
ELLIPSIS = "..."
