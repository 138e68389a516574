"""
Formatting and parsing helpers for blockchain values.

This package contains pure functions organized by domain:
- parsing: shorthand numbers ("2.5k", "1.2B") to floats
- formatting: abbreviated, fixed-decimal, currency and grouped numbers
- locale_format: immutable number format configurations
- hex_utils: fixed-width hex strings
- chain / units: transaction status, addresses, token units
- text / dates / analytics: markdown escaping, timestamps, price changes
- dataframe: polars column adapters (install the "dataframe" extra)
"""

from .analytics import percent_change, random_sample
from .chain import format_address, format_status
from .dates import format_date
from .formatting import (
    format_big_number,
    format_compact,
    format_currency,
    format_number,
    format_with_commas,
    insert_commas,
)
from .hex_utils import format_hex
from .locale_format import (
    COMPACT_FORMAT,
    DECIMAL_FORMAT,
    TWO_DECIMAL_FORMAT,
    USD_FORMAT,
    NumberFormat,
)
from .parsing import parse_big_number, tokenize_big_number
from .text import escape_markdown_v2
from .units import (
    format_big_int,
    format_eth,
    format_gas_price,
    format_token_value,
    format_units,
)

__all__ = [
    # parsing
    "parse_big_number",
    "tokenize_big_number",
    # formatting
    "format_big_number",
    "format_compact",
    "format_currency",
    "format_number",
    "format_with_commas",
    "insert_commas",
    # locale_format
    "NumberFormat",
    "COMPACT_FORMAT",
    "DECIMAL_FORMAT",
    "TWO_DECIMAL_FORMAT",
    "USD_FORMAT",
    # hex_utils
    "format_hex",
    # chain / units
    "format_address",
    "format_status",
    "format_big_int",
    "format_eth",
    "format_gas_price",
    "format_token_value",
    "format_units",
    # text / dates / analytics
    "escape_markdown_v2",
    "format_date",
    "percent_change",
    "random_sample",
]
