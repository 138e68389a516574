"""
Polars column helpers built on the scalar parsers and formatters.
"""

import polars as pl

from .formatting import format_big_number
from .parsing import parse_big_number


def parse_big_number_series(series: pl.Series) -> pl.Series:
    """Convert a column of shorthand strings (e.g., 1.2B, 3.4k, 1,234) to floats.

    Args:
        series (pl.Series): Numbers or formatted strings; nulls become 0.0.

    Returns:
        pl.Series: Float64 series with the same name.
    """

    def convert_to_number(value):
        return float(parse_big_number(value))

    return (
        series.map_elements(convert_to_number, return_dtype=pl.Float64, skip_nulls=True)
        .fill_null(0.0)
        .alias(series.name)
    )


def format_big_number_series(series: pl.Series, precision: int = 1) -> pl.Series:
    """Abbreviate every value of a numeric column (e.g., 1500 -> 1.5k)."""
    return (
        series.map_elements(
            lambda value: format_big_number(value, precision),
            return_dtype=pl.Utf8,
            skip_nulls=False,
        )
        .alias(series.name)
    )
