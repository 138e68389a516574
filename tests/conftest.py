"""
Pytest configuration for chainfmt tests.
"""

import importlib
import os
import sys
from typing import Dict, List

import polars as pl
import pytest
from dotenv import load_dotenv

# Ensure project root is importable
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

# Load .env ONCE (safe no-op)
load_dotenv()

# Minimal contract mapping: modules -> expected attributes
DEFAULT_EXPECTED_EXPORTS: Dict[str, List[str]] = {
    "chainfmt": [
        "parse_big_number",
        "format_big_number",
        "format_compact",
        "format_number",
        "format_currency",
        "format_with_commas",
        "format_hex",
        "format_status",
    ],
    "chainfmt.locale_format": ["NumberFormat", "USD_FORMAT", "COMPACT_FORMAT"],
    "chainfmt.dataframe": ["parse_big_number_series", "format_big_number_series"],
    "cli": ["cli"],
}

_validated = False


def _check_module_exports(module_name: str, keys: List[str]):
    """Import a module and assert it exports the given keys."""
    mod = importlib.import_module(module_name)
    missing = [k for k in keys if not hasattr(mod, k)]
    if missing:
        raise AssertionError(f"Module {module_name} missing exports: {missing}")


@pytest.fixture(autouse=True, scope="session")
def setup_test_environment():
    """Validate module contracts once per session."""
    global _validated
    if not _validated:
        for mod, keys in DEFAULT_EXPECTED_EXPORTS.items():
            _check_module_exports(mod, keys)
        _validated = True
    yield


@pytest.fixture
def shorthand_series():
    """Column of human-entered amounts as they arrive from a form or CSV."""
    return pl.Series(
        "volume",
        ["2.5k", "1,000", " 3 M ", "1.2B", "abc", None, "0.5t"],
    )
