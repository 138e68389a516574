"""
Tests for status and address display helpers.
"""

import pytest

from chainfmt.chain import format_address, format_status


class TestFormatStatus:
    """Tests for format_status."""

    def test_known_codes(self):
        assert format_status(1) == "Success"
        assert format_status(-1) == "Pending"
        assert format_status(0) == "Failed"

    @pytest.mark.parametrize("value", [2, -2, None, "1", True, [1]])
    def test_unknown_codes(self, value):
        assert format_status(value) == "Unknown"


class TestFormatAddress:
    """Tests for format_address."""

    def test_truncates_middle(self):
        address = "0x742d35Cc6634C0532925a3b844Bc454e4438f44e"
        assert format_address(address) == "0x742d...f44e"

    def test_custom_lengths(self):
        assert format_address("0x1234567890abcdef", 4, 2) == "0x12...ef"

    def test_short_address_unchanged(self):
        assert format_address("0x12345678") == "0x12345678"

    @pytest.mark.parametrize("value", ["", None])
    def test_empty(self, value):
        assert format_address(value) == ""

    def test_non_string_falls_back(self):
        assert format_address(12345678901234) == "0x000...000"
