"""
Tests for markdown escaping, timestamp formatting and price helpers.
"""

import random
from datetime import timedelta, timezone

import pytest

from chainfmt.analytics import percent_change, random_sample
from chainfmt.dates import format_date
from chainfmt.text import escape_markdown_v2


class TestEscapeMarkdownV2:
    """Tests for escape_markdown_v2."""

    def test_escapes_periods(self):
        assert escape_markdown_v2("1.5 ETH") == "1\\.5 ETH"

    def test_escapes_brackets_and_backslash(self):
        assert escape_markdown_v2("[tx](link)") == "\\[tx\\]\\(link\\)"
        assert escape_markdown_v2("a\\b") == "a\\\\b"

    def test_strips_emoji(self):
        assert escape_markdown_v2("🐋 Whale alert 🚨") == " Whale alert "
        assert escape_markdown_v2("❤️ gm") == " gm"

    def test_keeps_digits(self):
        assert escape_markdown_v2("Block 123") == "Block 123"

    def test_none(self):
        assert escape_markdown_v2(None) == ""


class TestFormatDate:
    """Tests for format_date."""

    def test_afternoon(self):
        # 2024-01-15 15:04:05 UTC
        assert format_date(1705331045, tz=timezone.utc) == "1/15/2024, 3:04:05 PM"

    def test_midnight_is_twelve_am(self):
        assert format_date(0, tz=timezone.utc) == "1/1/1970, 12:00:00 AM"

    def test_noon_is_twelve_pm(self):
        assert format_date(43200, tz=timezone.utc) == "1/1/1970, 12:00:00 PM"

    def test_timezone_offset(self):
        tz = timezone(timedelta(hours=2))
        assert format_date(0, tz=tz) == "1/1/1970, 2:00:00 AM"

    def test_invalid_timestamp(self):
        assert format_date("soon") == ""
        assert format_date(None) == ""


class TestPercentChange:
    """Tests for percent_change."""

    def test_increase_and_decrease(self):
        assert percent_change(100, 150) == pytest.approx(50.0)
        assert percent_change(200, 150) == pytest.approx(-25.0)

    def test_zero_base(self):
        assert percent_change(0, 10) == 0.0


class TestRandomSample:
    """Tests for random_sample."""

    def test_picks_distinct_items(self):
        tokens = ["ETH", "BTC", "SOL", "ARB", "OP"]
        picked = random_sample(tokens, 3, rng=random.Random(7))
        assert len(picked) == 3
        assert len(set(picked)) == 3
        assert set(picked) <= set(tokens)

    def test_does_not_mutate_input(self):
        tokens = ["ETH", "BTC", "SOL"]
        random_sample(tokens, 2)
        assert tokens == ["ETH", "BTC", "SOL"]

    def test_count_larger_than_items(self):
        tokens = ["ETH", "BTC"]
        assert sorted(random_sample(tokens, 10)) == ["BTC", "ETH"]

    def test_reproducible_with_seed(self):
        tokens = list(range(20))
        assert random_sample(tokens, 5, random.Random(1)) == random_sample(
            tokens, 5, random.Random(1)
        )

    @pytest.mark.parametrize("count", [0, -3])
    def test_non_positive_count(self, count):
        assert random_sample(["ETH"], count) == []
