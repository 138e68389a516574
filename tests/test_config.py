"""
Tests for settings and logging setup.
"""

import dataclasses
import importlib
import logging

import pytest

import chainfmt.config as config


class TestFormatSettings:
    """Tests for FormatSettings."""

    def test_defaults(self, monkeypatch):
        for name in (
            "CHAINFMT_HEX_LENGTH",
            "CHAINFMT_BIG_NUMBER_PRECISION",
            "CHAINFMT_SMALL_VALUE_DECIMALS",
            "CHAINFMT_LOG_LEVEL",
        ):
            monkeypatch.delenv(name, raising=False)
        fresh = importlib.reload(config)
        try:
            assert fresh.settings.hex_length == 66
            assert fresh.settings.big_number_precision == 1
            assert fresh.settings.small_value_decimals == 4
            assert fresh.settings.log_level == "INFO"
        finally:
            monkeypatch.undo()
            importlib.reload(config)

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("CHAINFMT_HEX_LENGTH", "42")
        fresh = importlib.reload(config)
        try:
            assert fresh.FormatSettings().hex_length == 42
        finally:
            monkeypatch.undo()
            importlib.reload(config)

    def test_is_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.settings.hex_length = 10


def test_setup_logging_sets_level(monkeypatch):
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))

    config.setup_logging("debug")

    assert calls["level"] == "DEBUG"
    assert "%(levelname)s" in calls["format"]
