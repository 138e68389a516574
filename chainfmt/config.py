# chainfmt/config.py
import logging
import os
from dataclasses import dataclass


@dataclass(frozen=True)
class FormatSettings:
    """Environment-driven defaults for chainfmt."""

    # Display defaults
    hex_length: int = int(os.getenv("CHAINFMT_HEX_LENGTH", "66"))
    big_number_precision: int = int(os.getenv("CHAINFMT_BIG_NUMBER_PRECISION", "1"))
    small_value_decimals: int = int(os.getenv("CHAINFMT_SMALL_VALUE_DECIMALS", "4"))
    # Logging
    log_level: str = os.getenv("CHAINFMT_LOG_LEVEL", "INFO")


settings = FormatSettings()


def setup_logging(level: str | None = None):
    """Configure logging for the application.

    This function should be called at application startup (the CLI does).
    Library modules only create loggers and never configure them.
    """
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
