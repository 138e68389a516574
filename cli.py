import logging

import click
from dotenv import load_dotenv

# Settings are read from the environment on import, so load .env first
load_dotenv()

from chainfmt import (  # noqa: E402
    format_big_number,
    format_compact,
    format_currency,
    format_hex,
    format_number,
    format_status,
    format_units,
    parse_big_number,
)
from chainfmt.config import settings, setup_logging  # noqa: E402

# --- Setup logging once for CLI ---
setup_logging()
logger = logging.getLogger("chainfmt_cli")


def _decimals_or_unit(value: str):
    """Accept either a decimal count or a unit name such as gwei."""
    return int(value) if value.lstrip("-").isdigit() else value


@click.group()
def cli():
    """chainfmt CLI for formatting and parsing blockchain values."""


@cli.command()
@click.argument("value")
def parse(value):
    """Parse shorthand like 2.5k or 1,000 into a number."""
    click.echo(parse_big_number(value))


@cli.command()
@click.argument("value")
@click.option(
    "--precision",
    default=settings.big_number_precision,
    show_default=True,
    help="Decimal places after scaling",
)
def big(value, precision):
    """Abbreviate a number with a k/M/B/T suffix."""
    click.echo(format_big_number(value, precision))


@cli.command()
@click.argument("value")
def compact(value):
    """Format a number in compact notation (1.2K, 34M)."""
    click.echo(format_compact(value))


@cli.command()
@click.argument("value")
@click.option("--decimals", default=2, show_default=True, help="Decimal places")
@click.option("--no-grouping", is_flag=True, help="Omit thousands separators")
def number(value, decimals, no_grouping):
    """Format a number with fixed decimals."""
    click.echo(format_number(value, decimals, grouping=not no_grouping))


@cli.command()
@click.argument("value")
def currency(value):
    """Format an amount as US dollars."""
    click.echo(format_currency(value))


@cli.command(name="hex")
@click.argument("value")
@click.option(
    "--length",
    default=settings.hex_length,
    show_default=True,
    help="Target length including the 0x prefix",
)
def hex_(value, length):
    """Normalize a hex string to a fixed length."""
    click.echo(format_hex(value, length))


@cli.command()
@click.argument("value")
@click.option(
    "--decimals",
    default="18",
    show_default=True,
    help="Token decimals or a unit name (wei, gwei, ether, ...)",
)
def units(value, decimals):
    """Convert a raw integer token amount for display."""
    click.echo(format_units(value, _decimals_or_unit(decimals)))


@cli.command()
@click.argument("code", type=int)
def status(code):
    """Show the label of a transaction status code."""
    label = format_status(code)
    if label == "Unknown":
        logger.warning(f"Unknown status code: {code}")
    click.echo(label)


if __name__ == "__main__":
    cli()
