"""CLI bootstrap for checkout-hero."""

import logging
from decimal import Decimal, InvalidOperation

import typer

from checkout_hero.core.settings import get_settings
from checkout_hero.domain.amount_formatter import (
    format_amount,
    format_compact,
    format_whole,
    parse_amount,
)
from checkout_hero.domain.catalog import COMMON_CURRENCIES

app = typer.Typer(help="CLI for shopping-list amounts and local setup.")

SYMBOL_OPTION = typer.Option(None, "--symbol", "-s", help="Currency symbol.")
LOCALE_OPTION = typer.Option(None, "--locale", "-l", help="Locale tag, e.g. de_DE.")


def _amount(value: str) -> Decimal:
    try:
        return Decimal(value)
    except InvalidOperation as exc:
        raise typer.BadParameter(f"'{value}' is not a decimal number.") from exc


def _symbol(value: str | None) -> str:
    return value or get_settings().default_currency_symbol


def _locale(value: str | None) -> str:
    return value or get_settings().default_locale


@app.callback()
def configure(verbose: bool = typer.Option(False, "--verbose", "-v")) -> None:
    """Configure logging before any command runs."""
    level = "DEBUG" if verbose else get_settings().log_level
    logging.basicConfig(level=level.upper())


@app.command("format")
def format_command(
    amount: str,
    symbol: str | None = SYMBOL_OPTION,
    locale: str | None = LOCALE_OPTION,
) -> None:
    """Format an amount with two fraction digits."""
    typer.echo(format_amount(_amount(amount), _symbol(symbol), _locale(locale)))


@app.command("format-whole")
def format_whole_command(
    amount: str,
    symbol: str | None = SYMBOL_OPTION,
    locale: str | None = LOCALE_OPTION,
) -> None:
    """Format an amount rounded to a whole number."""
    typer.echo(format_whole(_amount(amount), _symbol(symbol), _locale(locale)))


@app.command("format-compact")
def format_compact_command(
    amount: str,
    symbol: str | None = SYMBOL_OPTION,
    locale: str | None = LOCALE_OPTION,
) -> None:
    """Format an amount using K/M scaling."""
    typer.echo(format_compact(_amount(amount), _symbol(symbol), _locale(locale)))


@app.command("parse")
def parse_command(text: str, locale: str | None = LOCALE_OPTION) -> None:
    """Parse user-typed text into a decimal amount."""
    parsed = parse_amount(text, _locale(locale))
    if parsed is None:
        typer.echo(f"No amount found in '{text}'", err=True)
        raise typer.Exit(code=1)
    typer.echo(format(parsed, "f"))


@app.command("currencies")
def currencies_command() -> None:
    """List common currencies."""
    for currency in COMMON_CURRENCIES:
        typer.echo(f"{currency.code}\t{currency.symbol}\t{currency.name}")


@app.command("init-db")
def init_db_command() -> None:
    """Create database tables for the configured DATABASE_URL."""
    from checkout_hero.db.session import init_db

    init_db()
    typer.echo("Database schema is ready")


def main() -> None:
    """Run the checkout-hero CLI application."""
    app()


if __name__ == "__main__":
    main()
