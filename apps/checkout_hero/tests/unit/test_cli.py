from __future__ import annotations

from typer.testing import CliRunner

from checkout_hero.cli import app

runner = CliRunner()


def test_format_command_renders_locale_amount() -> None:
    result = runner.invoke(app, ["format", "1234.5", "--symbol", "€", "--locale", "de_DE"])

    assert result.exit_code == 0
    assert result.stdout.strip() == "1.234,50 €"


def test_format_whole_and_compact_commands() -> None:
    whole = runner.invoke(app, ["format-whole", "999.6", "-s", "$", "-l", "en_US"])
    compact = runner.invoke(app, ["format-compact", "1234567", "-s", "$", "-l", "en_US"])

    assert whole.stdout.strip() == "$1,000"
    assert compact.stdout.strip() == "$1.2M"


def test_format_command_rejects_non_decimal_amount() -> None:
    result = runner.invoke(app, ["format", "ten", "-s", "$", "-l", "en_US"])

    assert result.exit_code != 0


def test_parse_command_prints_plain_decimal() -> None:
    result = runner.invoke(app, ["parse", "$1,234.50", "-l", "en_US"])

    assert result.exit_code == 0
    assert result.stdout.strip() == "1234.50"


def test_parse_command_fails_without_number() -> None:
    result = runner.invoke(app, ["parse", "abc", "-l", "en_US"])

    assert result.exit_code == 1


def test_currencies_command_lists_codes() -> None:
    result = runner.invoke(app, ["currencies"])

    assert result.exit_code == 0
    assert "BRL\tR$\tBrazilian Real" in result.stdout
