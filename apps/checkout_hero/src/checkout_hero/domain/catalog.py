"""Common currencies offered when picking a list currency."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Currency:
    """One selectable currency: display symbol, English name and ISO code."""

    symbol: str
    name: str
    code: str


COMMON_CURRENCIES: tuple[Currency, ...] = (
    Currency("$", "US Dollar", "USD"),
    Currency("€", "Euro", "EUR"),
    Currency("£", "British Pound", "GBP"),
    Currency("¥", "Japanese Yen", "JPY"),
    Currency("¥", "Chinese Yuan", "CNY"),
    Currency("₹", "Indian Rupee", "INR"),
    Currency("R$", "Brazilian Real", "BRL"),
    Currency("₽", "Russian Ruble", "RUB"),
    Currency("₪", "Israeli Shekel", "ILS"),
    Currency("CHF", "Swiss Franc", "CHF"),
    Currency("A$", "Australian Dollar", "AUD"),
    Currency("C$", "Canadian Dollar", "CAD"),
    Currency("₩", "South Korean Won", "KRW"),
    Currency("MX$", "Mexican Peso", "MXN"),
    Currency("₱", "Philippine Peso", "PHP"),
    Currency("฿", "Thai Baht", "THB"),
    Currency("₫", "Vietnamese Dong", "VND"),
    Currency("zł", "Polish Zloty", "PLN"),
    Currency("kr", "Swedish Krona", "SEK"),
    Currency("kr", "Norwegian Krone", "NOK"),
)


def currency_symbol_for(code: str) -> str | None:
    """Return the display symbol of an ISO currency code."""
    normalized = code.strip().upper()
    return next(
        (currency.symbol for currency in COMMON_CURRENCIES if currency.code == normalized),
        None,
    )


def currency_name_for(symbol: str) -> str | None:
    """Return the first currency name using ``symbol``.

    Symbols are shared between currencies (``¥``, ``kr``); the first entry
    in ``COMMON_CURRENCIES`` wins.
    """
    return next(
        (currency.name for currency in COMMON_CURRENCIES if currency.symbol == symbol),
        None,
    )
