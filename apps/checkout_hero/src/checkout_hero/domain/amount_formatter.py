"""Locale-aware rendering and parsing of monetary amounts.

Numbers are laid out with the CLDR conventions of an explicit locale
(grouping, decimal separator, digit grouping) while the currency symbol is a
caller-supplied string. Where that symbol goes is decided by probing how the
locale renders its own currency: if a visible character precedes the first
digit of ``1.00`` in the locale's standard currency style the symbol is a
prefix, otherwise a suffix separated by one space.

The probe answers "where does this locale put its native currency", which is
an approximation of "where should an arbitrary symbol go". When it cannot
answer, a small set of conventionally-prefixed symbols decides.

Formatting functions never raise; ``parse_amount`` returns ``None`` when the
text holds no usable number.
"""

from __future__ import annotations

import logging
import re
import unicodedata
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from functools import lru_cache

from babel import Locale, UnknownLocaleError
from babel.numbers import (
    format_currency,
    format_decimal,
    get_decimal_symbol,
    get_territory_currencies,
)

from checkout_hero.domain.errors import InvalidLocaleError, compose_error_message
from checkout_hero.domain.money import money_context, quantize_money, quantize_whole

logger = logging.getLogger(__name__)

PREFIX_SYMBOLS = frozenset({"$", "£", "¥", "₹", "₽", "₪"})
PROBE_SAMPLE = Decimal("1.0")
# ISO 4217 code for "no currency", used when a locale has no territory.
NO_CURRENCY_CODE = "XXX"

THOUSAND = Decimal(1_000)
MILLION = Decimal(1_000_000)
COMPACT_PRECISION = Decimal("0.1")

_FRACTION_PART = re.compile(r"\.[0#]*")
_INTEGER_PART = re.compile(r"[#,0]+")

LocaleLike = str | Locale
AmountLike = Decimal | int | str


def resolve_locale(locale: LocaleLike) -> Locale:
    """Resolve a locale tag (``en_US``, ``de-DE``, ``es``) to Babel locale data."""

    if isinstance(locale, Locale):
        return locale
    try:
        return Locale.parse(str(locale).strip().replace("-", "_"))
    except (UnknownLocaleError, ValueError, TypeError) as exc:
        raise InvalidLocaleError(
            message=compose_error_message(
                cause=f"Locale '{locale}' is not recognized.",
                action="Use a locale identifier such as en_US or de-DE.",
            ),
            details={"locale": str(locale)},
        ) from exc


def currency_symbol_precedes(locale: LocaleLike, currency_symbol: str) -> bool:
    """Return whether ``currency_symbol`` is written before the number."""

    try:
        identifier = str(resolve_locale(locale))
    except InvalidLocaleError:
        return currency_symbol in PREFIX_SYMBOLS

    prefixed = _probe_prefix_convention(identifier)
    if prefixed is None:
        return currency_symbol in PREFIX_SYMBOLS
    return prefixed


def format_amount(
    amount: AmountLike,
    currency_symbol: str,
    locale: LocaleLike,
) -> str:
    """Format ``amount`` with exactly two fraction digits and the symbol."""

    try:
        resolved = resolve_locale(locale)
        value = _as_decimal(amount)
        with money_context(value):
            number = format_decimal(
                quantize_money(value),
                format=fraction_pattern(resolved, digits=2),
                locale=resolved,
            )
    except (InvalidLocaleError, ArithmeticError, ValueError) as exc:
        _log_format_failure("standard", amount, locale, exc)
        return f"{currency_symbol}0.00"
    return _place_symbol(number, currency_symbol, resolved)


def format_whole(
    amount: AmountLike,
    currency_symbol: str,
    locale: LocaleLike,
) -> str:
    """Format ``amount`` rounded to a whole number (HALF_UP)."""

    try:
        resolved = resolve_locale(locale)
        value = _as_decimal(amount)
        with money_context(value):
            number = format_decimal(
                quantize_whole(value),
                format=fraction_pattern(resolved, digits=0),
                locale=resolved,
            )
    except (InvalidLocaleError, ArithmeticError, ValueError) as exc:
        _log_format_failure("whole", amount, locale, exc)
        return f"{currency_symbol}0"
    return _place_symbol(number, currency_symbol, resolved)


def format_compact(
    amount: AmountLike,
    currency_symbol: str,
    locale: LocaleLike,
) -> str:
    """Format ``amount`` scaled to ``K``/``M`` with one optional decimal.

    Amounts below one thousand keep up to two fraction digits and no suffix.
    The result is approximate by nature.
    """

    try:
        resolved = resolve_locale(locale)
        value = _as_decimal(amount)
        with money_context(value):
            scaled, suffix, digits = _compact_parts(value)
            number = format_decimal(
                scaled,
                format=fraction_pattern(resolved, digits=digits, optional=True),
                locale=resolved,
            )
    except (InvalidLocaleError, ArithmeticError, ValueError) as exc:
        _log_format_failure("compact", amount, locale, exc)
        return f"{currency_symbol}0"
    return _place_symbol(f"{number}{suffix}", currency_symbol, resolved)


def parse_amount(text: str, locale: LocaleLike) -> Decimal | None:
    """Parse free text such as ``"$1,234.50"`` into a Decimal.

    Everything except decimal digits and the locale decimal separator is
    dropped, signs included. Returns ``None`` when no number remains, when the
    separator appears more than once, or when the locale is unknown.

    The separator is the one of the Latin-digit numbering system, matching
    what the formatters emit. Text typed with a native numbering system such
    as Arabic-Indic (``"١٢٣٫٥"`` in ``ar_EG``) loses its separator and reads
    as a whole number.
    """

    try:
        resolved = resolve_locale(locale)
    except InvalidLocaleError:
        logger.warning("amount_parse_invalid_locale", extra={"locale": str(locale)})
        return None

    separator = get_decimal_symbol(resolved)
    cleaned = "".join(
        char for char in text if char.isdecimal() or char == separator
    )
    if not any(char.isdecimal() for char in cleaned):
        return None
    if cleaned.count(separator) > 1:
        return None

    try:
        return Decimal(cleaned.replace(separator, "."))
    except InvalidOperation:
        return None


@lru_cache(maxsize=256)
def _probe_prefix_convention(identifier: str) -> bool | None:
    locale = Locale.parse(identifier)
    try:
        sample = format_currency(
            PROBE_SAMPLE, _native_currency(locale), locale=locale
        )
    except (ArithmeticError, ValueError, KeyError) as exc:
        logger.debug(
            "currency_probe_failed",
            extra={"locale": identifier, "error_type": type(exc).__name__},
        )
        return None

    for position, char in enumerate(sample):
        if char.isdecimal():
            return any(_is_visible_mark(mark) for mark in sample[:position])

    logger.debug(
        "currency_probe_inconclusive",
        extra={"locale": identifier, "sample": sample},
    )
    return None


def _native_currency(locale: Locale) -> str:
    if locale.territory:
        currencies = get_territory_currencies(locale.territory)
        if currencies:
            return currencies[0]
    return NO_CURRENCY_CODE


def _is_visible_mark(char: str) -> bool:
    if char.isspace() or char.isdecimal():
        return False
    # Bidi and other format controls render as nothing.
    return unicodedata.category(char) != "Cf"


def fraction_pattern(
    locale: Locale,
    *,
    digits: int,
    optional: bool = False,
) -> str:
    """Return the locale decimal pattern with a fixed fraction part.

    ``optional`` turns the fraction digits into ``#`` so trailing zeros are
    dropped; ``digits=0`` removes the fraction part entirely.
    """
    pattern = locale.decimal_formats[None].pattern
    placeholder = "#" if optional else "0"
    fraction = "." + placeholder * digits if digits else ""
    if _FRACTION_PART.search(pattern):
        return _FRACTION_PART.sub(fraction, pattern)
    return _INTEGER_PART.sub(lambda match: match.group(0) + fraction, pattern, count=1)


def _compact_parts(value: Decimal) -> tuple[Decimal, str, int]:
    magnitude = abs(value)
    millions = (value / MILLION).quantize(COMPACT_PRECISION, rounding=ROUND_HALF_UP)
    if magnitude >= MILLION:
        return millions, "M", 1
    if magnitude >= THOUSAND:
        thousands = (value / THOUSAND).quantize(
            COMPACT_PRECISION, rounding=ROUND_HALF_UP
        )
        if abs(thousands) >= THOUSAND:
            return millions, "M", 1
        return thousands, "K", 1
    return quantize_money(value), "", 2


def _as_decimal(amount: AmountLike) -> Decimal:
    value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    if not value.is_finite():
        raise InvalidOperation(f"Cannot format non-finite amount {value}")
    return value


def _place_symbol(number: str, currency_symbol: str, locale: Locale) -> str:
    if currency_symbol_precedes(locale, currency_symbol):
        return f"{currency_symbol}{number}"
    return f"{number} {currency_symbol}"


def _log_format_failure(
    style: str,
    amount: object,
    locale: object,
    exc: Exception,
) -> None:
    logger.warning(
        "amount_format_failed",
        extra={
            "style": style,
            "amount": str(amount),
            "locale": str(locale),
            "error_type": type(exc).__name__,
        },
    )
