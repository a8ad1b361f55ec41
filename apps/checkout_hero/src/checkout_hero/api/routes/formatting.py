"""Amount formatting, parsing and currency catalog routes."""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated

from fastapi import APIRouter, Depends, Query

from checkout_hero.api.dependencies import get_display_locale
from checkout_hero.api.schemas.formatting import (
    CurrenciesResponse,
    CurrencyResponse,
    FormatStyle,
    FormattedAmountResponse,
    ParsedAmountResponse,
)
from checkout_hero.domain.amount_formatter import (
    currency_symbol_precedes,
    format_amount,
    format_compact,
    format_whole,
    parse_amount,
)
from checkout_hero.domain.catalog import COMMON_CURRENCIES

router = APIRouter(tags=["Formatting"])

FORMATTERS = {
    "standard": format_amount,
    "whole": format_whole,
    "compact": format_compact,
}


@router.get("/format", response_model=FormattedAmountResponse)
def format_amount_route(
    amount: Annotated[str, Query(pattern=r"^-?[0-9]+(\.[0-9]+)?$", max_length=40)],
    symbol: Annotated[str, Query(min_length=1, max_length=8)],
    locale: Annotated[str, Depends(get_display_locale)],
    style: FormatStyle = "standard",
) -> FormattedAmountResponse:
    """Render an amount with a currency symbol for a locale."""

    formatted = FORMATTERS[style](Decimal(amount), symbol, locale)
    return FormattedAmountResponse(
        amount=amount,
        currency_symbol=symbol,
        locale=locale,
        style=style,
        symbol_position="prefix"
        if currency_symbol_precedes(locale, symbol)
        else "suffix",
        formatted=formatted,
    )


@router.get("/parse", response_model=ParsedAmountResponse)
def parse_amount_route(
    text: Annotated[str, Query(max_length=64)],
    locale: Annotated[str, Depends(get_display_locale)],
) -> ParsedAmountResponse:
    """Parse user-typed text into a plain decimal amount."""

    parsed = parse_amount(text, locale)
    return ParsedAmountResponse(
        text=text,
        locale=locale,
        amount=format(parsed, "f") if parsed is not None else None,
    )


@router.get("/currencies", response_model=CurrenciesResponse)
def list_currencies() -> CurrenciesResponse:
    """List common currencies offered when creating a list."""

    return CurrenciesResponse(
        currencies=[CurrencyResponse.from_currency(item) for item in COMMON_CURRENCIES]
    )
