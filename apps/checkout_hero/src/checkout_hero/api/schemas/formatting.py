"""Schemas for amount formatting, parsing and currency catalog endpoints."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

from checkout_hero.domain.catalog import Currency

FormatStyle = Literal["standard", "whole", "compact"]
SymbolPosition = Literal["prefix", "suffix"]


class FormattedAmountResponse(BaseModel):
    """Rendering of one amount."""

    amount: str
    currency_symbol: str
    locale: str
    style: FormatStyle
    symbol_position: SymbolPosition
    formatted: str


class ParsedAmountResponse(BaseModel):
    """Parsing result; ``amount`` is null when the text holds no number."""

    text: str
    locale: str
    amount: str | None


class CurrencyResponse(BaseModel):
    """One selectable currency."""

    symbol: str
    name: str
    code: str

    @classmethod
    def from_currency(cls, currency: Currency) -> CurrencyResponse:
        return cls(symbol=currency.symbol, name=currency.name, code=currency.code)


class CurrenciesResponse(BaseModel):
    """Common currencies payload."""

    currencies: list[CurrencyResponse]
