"""Schemas for shopping list endpoints."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from checkout_hero.db.models.shopping_list import ShoppingList
from checkout_hero.domain.amount_formatter import format_amount
from checkout_hero.domain.money import format_money
from checkout_hero.domain.totals import ListTotals

MONEY_PATTERN = r"^-?[0-9]+\.[0-9]{2}$"


class CreateListRequest(BaseModel):
    """Payload for creating a shopping list."""

    name: str = Field(min_length=1, max_length=120)
    currency_symbol: str | None = Field(default=None, min_length=1, max_length=8)

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        trimmed = value.strip()
        if not trimmed:
            raise ValueError("Name cannot be blank.")
        return trimmed


class UpdateListRequest(BaseModel):
    """Payload for renaming a list or changing its currency symbol."""

    name: str | None = Field(default=None, min_length=1, max_length=120)
    currency_symbol: str | None = Field(default=None, min_length=1, max_length=8)


class ListTotalsResponse(BaseModel):
    """Plain and formatted running totals of a list."""

    total: str = Field(pattern=MONEY_PATTERN)
    checked: str = Field(pattern=MONEY_PATTERN)
    remaining: str = Field(pattern=MONEY_PATTERN)
    formatted_total: str
    formatted_checked: str
    formatted_remaining: str
    item_count: int
    checked_item_count: int
    progress: float = Field(ge=0, le=1)

    @classmethod
    def from_totals(
        cls,
        totals: ListTotals,
        *,
        currency_symbol: str,
        locale: str,
    ) -> ListTotalsResponse:
        totals = totals.rounded()
        return cls(
            total=format_money(totals.total),
            checked=format_money(totals.checked),
            remaining=format_money(totals.remaining),
            formatted_total=format_amount(totals.total, currency_symbol, locale),
            formatted_checked=format_amount(totals.checked, currency_symbol, locale),
            formatted_remaining=format_amount(
                totals.remaining, currency_symbol, locale
            ),
            item_count=totals.item_count,
            checked_item_count=totals.checked_item_count,
            progress=totals.progress,
        )


class ShoppingListResponse(BaseModel):
    """Serialized shopping list returned by API."""

    id: UUID
    name: str
    currency_symbol: str
    locale: str
    created_at: datetime
    modified_at: datetime
    totals: ListTotalsResponse

    @classmethod
    def from_model(
        cls, shopping_list: ShoppingList, *, locale: str
    ) -> ShoppingListResponse:
        return cls(
            id=shopping_list.id,
            name=shopping_list.name,
            currency_symbol=shopping_list.currency_symbol,
            locale=locale,
            created_at=shopping_list.created_at,
            modified_at=shopping_list.modified_at,
            totals=ListTotalsResponse.from_totals(
                shopping_list.totals,
                currency_symbol=shopping_list.currency_symbol,
                locale=locale,
            ),
        )


class ShoppingListsResponse(BaseModel):
    """Shopping lists payload."""

    lists: list[ShoppingListResponse]

    @classmethod
    def from_models(
        cls, shopping_lists: list[ShoppingList], *, locale: str
    ) -> ShoppingListsResponse:
        return cls(
            lists=[
                ShoppingListResponse.from_model(item, locale=locale)
                for item in shopping_lists
            ]
        )
