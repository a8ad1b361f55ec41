"""Schemas for shopping item endpoints."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from checkout_hero.db.models.shopping_item import ShoppingItem
from checkout_hero.domain.amount_formatter import format_amount
from checkout_hero.domain.money import format_money
from checkout_hero.domain.shopping_rules import DEFAULT_UNIT, format_quantity

PRICE_PATTERN = r"^[0-9]{1,10}(\.[0-9]{1,2})?$"
QUANTITY_PATTERN = r"^[0-9]{1,9}(\.[0-9]{1,3})?$"


def decimal_text(value: Decimal) -> str:
    """Render a decimal without exponent or trailing zeros."""

    return format(value.normalize(), "f")


class CreateItemRequest(BaseModel):
    """Payload for adding an item to a list."""

    name: str = Field(min_length=1, max_length=120)
    quantity: str = Field(default="1", pattern=QUANTITY_PATTERN)
    unit: str = Field(default=DEFAULT_UNIT, max_length=32)
    price_per_unit: str = Field(default="0.00", pattern=PRICE_PATTERN)
    is_checked: bool = False

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        trimmed = value.strip()
        if not trimmed:
            raise ValueError("Name cannot be blank.")
        return trimmed


class UpdateItemRequest(BaseModel):
    """Partial item update.

    ``price_text`` accepts what the user typed (``"$3,50"``) and is parsed
    with the request locale; text without a number leaves the price as is.
    """

    name: str | None = Field(default=None, min_length=1, max_length=120)
    quantity: str | None = Field(default=None, pattern=QUANTITY_PATTERN)
    unit: str | None = Field(default=None, max_length=32)
    price_per_unit: str | None = Field(default=None, pattern=PRICE_PATTERN)
    price_text: str | None = Field(default=None, max_length=64)
    is_checked: bool | None = None


class ShoppingItemResponse(BaseModel):
    """Serialized shopping item returned by API."""

    id: UUID
    shopping_list_id: UUID
    name: str
    quantity: str
    unit: str
    formatted_quantity: str
    price_per_unit: str
    total_price: str
    formatted_price_per_unit: str
    formatted_total_price: str
    is_checked: bool
    created_at: datetime

    @classmethod
    def from_model(
        cls,
        item: ShoppingItem,
        *,
        currency_symbol: str,
        locale: str,
    ) -> ShoppingItemResponse:
        return cls(
            id=item.id,
            shopping_list_id=item.shopping_list_id,
            name=item.name,
            quantity=decimal_text(item.quantity),
            unit=item.unit,
            formatted_quantity=format_quantity(item.quantity, item.unit, locale),
            price_per_unit=format_money(item.price_per_unit),
            total_price=format_money(item.total_price),
            formatted_price_per_unit=format_amount(
                item.price_per_unit, currency_symbol, locale
            ),
            formatted_total_price=format_amount(
                item.total_price, currency_symbol, locale
            ),
            is_checked=item.is_checked,
            created_at=item.created_at,
        )


class ShoppingItemsResponse(BaseModel):
    """Items of one list."""

    items: list[ShoppingItemResponse]

