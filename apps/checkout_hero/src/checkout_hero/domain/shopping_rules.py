"""Rules for shopping items: subtotal, validation and quantity display."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from babel.numbers import format_decimal

from checkout_hero.domain.amount_formatter import (
    LocaleLike,
    fraction_pattern,
    resolve_locale,
)
from checkout_hero.domain.errors import (
    EmptyItemNameError,
    InvalidRequestError,
    NegativePriceError,
    compose_error_message,
)

QUANTITY_PRECISION = Decimal("0.01")
# Largest values the Numeric(12, 2) and Numeric(12, 3) columns can hold.
MAX_PRICE_PER_UNIT = Decimal("9999999999.99")
MAX_QUANTITY = Decimal("999999999.999")

COMMON_UNITS = (
    "units",
    "kg",
    "g",
    "lb",
    "oz",
    "L",
    "mL",
    "gal",
    "pcs",
    "box",
    "bag",
    "bottle",
    "can",
)
DEFAULT_UNIT = "units"


def item_total_price(quantity: Decimal, price_per_unit: Decimal) -> Decimal:
    """Return the exact subtotal of an item (quantity times unit price)."""
    return quantity * price_per_unit


def normalize_item_name(name: str) -> str:
    """Return the trimmed item name or raise when it is blank."""
    trimmed = name.strip()
    if not trimmed:
        raise EmptyItemNameError()
    return trimmed


def validate_price_per_unit(price_per_unit: Decimal) -> Decimal:
    """Reject negative unit prices and prices too large to store."""
    if price_per_unit < 0:
        raise NegativePriceError(details={"price_per_unit": str(price_per_unit)})
    if price_per_unit > MAX_PRICE_PER_UNIT:
        raise InvalidRequestError(
            message=compose_error_message(
                cause=f"Unit price must not exceed {MAX_PRICE_PER_UNIT}.",
                action="Check the price for extra digits.",
            ),
            details={"price_per_unit": str(price_per_unit)},
        )
    return price_per_unit


def validate_item_fields(name: str, price_per_unit: Decimal) -> str:
    """Validate an item and return its normalized name."""
    normalized = normalize_item_name(name)
    validate_price_per_unit(price_per_unit)
    return normalized


def format_quantity(quantity: Decimal, unit: str, locale: LocaleLike) -> str:
    """Render ``quantity`` with up to two fraction digits followed by the unit."""
    resolved = resolve_locale(locale)
    number = format_decimal(
        quantity.quantize(QUANTITY_PRECISION, rounding=ROUND_HALF_UP),
        format=fraction_pattern(resolved, digits=2, optional=True),
        locale=resolved,
    )
    return f"{number} {unit}"
