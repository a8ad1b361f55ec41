"""Business service for shopping items."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Protocol
from uuid import UUID

from checkout_hero.db.base import utcnow
from checkout_hero.db.models.shopping_item import ShoppingItem
from checkout_hero.db.models.shopping_list import ShoppingList
from checkout_hero.domain.amount_formatter import LocaleLike, parse_amount
from checkout_hero.domain.errors import (
    InvalidRequestError,
    ShoppingItemNotFoundError,
    compose_error_message,
)
from checkout_hero.domain.money import quantize_money
from checkout_hero.domain.shopping_rules import (
    DEFAULT_UNIT,
    MAX_QUANTITY,
    normalize_item_name,
    validate_item_fields,
    validate_price_per_unit,
)
from checkout_hero.services.shopping_list_service import (
    SessionProtocol,
    ShoppingListService,
)

logger = logging.getLogger(__name__)


class ShoppingItemRepositoryProtocol(Protocol):
    """Shopping item repository contract consumed by service."""

    def list_for_list(self, shopping_list_id: UUID) -> list[ShoppingItem]: ...

    def get(self, item_id: UUID) -> ShoppingItem | None: ...

    def add(self, item: ShoppingItem) -> ShoppingItem: ...

    def delete(self, item: ShoppingItem) -> None: ...


@dataclass(slots=True, frozen=True)
class CreateItemInput:
    """Input model for adding an item to a list."""

    name: str
    price_per_unit: Decimal = Decimal("0")
    quantity: Decimal = Decimal("1")
    unit: str = DEFAULT_UNIT
    is_checked: bool = False


@dataclass(slots=True, frozen=True)
class UpdateItemInput:
    """Partial item update; ``None`` fields are left untouched.

    ``price_text`` is free text typed by the user and is only applied when it
    parses; an unparseable value keeps the current price.
    """

    name: str | None = None
    quantity: Decimal | None = None
    unit: str | None = None
    price_per_unit: Decimal | None = None
    price_text: str | None = None
    is_checked: bool | None = None


def validate_quantity(quantity: Decimal) -> Decimal:
    if not quantity.is_finite() or not 0 < quantity <= MAX_QUANTITY:
        raise InvalidRequestError(
            message=compose_error_message(
                cause=(
                    "Quantity must be greater than zero "
                    f"and at most {MAX_QUANTITY}."
                ),
                action="Provide a positive quantity such as 1 or 0.5.",
            ),
            details={"quantity": str(quantity)},
        )
    return quantity


def normalize_unit(unit: str) -> str:
    return unit.strip() or DEFAULT_UNIT


class ShoppingItemService:
    """Handles item registration, edition and check toggling."""

    def __init__(
        self,
        *,
        item_repository: ShoppingItemRepositoryProtocol,
        list_service: ShoppingListService,
        session: SessionProtocol,
    ) -> None:
        self._item_repository = item_repository
        self._list_service = list_service
        self._session = session

    def list_items(self, shopping_list_id: UUID) -> list[ShoppingItem]:
        self._list_service.get_list(shopping_list_id)
        return self._item_repository.list_for_list(shopping_list_id)

    def get_item(self, item_id: UUID) -> ShoppingItem:
        item = self._item_repository.get(item_id)
        if item is None:
            raise ShoppingItemNotFoundError(details={"item_id": str(item_id)})
        return item

    def add_item(self, shopping_list_id: UUID, payload: CreateItemInput) -> ShoppingItem:
        shopping_list = self._list_service.get_list(shopping_list_id)
        price_per_unit = quantize_money(payload.price_per_unit)
        name = validate_item_fields(payload.name, price_per_unit)
        quantity = validate_quantity(payload.quantity)

        try:
            item = ShoppingItem(
                name=name,
                quantity=quantity,
                unit=normalize_unit(payload.unit),
                price_per_unit=price_per_unit,
                is_checked=payload.is_checked,
                shopping_list=shopping_list,
            )
            created_item = self._item_repository.add(item)
            _touch(shopping_list)
            self._session.commit()
            self._session.refresh(created_item)
        except Exception:
            self._session.rollback()
            raise

        logger.info(
            "shopping_item_created",
            extra={
                "item_id": str(created_item.id),
                "shopping_list_id": str(shopping_list_id),
            },
        )
        return created_item

    def update_item(
        self,
        item_id: UUID,
        payload: UpdateItemInput,
        *,
        locale: LocaleLike,
    ) -> ShoppingItem:
        item = self.get_item(item_id)
        try:
            if payload.name is not None:
                item.name = normalize_item_name(payload.name)
            if payload.quantity is not None:
                item.quantity = validate_quantity(payload.quantity)
            if payload.unit is not None:
                item.unit = normalize_unit(payload.unit)
            if payload.price_per_unit is not None:
                item.price_per_unit = validate_price_per_unit(
                    quantize_money(payload.price_per_unit)
                )
            if payload.price_text is not None:
                self._apply_price_text(item, payload.price_text, locale)
            if payload.is_checked is not None:
                item.is_checked = payload.is_checked
            _touch(item.shopping_list)
            self._session.commit()
            self._session.refresh(item)
        except Exception:
            self._session.rollback()
            raise
        return item

    def toggle_item(self, item_id: UUID) -> ShoppingItem:
        item = self.get_item(item_id)
        try:
            item.is_checked = not item.is_checked
            _touch(item.shopping_list)
            self._session.commit()
            self._session.refresh(item)
        except Exception:
            self._session.rollback()
            raise
        return item

    def delete_item(self, item_id: UUID) -> None:
        item = self.get_item(item_id)
        shopping_list = item.shopping_list
        try:
            shopping_list.items.remove(item)
            self._item_repository.delete(item)
            _touch(shopping_list)
            self._session.commit()
        except Exception:
            self._session.rollback()
            raise

        logger.info(
            "shopping_item_deleted",
            extra={
                "item_id": str(item_id),
                "shopping_list_id": str(shopping_list.id),
            },
        )

    def _apply_price_text(
        self,
        item: ShoppingItem,
        price_text: str,
        locale: LocaleLike,
    ) -> None:
        parsed = parse_amount(price_text, locale)
        if parsed is None:
            logger.info(
                "price_text_ignored",
                extra={"item_id": str(item.id), "price_text": price_text},
            )
            return
        item.price_per_unit = validate_price_per_unit(quantize_money(parsed))


def _touch(shopping_list: ShoppingList) -> None:
    shopping_list.modified_at = utcnow()
