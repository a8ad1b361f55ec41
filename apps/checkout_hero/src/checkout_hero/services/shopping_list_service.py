"""Business service for shopping lists."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from checkout_hero.db.models.shopping_list import ShoppingList
from checkout_hero.domain.errors import (
    InvalidRequestError,
    ShoppingListNotFoundError,
    compose_error_message,
)

logger = logging.getLogger(__name__)

MAX_LIST_NAME_LENGTH = 120
MAX_CURRENCY_SYMBOL_LENGTH = 8


class SessionProtocol(Protocol):
    """Subset of SQLAlchemy session APIs used by this service."""

    def commit(self) -> None: ...
    def rollback(self) -> None: ...
    def refresh(self, instance: object) -> None: ...


class ShoppingListRepositoryProtocol(Protocol):
    """Shopping list repository contract consumed by services."""

    def list_all(self) -> list[ShoppingList]: ...

    def get(self, shopping_list_id: UUID) -> ShoppingList | None: ...

    def add(self, shopping_list: ShoppingList) -> ShoppingList: ...

    def delete(self, shopping_list: ShoppingList) -> None: ...


@dataclass(slots=True, frozen=True)
class CreateListInput:
    """Input model for list creation."""

    name: str
    currency_symbol: str | None = None


@dataclass(slots=True, frozen=True)
class UpdateListInput:
    """Partial update of a list; ``None`` fields are left untouched."""

    name: str | None = None
    currency_symbol: str | None = None


def normalize_list_name(name: str) -> str:
    trimmed = name.strip()
    if not trimmed or len(trimmed) > MAX_LIST_NAME_LENGTH:
        raise InvalidRequestError(
            message=compose_error_message(
                cause="List name must have between 1 and 120 characters.",
                action="Provide a non-blank list name.",
            )
        )
    return trimmed


def normalize_currency_symbol(symbol: str) -> str:
    trimmed = symbol.strip()
    if not trimmed or len(trimmed) > MAX_CURRENCY_SYMBOL_LENGTH:
        raise InvalidRequestError(
            message=compose_error_message(
                cause="Currency symbol must have between 1 and 8 characters.",
                action="Pick a common currency or type a short custom symbol.",
            )
        )
    return trimmed


class ShoppingListService:
    """Handles creation, renaming and deletion of shopping lists."""

    def __init__(
        self,
        *,
        list_repository: ShoppingListRepositoryProtocol,
        session: SessionProtocol,
        default_currency_symbol: str = "$",
    ) -> None:
        self._list_repository = list_repository
        self._session = session
        self._default_currency_symbol = default_currency_symbol

    def list_lists(self) -> list[ShoppingList]:
        return self._list_repository.list_all()

    def get_list(self, shopping_list_id: UUID) -> ShoppingList:
        shopping_list = self._list_repository.get(shopping_list_id)
        if shopping_list is None:
            raise ShoppingListNotFoundError(
                details={"shopping_list_id": str(shopping_list_id)}
            )
        return shopping_list

    def create_list(self, payload: CreateListInput) -> ShoppingList:
        name = normalize_list_name(payload.name)
        currency_symbol = normalize_currency_symbol(
            payload.currency_symbol or self._default_currency_symbol
        )
        try:
            shopping_list = self._list_repository.add(
                ShoppingList(name=name, currency_symbol=currency_symbol, items=[])
            )
            self._session.commit()
            self._session.refresh(shopping_list)
        except Exception:
            self._session.rollback()
            raise

        logger.info(
            "shopping_list_created",
            extra={
                "shopping_list_id": str(shopping_list.id),
                "currency_symbol": currency_symbol,
            },
        )
        return shopping_list

    def update_list(
        self, shopping_list_id: UUID, payload: UpdateListInput
    ) -> ShoppingList:
        shopping_list = self.get_list(shopping_list_id)
        try:
            if payload.name is not None:
                shopping_list.name = normalize_list_name(payload.name)
            if payload.currency_symbol is not None:
                shopping_list.currency_symbol = normalize_currency_symbol(
                    payload.currency_symbol
                )
            self._session.commit()
            self._session.refresh(shopping_list)
        except Exception:
            self._session.rollback()
            raise
        return shopping_list

    def delete_list(self, shopping_list_id: UUID) -> None:
        shopping_list = self.get_list(shopping_list_id)
        item_count = len(shopping_list.items)
        try:
            self._list_repository.delete(shopping_list)
            self._session.commit()
        except Exception:
            self._session.rollback()
            raise

        logger.info(
            "shopping_list_deleted",
            extra={
                "shopping_list_id": str(shopping_list_id),
                "deleted_items": item_count,
            },
        )
