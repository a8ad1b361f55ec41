"""Shopping list persistence operations."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from checkout_hero.db.models.shopping_list import ShoppingList


class ShoppingListRepository:
    """Repository for shopping lists and their eagerly loaded items."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def list_all(self) -> list[ShoppingList]:
        statement = (
            select(ShoppingList)
            .options(selectinload(ShoppingList.items))
            .order_by(ShoppingList.modified_at.desc(), ShoppingList.name.asc())
        )
        return list(self._session.scalars(statement).all())

    def get(self, shopping_list_id: UUID) -> ShoppingList | None:
        statement = (
            select(ShoppingList)
            .options(selectinload(ShoppingList.items))
            .where(ShoppingList.id == shopping_list_id)
        )
        return self._session.scalar(statement)

    def add(self, shopping_list: ShoppingList) -> ShoppingList:
        self._session.add(shopping_list)
        self._session.flush()
        return shopping_list

    def delete(self, shopping_list: ShoppingList) -> None:
        self._session.delete(shopping_list)
        self._session.flush()
