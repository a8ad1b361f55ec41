"""Shopping item persistence operations."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from checkout_hero.db.models.shopping_item import ShoppingItem


class ShoppingItemRepository:
    """Repository for items belonging to shopping lists."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def list_for_list(self, shopping_list_id: UUID) -> list[ShoppingItem]:
        """Return items with unchecked ones first, each group by creation."""

        statement = (
            select(ShoppingItem)
            .where(ShoppingItem.shopping_list_id == shopping_list_id)
            .order_by(ShoppingItem.is_checked.asc(), ShoppingItem.created_at.asc())
        )
        return list(self._session.scalars(statement).all())

    def get(self, item_id: UUID) -> ShoppingItem | None:
        return self._session.get(ShoppingItem, item_id)

    def add(self, item: ShoppingItem) -> ShoppingItem:
        self._session.add(item)
        self._session.flush()
        return item

    def delete(self, item: ShoppingItem) -> None:
        self._session.delete(item)
        self._session.flush()
