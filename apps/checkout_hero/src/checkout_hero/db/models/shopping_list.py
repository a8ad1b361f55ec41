"""Shopping list ORM model."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from sqlalchemy import DateTime, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from checkout_hero.db.base import Base, utcnow
from checkout_hero.domain.totals import ListTotals, compute_list_totals

if TYPE_CHECKING:
    from checkout_hero.db.models.shopping_item import ShoppingItem


class ShoppingList(Base):
    """Named list of items priced in a single currency symbol."""

    __tablename__ = "shopping_lists"

    id: Mapped[UUID] = mapped_column(primary_key=True, default=uuid4)
    name: Mapped[str] = mapped_column(String(120), nullable=False)
    currency_symbol: Mapped[str] = mapped_column(
        String(8),
        nullable=False,
        default="$",
        server_default="$",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=func.now(),
    )
    modified_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=func.now(),
        onupdate=utcnow,
    )

    items: Mapped[list[ShoppingItem]] = relationship(
        back_populates="shopping_list",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="ShoppingItem.created_at",
    )

    @property
    def totals(self) -> ListTotals:
        return compute_list_totals(self.items)
