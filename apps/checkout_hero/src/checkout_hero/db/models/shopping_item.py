"""Shopping item ORM model."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    DateTime,
    ForeignKey,
    Index,
    Numeric,
    String,
    false,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from checkout_hero.db.base import Base, utcnow
from checkout_hero.domain.shopping_rules import DEFAULT_UNIT, item_total_price

if TYPE_CHECKING:
    from checkout_hero.db.models.shopping_list import ShoppingList


class ShoppingItem(Base):
    """One line of a shopping list."""

    __tablename__ = "shopping_items"
    __table_args__ = (
        CheckConstraint(
            "price_per_unit >= 0",
            name="ck_shopping_items_price_non_negative",
        ),
        CheckConstraint("quantity > 0", name="ck_shopping_items_quantity_positive"),
        Index("ix_shopping_items_shopping_list_id", "shopping_list_id"),
    )

    id: Mapped[UUID] = mapped_column(primary_key=True, default=uuid4)
    shopping_list_id: Mapped[UUID] = mapped_column(
        ForeignKey("shopping_lists.id", ondelete="CASCADE"),
        nullable=False,
    )
    name: Mapped[str] = mapped_column(String(120), nullable=False)
    quantity: Mapped[Decimal] = mapped_column(Numeric(12, 3), nullable=False)
    unit: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        default=DEFAULT_UNIT,
    )
    price_per_unit: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    is_checked: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        server_default=false(),
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=func.now(),
    )

    shopping_list: Mapped[ShoppingList] = relationship(back_populates="items")

    @property
    def total_price(self) -> Decimal:
        return item_total_price(self.quantity, self.price_per_unit)
