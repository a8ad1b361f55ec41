"""ORM models for the checkout_hero domain."""

from checkout_hero.db.models.shopping_item import ShoppingItem
from checkout_hero.db.models.shopping_list import ShoppingList

__all__ = [
    "ShoppingItem",
    "ShoppingList",
]
