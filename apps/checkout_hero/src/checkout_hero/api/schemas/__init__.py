"""API request and response schemas."""

from checkout_hero.api.schemas.formatting import (
    CurrenciesResponse,
    FormattedAmountResponse,
    ParsedAmountResponse,
)
from checkout_hero.api.schemas.shopping_items import (
    CreateItemRequest,
    ShoppingItemResponse,
    ShoppingItemsResponse,
    UpdateItemRequest,
)
from checkout_hero.api.schemas.shopping_lists import (
    CreateListRequest,
    ShoppingListResponse,
    ShoppingListsResponse,
    UpdateListRequest,
)

__all__ = [
    "CreateItemRequest",
    "CreateListRequest",
    "CurrenciesResponse",
    "FormattedAmountResponse",
    "ParsedAmountResponse",
    "ShoppingItemResponse",
    "ShoppingItemsResponse",
    "ShoppingListResponse",
    "ShoppingListsResponse",
    "UpdateItemRequest",
    "UpdateListRequest",
]
