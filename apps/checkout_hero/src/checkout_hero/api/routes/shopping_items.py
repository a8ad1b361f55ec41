"""Shopping item routes."""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from checkout_hero.api.dependencies import (
    get_display_locale,
    get_shopping_item_service,
)
from checkout_hero.api.schemas.shopping_items import (
    CreateItemRequest,
    ShoppingItemResponse,
    ShoppingItemsResponse,
    UpdateItemRequest,
)
from checkout_hero.db.models.shopping_item import ShoppingItem
from checkout_hero.services.shopping_item_service import (
    CreateItemInput,
    ShoppingItemService,
    UpdateItemInput,
)

list_items_router = APIRouter(prefix="/lists/{shopping_list_id}/items", tags=["Items"])
router = APIRouter(prefix="/items", tags=["Items"])


def _item_response(item: ShoppingItem, locale: str) -> ShoppingItemResponse:
    return ShoppingItemResponse.from_model(
        item,
        currency_symbol=item.shopping_list.currency_symbol,
        locale=locale,
    )


@list_items_router.get(
    "",
    response_model=ShoppingItemsResponse,
    responses={404: {"description": "Shopping list not found"}},
)
def list_items(
    shopping_list_id: UUID,
    service: Annotated[ShoppingItemService, Depends(get_shopping_item_service)],
    locale: Annotated[str, Depends(get_display_locale)],
) -> ShoppingItemsResponse:
    """List items of a list, unchecked first."""

    items = service.list_items(shopping_list_id)
    return ShoppingItemsResponse(items=[_item_response(item, locale) for item in items])


@list_items_router.post(
    "",
    response_model=ShoppingItemResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"description": "Invalid payload"},
        404: {"description": "Shopping list not found"},
        422: {"description": "Item rule violated"},
    },
)
def add_item(
    shopping_list_id: UUID,
    payload: CreateItemRequest,
    service: Annotated[ShoppingItemService, Depends(get_shopping_item_service)],
    locale: Annotated[str, Depends(get_display_locale)],
) -> ShoppingItemResponse:
    """Add an item to a list."""

    item = service.add_item(
        shopping_list_id,
        CreateItemInput(
            name=payload.name,
            quantity=Decimal(payload.quantity),
            unit=payload.unit,
            price_per_unit=Decimal(payload.price_per_unit),
            is_checked=payload.is_checked,
        ),
    )
    return _item_response(item, locale)


@router.patch(
    "/{item_id}",
    response_model=ShoppingItemResponse,
    responses={
        400: {"description": "Invalid payload"},
        404: {"description": "Item not found"},
        422: {"description": "Item rule violated"},
    },
)
def update_item(
    item_id: UUID,
    payload: UpdateItemRequest,
    service: Annotated[ShoppingItemService, Depends(get_shopping_item_service)],
    locale: Annotated[str, Depends(get_display_locale)],
) -> ShoppingItemResponse:
    """Edit an item; unparseable ``price_text`` keeps the current price."""

    item = service.update_item(
        item_id,
        UpdateItemInput(
            name=payload.name,
            quantity=Decimal(payload.quantity) if payload.quantity else None,
            unit=payload.unit,
            price_per_unit=(
                Decimal(payload.price_per_unit) if payload.price_per_unit else None
            ),
            price_text=payload.price_text,
            is_checked=payload.is_checked,
        ),
        locale=locale,
    )
    return _item_response(item, locale)


@router.post(
    "/{item_id}/toggle",
    response_model=ShoppingItemResponse,
    responses={404: {"description": "Item not found"}},
)
def toggle_item(
    item_id: UUID,
    service: Annotated[ShoppingItemService, Depends(get_shopping_item_service)],
    locale: Annotated[str, Depends(get_display_locale)],
) -> ShoppingItemResponse:
    """Flip the checked flag of an item."""

    return _item_response(service.toggle_item(item_id), locale)


@router.delete(
    "/{item_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"description": "Item not found"}},
)
def delete_item(
    item_id: UUID,
    service: Annotated[ShoppingItemService, Depends(get_shopping_item_service)],
) -> Response:
    """Remove an item from its list."""

    service.delete_item(item_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
