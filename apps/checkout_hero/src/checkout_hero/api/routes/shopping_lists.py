"""Shopping list routes."""

from __future__ import annotations

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from checkout_hero.api.dependencies import (
    get_display_locale,
    get_shopping_list_service,
)
from checkout_hero.api.schemas.shopping_lists import (
    CreateListRequest,
    ShoppingListResponse,
    ShoppingListsResponse,
    UpdateListRequest,
)
from checkout_hero.services.shopping_list_service import (
    CreateListInput,
    ShoppingListService,
    UpdateListInput,
)

router = APIRouter(prefix="/lists", tags=["Shopping lists"])


@router.get("", response_model=ShoppingListsResponse)
def list_shopping_lists(
    service: Annotated[ShoppingListService, Depends(get_shopping_list_service)],
    locale: Annotated[str, Depends(get_display_locale)],
) -> ShoppingListsResponse:
    """List shopping lists, most recently modified first."""

    return ShoppingListsResponse.from_models(service.list_lists(), locale=locale)


@router.post(
    "",
    response_model=ShoppingListResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Invalid payload"}},
)
def create_shopping_list(
    payload: CreateListRequest,
    service: Annotated[ShoppingListService, Depends(get_shopping_list_service)],
    locale: Annotated[str, Depends(get_display_locale)],
) -> ShoppingListResponse:
    """Create an empty shopping list."""

    shopping_list = service.create_list(
        CreateListInput(name=payload.name, currency_symbol=payload.currency_symbol)
    )
    return ShoppingListResponse.from_model(shopping_list, locale=locale)


@router.get(
    "/{shopping_list_id}",
    response_model=ShoppingListResponse,
    responses={404: {"description": "Shopping list not found"}},
)
def get_shopping_list(
    shopping_list_id: UUID,
    service: Annotated[ShoppingListService, Depends(get_shopping_list_service)],
    locale: Annotated[str, Depends(get_display_locale)],
) -> ShoppingListResponse:
    """Return one list with its running totals."""

    shopping_list = service.get_list(shopping_list_id)
    return ShoppingListResponse.from_model(shopping_list, locale=locale)


@router.patch(
    "/{shopping_list_id}",
    response_model=ShoppingListResponse,
    responses={
        400: {"description": "Invalid payload"},
        404: {"description": "Shopping list not found"},
    },
)
def update_shopping_list(
    shopping_list_id: UUID,
    payload: UpdateListRequest,
    service: Annotated[ShoppingListService, Depends(get_shopping_list_service)],
    locale: Annotated[str, Depends(get_display_locale)],
) -> ShoppingListResponse:
    """Rename a list or change its currency symbol."""

    shopping_list = service.update_list(
        shopping_list_id,
        UpdateListInput(name=payload.name, currency_symbol=payload.currency_symbol),
    )
    return ShoppingListResponse.from_model(shopping_list, locale=locale)


@router.delete(
    "/{shopping_list_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"description": "Shopping list not found"}},
)
def delete_shopping_list(
    shopping_list_id: UUID,
    service: Annotated[ShoppingListService, Depends(get_shopping_list_service)],
) -> Response:
    """Delete a list together with all of its items."""

    service.delete_list(shopping_list_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
