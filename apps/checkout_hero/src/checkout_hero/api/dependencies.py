"""API dependency providers."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Query
from sqlalchemy.orm import Session

from checkout_hero.core.settings import Settings, get_settings
from checkout_hero.db.session import get_db_session
from checkout_hero.domain.amount_formatter import resolve_locale
from checkout_hero.domain.language import SYSTEM_LANGUAGE, resolve_display_locale
from checkout_hero.repositories.shopping_item_repository import (
    ShoppingItemRepository,
)
from checkout_hero.repositories.shopping_list_repository import (
    ShoppingListRepository,
)
from checkout_hero.services.shopping_item_service import ShoppingItemService
from checkout_hero.services.shopping_list_service import ShoppingListService


def get_display_locale(
    settings: Annotated[Settings, Depends(get_settings)],
    locale: Annotated[str | None, Query(min_length=2, max_length=35)] = None,
    language: Annotated[str, Query(min_length=2, max_length=16)] = SYSTEM_LANGUAGE,
) -> str:
    """Resolve the locale used to render amounts for this request.

    An explicit ``locale`` wins; otherwise the ``language`` preference is
    resolved against the configured default locale.
    """

    tag = locale or resolve_display_locale(language, settings.default_locale)
    return str(resolve_locale(tag))


def get_shopping_list_service(
    session: Annotated[Session, Depends(get_db_session)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> ShoppingListService:
    """Build shopping list service with per-request session."""

    return ShoppingListService(
        list_repository=ShoppingListRepository(session),
        session=session,
        default_currency_symbol=settings.default_currency_symbol,
    )


def get_shopping_item_service(
    session: Annotated[Session, Depends(get_db_session)],
    list_service: Annotated[ShoppingListService, Depends(get_shopping_list_service)],
) -> ShoppingItemService:
    """Build shopping item service sharing the request session."""

    return ShoppingItemService(
        item_repository=ShoppingItemRepository(session),
        list_service=list_service,
        session=session,
    )
