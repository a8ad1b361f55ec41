"""API v1 router registration."""

from fastapi import APIRouter

from checkout_hero.api.routes import formatting, shopping_items, shopping_lists

v1_router = APIRouter(prefix="/v1")
v1_router.include_router(shopping_lists.router)
v1_router.include_router(shopping_items.list_items_router)
v1_router.include_router(shopping_items.router)
v1_router.include_router(formatting.router)
