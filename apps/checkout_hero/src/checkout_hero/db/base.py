"""SQLAlchemy base metadata and model registration utilities."""

from datetime import UTC, datetime
from importlib import import_module

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for ORM models."""


def utcnow() -> datetime:
    """Return the current aware UTC timestamp used for audit columns."""

    return datetime.now(tz=UTC)


def import_orm_models() -> None:
    """Import ORM models so metadata is fully populated."""

    modules = (
        "checkout_hero.db.models.shopping_list",
        "checkout_hero.db.models.shopping_item",
    )
    for module_name in modules:
        import_module(module_name)
