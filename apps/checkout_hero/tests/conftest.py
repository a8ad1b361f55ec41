from __future__ import annotations

from collections.abc import Generator
from datetime import UTC, datetime, timedelta
from decimal import Decimal
from uuid import UUID

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from checkout_hero.api.app import create_app
from checkout_hero.db.base import Base, import_orm_models
from checkout_hero.db.models.shopping_item import ShoppingItem
from checkout_hero.db.models.shopping_list import ShoppingList
from checkout_hero.db.session import build_engine, get_db_session


@pytest.fixture
def sqlite_session_factory() -> Generator[sessionmaker[Session], None, None]:
    import_orm_models()
    engine = build_engine("sqlite+pysqlite:///:memory:", poolclass=StaticPool)
    Base.metadata.create_all(engine)
    factory = sessionmaker(
        bind=engine,
        class_=Session,
        autoflush=False,
        autocommit=False,
        expire_on_commit=False,
    )
    try:
        yield factory
    finally:
        Base.metadata.drop_all(engine)


def seed_grocery_list(session: Session) -> UUID:
    added_at = datetime(2024, 5, 4, 9, 30, tzinfo=UTC)
    shopping_list = ShoppingList(name="Weekly Groceries", currency_symbol="$")
    shopping_list.items = [
        ShoppingItem(
            name="Apples",
            quantity=Decimal("2"),
            unit="kg",
            price_per_unit=Decimal("3.50"),
            is_checked=True,
            created_at=added_at,
        ),
        ShoppingItem(
            name="Milk",
            quantity=Decimal("1"),
            unit="L",
            price_per_unit=Decimal("2.99"),
            created_at=added_at + timedelta(minutes=1),
        ),
        ShoppingItem(
            name="Chicken",
            quantity=Decimal("1.5"),
            unit="kg",
            price_per_unit=Decimal("8.99"),
            created_at=added_at + timedelta(minutes=2),
        ),
    ]
    session.add(shopping_list)
    session.commit()
    return shopping_list.id


@pytest.fixture
def client(
    sqlite_session_factory: sessionmaker[Session],
) -> Generator[TestClient, None, None]:
    app = create_app()

    def override_get_db_session() -> Generator[Session, None, None]:
        with sqlite_session_factory() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def grocery_list_id(sqlite_session_factory: sessionmaker[Session]) -> UUID:
    with sqlite_session_factory() as session:
        return seed_grocery_list(session)
