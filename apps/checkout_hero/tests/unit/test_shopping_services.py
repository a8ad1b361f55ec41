from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from uuid import UUID, uuid4

import pytest

from checkout_hero.db.models.shopping_item import ShoppingItem
from checkout_hero.db.models.shopping_list import ShoppingList
from checkout_hero.domain.errors import (
    EmptyItemNameError,
    InvalidRequestError,
    NegativePriceError,
    ShoppingItemNotFoundError,
    ShoppingListNotFoundError,
)
from checkout_hero.services.shopping_item_service import (
    CreateItemInput,
    ShoppingItemService,
    UpdateItemInput,
)
from checkout_hero.services.shopping_list_service import (
    CreateListInput,
    ShoppingListService,
    UpdateListInput,
)


class FakeSession:
    def __init__(self) -> None:
        self.commits = 0
        self.rolled_back = False

    def commit(self) -> None:
        self.commits += 1

    def rollback(self) -> None:
        self.rolled_back = True

    def refresh(self, instance: object) -> None:
        _ = instance


@dataclass
class FakeListRepository:
    lists: dict[UUID, ShoppingList] = field(default_factory=dict)

    def list_all(self) -> list[ShoppingList]:
        return list(self.lists.values())

    def get(self, shopping_list_id: UUID) -> ShoppingList | None:
        return self.lists.get(shopping_list_id)

    def add(self, shopping_list: ShoppingList) -> ShoppingList:
        shopping_list.id = shopping_list.id or uuid4()
        self.lists[shopping_list.id] = shopping_list
        return shopping_list

    def delete(self, shopping_list: ShoppingList) -> None:
        del self.lists[shopping_list.id]


@dataclass
class FakeItemRepository:
    items: dict[UUID, ShoppingItem] = field(default_factory=dict)

    def list_for_list(self, shopping_list_id: UUID) -> list[ShoppingItem]:
        return [
            item
            for item in self.items.values()
            if item.shopping_list.id == shopping_list_id
        ]

    def get(self, item_id: UUID) -> ShoppingItem | None:
        return self.items.get(item_id)

    def add(self, item: ShoppingItem) -> ShoppingItem:
        item.id = item.id or uuid4()
        self.items[item.id] = item
        return item

    def delete(self, item: ShoppingItem) -> None:
        del self.items[item.id]


def build_services() -> tuple[ShoppingListService, ShoppingItemService, FakeSession]:
    session = FakeSession()
    list_service = ShoppingListService(
        list_repository=FakeListRepository(),
        session=session,
        default_currency_symbol="€",
    )
    item_service = ShoppingItemService(
        item_repository=FakeItemRepository(),
        list_service=list_service,
        session=session,
    )
    return list_service, item_service, session


def test_create_list_trims_name_and_uses_default_symbol() -> None:
    list_service, _, session = build_services()

    shopping_list = list_service.create_list(CreateListInput(name="  Party  "))

    assert shopping_list.name == "Party"
    assert shopping_list.currency_symbol == "€"
    assert session.commits == 1


def test_create_list_rejects_blank_name() -> None:
    list_service, _, session = build_services()

    with pytest.raises(InvalidRequestError):
        list_service.create_list(CreateListInput(name="   "))

    assert session.commits == 0


def test_update_list_changes_symbol_only() -> None:
    list_service, _, _ = build_services()
    shopping_list = list_service.create_list(
        CreateListInput(name="BBQ", currency_symbol="$")
    )

    updated = list_service.update_list(
        shopping_list.id, UpdateListInput(currency_symbol=" R$ ")
    )

    assert updated.name == "BBQ"
    assert updated.currency_symbol == "R$"


def test_update_list_rolls_back_on_invalid_symbol() -> None:
    list_service, _, session = build_services()
    shopping_list = list_service.create_list(CreateListInput(name="BBQ"))

    with pytest.raises(InvalidRequestError):
        list_service.update_list(
            shopping_list.id, UpdateListInput(currency_symbol="too-long-symbol")
        )

    assert session.rolled_back is True


def test_get_list_raises_not_found() -> None:
    list_service, _, _ = build_services()

    with pytest.raises(ShoppingListNotFoundError):
        list_service.get_list(uuid4())


def test_add_item_quantizes_price_and_updates_totals() -> None:
    list_service, item_service, _ = build_services()
    shopping_list = list_service.create_list(CreateListInput(name="Groceries"))

    item_service.add_item(
        shopping_list.id,
        CreateItemInput(
            name="Chicken",
            quantity=Decimal("1.5"),
            unit="kg",
            price_per_unit=Decimal("8.985"),
        ),
    )
    item = item_service.add_item(
        shopping_list.id,
        CreateItemInput(name="Milk", price_per_unit=Decimal("2.99"), is_checked=True),
    )

    assert item.unit == "units"
    assert shopping_list.items[0].price_per_unit == Decimal("8.99")
    totals = shopping_list.totals
    assert totals.total == Decimal("16.475")
    assert totals.checked == Decimal("2.99")
    assert totals.total == totals.checked + totals.remaining


@pytest.mark.parametrize(
    ("payload", "error_type"),
    [
        (CreateItemInput(name=" "), EmptyItemNameError),
        (CreateItemInput(name="Eggs", price_per_unit=Decimal("-1")), NegativePriceError),
        (CreateItemInput(name="Eggs", quantity=Decimal("0")), InvalidRequestError),
    ],
)
def test_add_item_rejects_invalid_fields(
    payload: CreateItemInput, error_type: type[Exception]
) -> None:
    list_service, item_service, _ = build_services()
    shopping_list = list_service.create_list(CreateListInput(name="Groceries"))

    with pytest.raises(error_type):
        item_service.add_item(shopping_list.id, payload)

    assert shopping_list.items == []


def test_update_item_applies_parsed_price_text() -> None:
    list_service, item_service, _ = build_services()
    shopping_list = list_service.create_list(CreateListInput(name="Groceries"))
    item = item_service.add_item(
        shopping_list.id, CreateItemInput(name="Cheese", price_per_unit=Decimal("5"))
    )

    updated = item_service.update_item(
        item.id, UpdateItemInput(price_text="12,99 €"), locale="de_DE"
    )

    assert updated.price_per_unit == Decimal("12.99")


def test_update_item_keeps_price_when_text_has_no_number() -> None:
    list_service, item_service, _ = build_services()
    shopping_list = list_service.create_list(CreateListInput(name="Groceries"))
    item = item_service.add_item(
        shopping_list.id, CreateItemInput(name="Cheese", price_per_unit=Decimal("5"))
    )

    updated = item_service.update_item(
        item.id,
        UpdateItemInput(name="Brie", price_text="abc"),
        locale="en_US",
    )

    assert updated.name == "Brie"
    assert updated.price_per_unit == Decimal("5.00")


def test_toggle_item_flips_checked_flag() -> None:
    list_service, item_service, _ = build_services()
    shopping_list = list_service.create_list(CreateListInput(name="Groceries"))
    item = item_service.add_item(shopping_list.id, CreateItemInput(name="Bread"))

    assert item_service.toggle_item(item.id).is_checked is True
    assert item_service.toggle_item(item.id).is_checked is False


def test_delete_item_removes_it_from_list() -> None:
    list_service, item_service, _ = build_services()
    shopping_list = list_service.create_list(CreateListInput(name="Groceries"))
    item = item_service.add_item(shopping_list.id, CreateItemInput(name="Bread"))

    item_service.delete_item(item.id)

    assert shopping_list.items == []
    with pytest.raises(ShoppingItemNotFoundError):
        item_service.get_item(item.id)


def test_list_items_requires_existing_list() -> None:
    _, item_service, _ = build_services()

    with pytest.raises(ShoppingListNotFoundError):
        item_service.list_items(uuid4())


def test_update_item_rejects_price_text_too_large_and_rolls_back() -> None:
    list_service, item_service, session = build_services()
    shopping_list = list_service.create_list(CreateListInput(name="Groceries"))
    item = item_service.add_item(
        shopping_list.id, CreateItemInput(name="Cheese", price_per_unit=Decimal("5"))
    )

    with pytest.raises(InvalidRequestError):
        item_service.update_item(
            item.id, UpdateItemInput(price_text="9" * 28), locale="en_US"
        )

    assert session.rolled_back is True
    assert item.price_per_unit == Decimal("5.00")
