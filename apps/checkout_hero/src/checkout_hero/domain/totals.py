"""Running totals for a shopping list."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Protocol

from checkout_hero.domain.money import quantize_money


class PricedItem(Protocol):
    """Item shape consumed by the aggregation helpers."""

    @property
    def total_price(self) -> Decimal: ...

    @property
    def is_checked(self) -> bool: ...


@dataclass(frozen=True, slots=True)
class ListTotals:
    """Aggregated amounts and counts of one shopping list."""

    total: Decimal
    checked: Decimal
    item_count: int
    checked_item_count: int

    @property
    def remaining(self) -> Decimal:
        """Amount still to be picked up, defined as ``total - checked``."""
        return self.total - self.checked

    @property
    def progress(self) -> float:
        """Share of checked items in ``[0, 1]``; zero for an empty list."""
        if self.item_count == 0:
            return 0.0
        return self.checked_item_count / self.item_count

    def rounded(self) -> ListTotals:
        """Return totals with ``total`` and ``checked`` rounded to cents.

        ``remaining`` stays derived, so the rounded amounts still satisfy
        ``total == checked + remaining``.
        """
        return replace(
            self,
            total=quantize_money(self.total),
            checked=quantize_money(self.checked),
        )


def compute_list_totals(items: Iterable[PricedItem]) -> ListTotals:
    """Sum item subtotals overall and for checked items only."""

    total = Decimal("0")
    checked = Decimal("0")
    item_count = 0
    checked_item_count = 0
    for item in items:
        item_count += 1
        total += item.total_price
        if item.is_checked:
            checked += item.total_price
            checked_item_count += 1
    return ListTotals(
        total=total,
        checked=checked,
        item_count=item_count,
        checked_item_count=checked_item_count,
    )
