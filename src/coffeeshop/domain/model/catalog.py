"""Catalog entities: the menu and the shop's opening information.

Both are seeded at startup and never change while the process runs.
"""

from __future__ import annotations

from dataclasses import dataclass

from coffeeshop.domain.model.value_objects import Money


@dataclass(frozen=True)
class CatalogItem:
    """A purchasable menu entry."""

    id: int
    name: str
    price: Money
    description: str


@dataclass(frozen=True)
class StoreInfo:
    weekdays: str
    weekends: str
    phone: str
