"""Seed data for the catalog."""

from __future__ import annotations

from coffeeshop.domain.model.catalog import CatalogItem, StoreInfo
from coffeeshop.domain.model.value_objects import Money

COFFEE_MENU: list[CatalogItem] = [
    CatalogItem(1, "Cappuccino", Money.of(49),
                "Perfect blend of espresso, steamed milk, and milk foam"),
    CatalogItem(2, "Americano", Money.of(49),
                "Rich espresso shots with hot water for a bold flavor"),
    CatalogItem(3, "Espresso", Money.of(49),
                "Pure, concentrated coffee shot for true coffee lovers"),
    CatalogItem(4, "Macchiato", Money.of(49),
                "Espresso marked with a dollop of steamed milk foam"),
    CatalogItem(5, "Mocha", Money.of(49),
                "Delicious combination of espresso, chocolate, and steamed milk"),
    CatalogItem(6, "Coffee Latte", Money.of(49),
                "Smooth espresso with steamed milk and light foam"),
    CatalogItem(7, "Piccolo Latte", Money.of(49),
                "Small but strong latte with perfect milk to coffee ratio"),
    CatalogItem(8, "Ristretto", Money.of(49),
                "Short shot of espresso with intense flavor"),
    CatalogItem(9, "Affogato", Money.of(49),
                "Vanilla ice cream drowned in a shot of hot espresso"),
]

STORE_INFO = StoreInfo(
    weekdays="Mon-Fri: 8am to 2pm",
    weekends="Sat-Sun: 11am to 4pm",
    phone="(012) 6985 236 7512",
)
