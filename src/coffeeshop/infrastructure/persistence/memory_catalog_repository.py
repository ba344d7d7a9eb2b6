"""In-memory, read-only implementation of CatalogRepository."""

from __future__ import annotations

from coffeeshop.domain.exceptions import ValidationError
from coffeeshop.domain.model.catalog import CatalogItem, StoreInfo
from coffeeshop.domain.repository.catalog_repository import CatalogRepository


class InMemoryCatalogRepository(CatalogRepository):

    def __init__(self, items: list[CatalogItem], store_info: StoreInfo) -> None:
        self._items: dict[int, CatalogItem] = {}
        for item in items:
            if item.id in self._items:
                raise ValidationError(f"Duplicate menu item ID {item.id}")
            self._items[item.id] = item
        self._store_info = store_info

    def get_by_id(self, item_id: int) -> CatalogItem | None:
        return self._items.get(item_id)

    def list_all(self) -> list[CatalogItem]:
        return list(self._items.values())

    def store_info(self) -> StoreInfo:
        return self._store_info
