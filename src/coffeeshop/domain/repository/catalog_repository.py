"""Abstract repository for the read-only catalog.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from coffeeshop.domain.model.catalog import CatalogItem, StoreInfo


class CatalogRepository(ABC):

    @abstractmethod
    def get_by_id(self, item_id: int) -> CatalogItem | None:
        """Return a menu item by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[CatalogItem]:
        """Return every menu item in menu order."""

    @abstractmethod
    def store_info(self) -> StoreInfo:
        """Return opening hours and phone number."""
