"""Application service: List Menu use case (query)."""

from __future__ import annotations

from coffeeshop.application.dto import CatalogItemDTO
from coffeeshop.domain.repository.catalog_repository import CatalogRepository


class ListMenuHandler:

    def __init__(self, catalog_repo: CatalogRepository) -> None:
        self._catalog_repo = catalog_repo

    def handle(self) -> list[CatalogItemDTO]:
        return [CatalogItemDTO.from_domain(item) for item in self._catalog_repo.list_all()]
