"""Application service: Show Store Info use case (query)."""

from __future__ import annotations

from coffeeshop.application.dto import StoreInfoDTO
from coffeeshop.domain.repository.catalog_repository import CatalogRepository


class ShowStoreInfoHandler:

    def __init__(self, catalog_repo: CatalogRepository) -> None:
        self._catalog_repo = catalog_repo

    def handle(self) -> StoreInfoDTO:
        return StoreInfoDTO.from_domain(self._catalog_repo.store_info())
