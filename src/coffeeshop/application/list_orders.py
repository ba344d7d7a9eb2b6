"""Application service: List Orders use case (admin query)."""

from __future__ import annotations

from coffeeshop.application.dto import OrderDTO
from coffeeshop.domain.repository.order_repository import OrderRepository
from coffeeshop.domain.service.access_policy import AccessPolicy


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository, access_policy: AccessPolicy) -> None:
        self._order_repo = order_repo
        self._access_policy = access_policy

    def handle(self, admin_token: str | None = None) -> list[OrderDTO]:
        self._access_policy.authorize(admin_token)
        return [OrderDTO.from_domain(order) for order in self._order_repo.list_all()]
