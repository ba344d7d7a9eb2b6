"""Application service: Update Order Status use case (admin command)."""

from __future__ import annotations

import logging

from coffeeshop.application.dto import OrderDTO
from coffeeshop.domain.exceptions import EntityNotFoundError
from coffeeshop.domain.repository.order_repository import OrderRepository
from coffeeshop.domain.service.access_policy import AccessPolicy

logger = logging.getLogger(__name__)


class UpdateOrderStatusHandler:

    def __init__(self, order_repo: OrderRepository, access_policy: AccessPolicy) -> None:
        self._order_repo = order_repo
        self._access_policy = access_policy

    def handle(
        self, order_id: int | str, status: str | None, admin_token: str | None = None
    ) -> OrderDTO:
        """Overwrite the status of an order.

        ``order_id`` may arrive as the raw URL segment; one that is not an
        integer names no order, the same as an unknown one.
        """
        self._access_policy.authorize(admin_token)

        try:
            order_id = int(order_id)
        except (TypeError, ValueError):
            raise EntityNotFoundError("Order not found")

        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError("Order not found")

        previous = order.status
        order.update_status(status)
        self._order_repo.save(order)

        logger.info("Order #%s status %s -> %s", order.id, previous, order.status)
        return OrderDTO.from_domain(order)
