"""Application service: Place Order use case.

Turns the checkout payload into an Order aggregate and stores it.
Lines are taken at face value: the catalog is not consulted, so the
names and prices are the ones the storefront displayed.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from coffeeshop.application.dto import OrderDTO, OrderLineSpec
from coffeeshop.domain.model.order import Order, OrderLine
from coffeeshop.domain.model.value_objects import Money, Quantity
from coffeeshop.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class PlaceOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(
        self,
        customer_name: str | None,
        email: str | None,
        line_specs: list[OrderLineSpec] | None,
        phone: str | None = None,
        total: Decimal | None = None,
        notes: str | None = None,
    ) -> OrderDTO:
        """Create a pending order.

        Steps:
        1. Build OrderLines from the submitted specs (price snapshot).
        2. Let the Order aggregate check required fields and fill in the
           total if the client sent none.
        3. Persist (assigns the ID) and return a DTO.
        """
        lines = [
            OrderLine(
                item_id=spec.item_id,
                name=spec.name,
                unit_price=Money.of(spec.unit_price),
                quantity=Quantity(spec.quantity),
            )
            for spec in line_specs or []
        ]

        order = Order.create(
            customer_name=customer_name,
            email=email,
            lines=lines,
            phone=phone,
            notes=notes,
            total=Money.of(total) if total is not None else None,
        )
        self._order_repo.save(order)

        logger.info(
            "Order #%s placed by %s: %d line(s), total %s",
            order.id, order.customer_name, len(order.lines), order.total,
        )
        return OrderDTO.from_domain(order)
