"""Checkout: turn the cart into an order on the server.

Nothing is sent unless the cart has lines and the customer gave a name
and an email. The cart is only cleared once the shop confirmed the order;
on any failure it is left exactly as it was.
"""

from __future__ import annotations

import logging
from typing import Any

from coffeeshop.domain.model.value_objects import json_number
from coffeeshop.storefront.cart import Cart
from coffeeshop.storefront.client import CoffeeShopClient
from coffeeshop.storefront.exceptions import CheckoutError

logger = logging.getLogger(__name__)


class CheckoutFlow:

    def __init__(self, client: CoffeeShopClient) -> None:
        self._client = client

    def checkout(
        self,
        cart: Cart,
        customer_name: str | None,
        email: str | None,
        phone: str | None = None,
        notes: str | None = None,
    ) -> dict[str, Any]:
        """Place the order and return it as the server recorded it.

        Raises CheckoutError before contacting the server, or ApiError if
        the server refused or could not be reached.
        """
        if cart.is_empty():
            raise CheckoutError("Cart is empty")
        if not customer_name or not customer_name.strip() or not email or not email.strip():
            raise CheckoutError("Name and email are required")

        payload = {
            "customerName": customer_name.strip(),
            "email": email.strip(),
            "phone": (phone or "").strip(),
            "items": [line.to_payload() for line in cart.lines],
            "total": json_number(cart.total()),
            "notes": notes or "",
        }

        order = self._client.place_order(payload)

        logger.info("Order #%s placed, clearing cart", order.get("id"))
        cart.clear()
        return order
