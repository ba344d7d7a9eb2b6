"""Shopping cart kept on the customer's side until checkout.

Nothing here talks to the shop: the cart is plain in-memory state that
lives as long as the session does.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Callable

from coffeeshop.domain.model.value_objects import json_number

Listener = Callable[[str], None]


@dataclass
class CartLine:
    """One menu item in the cart.

    ``name`` and ``unit_price`` are copied from the menu when the item is
    first added; later menu changes do not affect the line.
    """

    item_id: int
    name: str
    unit_price: Decimal
    quantity: int = 1

    @property
    def line_total(self) -> Decimal:
        return self.unit_price * self.quantity

    def to_payload(self) -> dict[str, Any]:
        return {
            "id": self.item_id,
            "name": self.name,
            "price": json_number(self.unit_price),
            "quantity": self.quantity,
        }


class Cart:
    """Ordered list of cart lines, one per menu item.

    ``listener`` is called with a short confirmation message after every
    mutation, which is where a UI refreshes its display.
    """

    def __init__(self, listener: Listener | None = None) -> None:
        self._lines: list[CartLine] = []
        self._listener = listener

    @property
    def lines(self) -> list[CartLine]:
        return list(self._lines)

    def is_empty(self) -> bool:
        return not self._lines

    def add_line(self, item_id: int, name: str, unit_price: Decimal | int | float | str) -> CartLine:
        """Add one unit of a menu item, merging with an existing line."""
        for line in self._lines:
            if line.item_id == item_id:
                line.quantity += 1
                break
        else:
            line = CartLine(item_id=item_id, name=name, unit_price=Decimal(str(unit_price)))
            self._lines.append(line)

        self._notify(f"{name} added to cart!")
        return line

    def remove_line(self, item_id: int) -> None:
        self._lines = [line for line in self._lines if line.item_id != item_id]
        self._notify("Item removed from cart")

    def clear(self) -> None:
        self._lines = []
        self._notify("Cart cleared")

    def total(self) -> Decimal:
        return sum((line.line_total for line in self._lines), Decimal("0"))

    def count(self) -> int:
        return sum(line.quantity for line in self._lines)

    def _notify(self, message: str) -> None:
        if self._listener is not None:
            self._listener(message)
