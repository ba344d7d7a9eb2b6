"""Order aggregate — the record created at checkout.

An Order owns a snapshot of the cart lines it was placed with. After
creation only its status (and the matching ``updated_at`` stamp) changes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from coffeeshop.domain.exceptions import ValidationError
from coffeeshop.domain.model.value_objects import Money, Quantity

PENDING = "pending"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class OrderLine:
    """A cart line as it was when the customer checked out.

    ``item_id`` references the catalog but is not checked against it;
    the name and price are whatever the storefront showed.
    """

    item_id: int | None
    name: str
    unit_price: Money
    quantity: Quantity

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass
class Order:
    """Aggregate root for customer orders.

    Use the ``Order.create()`` factory for new orders: it enforces the
    required fields and derives the total when the client sent none.
    """

    id: int | None
    customer_name: str
    email: str
    lines: list[OrderLine]
    total: Money
    phone: str = ""
    notes: str = ""
    status: str = PENDING
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime | None = None

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        customer_name: str | None,
        email: str | None,
        lines: list[OrderLine] | None,
        phone: str | None = None,
        notes: str | None = None,
        total: Money | None = None,
    ) -> Order:
        """Create a new pending order.

        A client-supplied ``total`` is kept as-is; it is only computed from
        the lines when absent.
        """
        if (
            not customer_name
            or not customer_name.strip()
            or not email
            or not email.strip()
            or not lines
        ):
            raise ValidationError("Customer name, email, and items are required")

        if total is None:
            total = Order.sum_lines(lines)

        return Order(
            id=None,
            customer_name=customer_name.strip(),
            email=email.strip(),
            lines=list(lines),
            total=total,
            phone=(phone or "").strip(),
            notes=notes or "",
        )

    # --- State transitions ----------------------------------------------------

    def update_status(self, status: str | None) -> None:
        """Overwrite the status with any non-blank value."""
        if not status or not status.strip():
            raise ValidationError("Status is required")
        self.status = status.strip()
        self.updated_at = _utcnow()

    # --- Helpers --------------------------------------------------------------

    @staticmethod
    def sum_lines(lines: list[OrderLine]) -> Money:
        result = Money.zero()
        for line in lines:
            result = result + line.line_total
        return result
