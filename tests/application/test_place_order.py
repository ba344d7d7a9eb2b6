"""Integration tests for the PlaceOrder use case."""

from decimal import Decimal

import pytest

from coffeeshop.application.dto import OrderLineSpec
from coffeeshop.application.place_order import PlaceOrderHandler
from coffeeshop.domain.exceptions import ValidationError
from coffeeshop.infrastructure.persistence.memory_order_repository import (
    InMemoryOrderRepository,
)


def _setup() -> tuple[PlaceOrderHandler, InMemoryOrderRepository]:
    order_repo = InMemoryOrderRepository()
    return PlaceOrderHandler(order_repo), order_repo


def _mocha(qty: int = 1) -> OrderLineSpec:
    return OrderLineSpec(item_id=5, name="Mocha", unit_price=Decimal("49"), quantity=qty)


class TestPlaceOrderHappyPath:

    def test_creates_pending_order(self):
        handler, _ = _setup()
        dto = handler.handle("Alice", "alice@example.com", [_mocha(2)], phone="555-0100")
        assert dto.id == 1
        assert dto.status == "pending"
        assert dto.total == Decimal("98")
        assert dto.phone == "555-0100"
        assert dto.lines[0].name == "Mocha"
        assert dto.updated_at is None

    def test_persists_order(self):
        handler, order_repo = _setup()
        dto = handler.handle("Alice", "alice@example.com", [_mocha()])
        saved = order_repo.get_by_id(dto.id)
        assert saved is not None
        assert saved.email == "alice@example.com"

    def test_sequential_ids_regardless_of_content(self):
        handler, _ = _setup()
        ids = [
            handler.handle("Alice", "a@x.io", [_mocha()]).id,
            handler.handle("Bob", "b@x.io", [_mocha(3)], total=Decimal("1")).id,
            handler.handle("Cy", "c@x.io", [_mocha()], notes="oat milk").id,
        ]
        assert ids == [1, 2, 3]

    def test_client_total_is_not_recomputed(self):
        handler, _ = _setup()
        dto = handler.handle("Alice", "a@x.io", [_mocha(2)], total=Decimal("10"))
        assert dto.total == Decimal("10")


class TestPlaceOrderValidation:

    def test_empty_items_rejected_without_consuming_an_id(self):
        handler, order_repo = _setup()
        with pytest.raises(ValidationError, match="items are required"):
            handler.handle("Alice", "a@x.io", [])
        assert order_repo.list_all() == []

        dto = handler.handle("Alice", "a@x.io", [_mocha()])
        assert dto.id == 1

    def test_missing_email_rejected(self):
        handler, _ = _setup()
        with pytest.raises(ValidationError, match="Customer name, email"):
            handler.handle("Alice", None, [_mocha()])

    def test_zero_quantity_rejected(self):
        handler, _ = _setup()
        with pytest.raises(ValidationError, match="must be positive"):
            handler.handle("Alice", "a@x.io", [_mocha(0)])
