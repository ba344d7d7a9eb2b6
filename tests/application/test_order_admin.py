"""Integration tests for listing orders and changing their status."""

from decimal import Decimal

import pytest

from coffeeshop.application.dto import OrderLineSpec
from coffeeshop.application.list_orders import ListOrdersHandler
from coffeeshop.application.place_order import PlaceOrderHandler
from coffeeshop.application.update_order_status import UpdateOrderStatusHandler
from coffeeshop.domain.exceptions import AuthorizationError, EntityNotFoundError
from coffeeshop.infrastructure.persistence.memory_order_repository import (
    InMemoryOrderRepository,
)
from coffeeshop.infrastructure.security import AdminTokenPolicy, OpenAccessPolicy


def _setup(policy=None):
    order_repo = InMemoryOrderRepository()
    policy = policy or OpenAccessPolicy()
    place = PlaceOrderHandler(order_repo)
    for name in ("Alice", "Bob", "Cy"):
        place.handle(
            name,
            f"{name.lower()}@example.com",
            [OrderLineSpec(item_id=1, name="Cappuccino", unit_price=Decimal("49"), quantity=1)],
        )
    return (
        order_repo,
        ListOrdersHandler(order_repo, policy),
        UpdateOrderStatusHandler(order_repo, policy),
    )


class TestListOrders:

    def test_lists_in_insertion_order(self):
        _, list_orders, _ = _setup()
        assert [o.customer_name for o in list_orders.handle()] == ["Alice", "Bob", "Cy"]

    def test_token_required_when_configured(self):
        _, list_orders, _ = _setup(AdminTokenPolicy("s3cret"))
        with pytest.raises(AuthorizationError):
            list_orders.handle(None)
        with pytest.raises(AuthorizationError):
            list_orders.handle("wrong")
        assert len(list_orders.handle("s3cret")) == 3


class TestUpdateOrderStatus:

    def test_updates_status_and_stamp(self):
        order_repo, _, update = _setup()
        dto = update.handle(2, "ready")
        assert dto.status == "ready"
        assert dto.updated_at is not None
        assert order_repo.get_by_id(2).status == "ready"

    def test_unknown_id_leaves_orders_untouched(self):
        order_repo, _, update = _setup()
        with pytest.raises(EntityNotFoundError, match="Order not found"):
            update.handle(9999, "ready")
        assert [o.status for o in order_repo.list_all()] == ["pending"] * 3
        assert all(o.updated_at is None for o in order_repo.list_all())

    def test_unauthorised_update_rejected_before_lookup(self):
        order_repo, _, update = _setup(AdminTokenPolicy("s3cret"))
        with pytest.raises(AuthorizationError):
            update.handle(1, "ready", "nope")
        assert order_repo.get_by_id(1).status == "pending"

    @pytest.mark.parametrize("raw_id", ["abc", "1.5", ""])
    def test_non_integer_id_is_unknown_order(self, raw_id):
        order_repo, _, update = _setup()
        with pytest.raises(EntityNotFoundError, match="Order not found"):
            update.handle(raw_id, "ready")
        assert [o.status for o in order_repo.list_all()] == ["pending"] * 3

    def test_numeric_string_id_accepted(self):
        _, _, update = _setup()
        assert update.handle("2", "ready").status == "ready"

    def test_unauthorised_caller_sees_401_even_for_bad_id(self):
        _, _, update = _setup(AdminTokenPolicy("s3cret"))
        with pytest.raises(AuthorizationError):
            update.handle("abc", "ready", "nope")
