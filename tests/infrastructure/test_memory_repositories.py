"""Tests for the in-memory repositories, including concurrent writers."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from coffeeshop.domain.exceptions import ConflictError, ValidationError
from coffeeshop.domain.model.catalog import CatalogItem
from coffeeshop.domain.model.order import Order, OrderLine
from coffeeshop.domain.model.subscription import NewsletterSubscription
from coffeeshop.domain.model.value_objects import Money, Quantity
from coffeeshop.infrastructure.persistence.memory_catalog_repository import (
    InMemoryCatalogRepository,
)
from coffeeshop.infrastructure.persistence.memory_order_repository import (
    InMemoryOrderRepository,
)
from coffeeshop.infrastructure.persistence.memory_subscription_repository import (
    InMemorySubscriptionRepository,
)
from coffeeshop.infrastructure.persistence.menu import COFFEE_MENU, STORE_INFO


def _order(name: str = "Alice") -> Order:
    line = OrderLine(item_id=1, name="Cappuccino", unit_price=Money.of(49), quantity=Quantity(1))
    return Order.create(name, f"{name.lower()}@example.com", [line])


class TestOrderRepository:

    def test_assigns_ids_on_first_save_only(self):
        repo = InMemoryOrderRepository()
        order = _order()
        repo.save(order)
        order.update_status("ready")
        repo.save(order)
        assert order.id == 1
        assert len(repo.list_all()) == 1

    def test_concurrent_saves_get_unique_ids(self):
        repo = InMemoryOrderRepository()
        orders = [_order(f"C{i}") for i in range(200)]

        with ThreadPoolExecutor(max_workers=16) as pool:
            list(pool.map(repo.save, orders))

        ids = sorted(o.id for o in repo.list_all())
        assert ids == list(range(1, 201))

    def test_unknown_id(self):
        assert InMemoryOrderRepository().get_by_id(9999) is None

    def test_changes_reach_the_store_only_through_save(self):
        repo = InMemoryOrderRepository()
        repo.save(_order())

        fetched = repo.get_by_id(1)
        fetched.update_status("ready")
        assert repo.get_by_id(1).status == "pending"
        assert repo.list_all()[0].status == "pending"

        repo.save(fetched)
        assert repo.get_by_id(1).status == "ready"


class TestSubscriptionRepository:

    def test_duplicate_add_conflicts(self):
        repo = InMemorySubscriptionRepository()
        repo.add(NewsletterSubscription.create("ann@example.com"))
        with pytest.raises(ConflictError):
            repo.add(NewsletterSubscription.create("Ann@Example.com"))
        assert len(repo.list_all()) == 1

    def test_concurrent_duplicate_adds_keep_one(self):
        repo = InMemorySubscriptionRepository()

        def attempt(_):
            try:
                repo.add(NewsletterSubscription.create("ann@example.com"))
                return True
            except ConflictError:
                return False

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(attempt, range(20)))

        assert results.count(True) == 1
        assert len(repo.list_all()) == 1


class TestCatalogRepository:

    def test_seeded_menu(self):
        repo = InMemoryCatalogRepository(COFFEE_MENU, STORE_INFO)
        assert len(repo.list_all()) == 9
        assert repo.get_by_id(9).name == "Affogato"
        assert repo.get_by_id(10) is None
        assert repo.store_info() is STORE_INFO

    def test_duplicate_ids_rejected(self):
        item = CatalogItem(1, "Cappuccino", Money.of(49), "")
        with pytest.raises(ValidationError, match="Duplicate menu item ID 1"):
            InMemoryCatalogRepository([item, item], STORE_INFO)
