"""Process-memory implementation of OrderRepository.

Request handlers run on a thread pool, so every read and write goes
through one lock. Callers get copies: a status change is only visible to
other requests once it is saved. IDs come from a counter rather than the
collection size and are never reused.
"""

from __future__ import annotations

import copy
import itertools
import threading

from coffeeshop.domain.model.order import Order
from coffeeshop.domain.repository.order_repository import OrderRepository


class InMemoryOrderRepository(OrderRepository):

    def __init__(self) -> None:
        self._store: dict[int, Order] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def get_by_id(self, order_id: int) -> Order | None:
        with self._lock:
            order = self._store.get(order_id)
            return copy.deepcopy(order) if order is not None else None

    def list_all(self) -> list[Order]:
        with self._lock:
            return [copy.deepcopy(order) for order in self._store.values()]

    def save(self, order: Order) -> None:
        with self._lock:
            if order.id is None:
                order.id = next(self._ids)
            self._store[order.id] = copy.deepcopy(order)
