"""Process-memory implementation of ReviewRepository.

Same locking and copy-on-read discipline as the order repository.
"""

from __future__ import annotations

import copy
import itertools
import threading

from coffeeshop.domain.model.review import Review
from coffeeshop.domain.repository.review_repository import ReviewRepository


class InMemoryReviewRepository(ReviewRepository):

    def __init__(self) -> None:
        self._store: dict[int, Review] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def get_by_id(self, review_id: int) -> Review | None:
        with self._lock:
            review = self._store.get(review_id)
            return copy.deepcopy(review) if review is not None else None

    def list_approved(self) -> list[Review]:
        with self._lock:
            return [copy.deepcopy(r) for r in self._store.values() if r.approved]

    def save(self, review: Review) -> None:
        with self._lock:
            if review.id is None:
                review.id = next(self._ids)
            self._store[review.id] = copy.deepcopy(review)
