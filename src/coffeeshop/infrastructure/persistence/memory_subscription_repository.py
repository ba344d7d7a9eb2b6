"""Process-memory implementation of SubscriptionRepository."""

from __future__ import annotations

import itertools
import threading

from coffeeshop.domain.exceptions import ConflictError
from coffeeshop.domain.model.subscription import NewsletterSubscription
from coffeeshop.domain.model.value_objects import EmailAddress
from coffeeshop.domain.repository.subscription_repository import SubscriptionRepository


class InMemorySubscriptionRepository(SubscriptionRepository):

    def __init__(self) -> None:
        self._by_email: dict[EmailAddress, NewsletterSubscription] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def get_by_email(self, email: EmailAddress) -> NewsletterSubscription | None:
        with self._lock:
            return self._by_email.get(email)

    def list_all(self) -> list[NewsletterSubscription]:
        with self._lock:
            return list(self._by_email.values())

    def add(self, subscription: NewsletterSubscription) -> None:
        with self._lock:
            # Re-checked under the lock: two requests may both have passed
            # the handler's lookup.
            if subscription.email in self._by_email:
                raise ConflictError("Email already subscribed to newsletter")
            subscription.id = next(self._ids)
            self._by_email[subscription.email] = subscription
