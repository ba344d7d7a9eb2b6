"""Abstract repository for newsletter subscriptions."""

from __future__ import annotations

from abc import ABC, abstractmethod

from coffeeshop.domain.model.subscription import NewsletterSubscription
from coffeeshop.domain.model.value_objects import EmailAddress


class SubscriptionRepository(ABC):

    @abstractmethod
    def get_by_email(self, email: EmailAddress) -> NewsletterSubscription | None:
        """Return the subscription for *email*, or None."""

    @abstractmethod
    def list_all(self) -> list[NewsletterSubscription]:
        """Return every subscription in signup order."""

    @abstractmethod
    def add(self, subscription: NewsletterSubscription) -> None:
        """Store a new subscription and assign its ID.

        Raises ConflictError if the email is already subscribed.
        """
