"""Newsletter subscription entity."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from coffeeshop.domain.model.value_objects import EmailAddress


@dataclass
class NewsletterSubscription:
    id: int | None
    email: EmailAddress
    subscribed_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(email: str | None) -> NewsletterSubscription:
        return NewsletterSubscription(id=None, email=EmailAddress.of(email))
