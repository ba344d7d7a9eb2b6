"""Application service: Subscribe to Newsletter use case.

The welcome mail is sent before the subscription is stored, so a failed
dispatch never leaves behind a subscription the caller was told failed.
"""

from __future__ import annotations

import logging

from coffeeshop.application import mail_templates
from coffeeshop.application.dto import SubscriptionDTO
from coffeeshop.domain.exceptions import ConflictError, NotificationError
from coffeeshop.domain.model.subscription import NewsletterSubscription
from coffeeshop.domain.repository.catalog_repository import CatalogRepository
from coffeeshop.domain.repository.subscription_repository import SubscriptionRepository
from coffeeshop.domain.service.mailer import Mailer

logger = logging.getLogger(__name__)


class SubscribeNewsletterHandler:

    def __init__(
        self,
        subscription_repo: SubscriptionRepository,
        catalog_repo: CatalogRepository,
        mailer: Mailer,
        sender: str,
    ) -> None:
        self._subscription_repo = subscription_repo
        self._catalog_repo = catalog_repo
        self._mailer = mailer
        self._sender = sender

    def handle(self, email: str | None) -> SubscriptionDTO:
        subscription = NewsletterSubscription.create(email)

        if self._subscription_repo.get_by_email(subscription.email) is not None:
            raise ConflictError("Email already subscribed to newsletter")

        welcome = mail_templates.newsletter_welcome(
            sender=self._sender,
            to=str(subscription.email),
            store=self._catalog_repo.store_info(),
        )
        try:
            self._mailer.send(welcome)
        except NotificationError as exc:
            logger.error("Welcome mail to %s failed: %s", subscription.email, exc)
            raise NotificationError("Failed to subscribe to newsletter") from exc

        self._subscription_repo.add(subscription)

        logger.info("Newsletter subscription #%s for %s", subscription.id, subscription.email)
        return SubscriptionDTO.from_domain(subscription)
