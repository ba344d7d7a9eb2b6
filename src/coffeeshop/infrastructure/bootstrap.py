"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions. The stores live in
process memory, so one Container must be shared by every request.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from coffeeshop.domain.repository.catalog_repository import CatalogRepository
from coffeeshop.domain.repository.order_repository import OrderRepository
from coffeeshop.domain.repository.review_repository import ReviewRepository
from coffeeshop.domain.repository.subscription_repository import SubscriptionRepository
from coffeeshop.domain.service.access_policy import AccessPolicy
from coffeeshop.domain.service.mailer import Mailer
from coffeeshop.infrastructure.config import Settings
from coffeeshop.infrastructure.mail.console_mailer import ConsoleMailer
from coffeeshop.infrastructure.mail.smtp_mailer import SmtpMailer
from coffeeshop.infrastructure.persistence.memory_catalog_repository import (
    InMemoryCatalogRepository,
)
from coffeeshop.infrastructure.persistence.memory_order_repository import (
    InMemoryOrderRepository,
)
from coffeeshop.infrastructure.persistence.memory_review_repository import (
    InMemoryReviewRepository,
)
from coffeeshop.infrastructure.persistence.memory_subscription_repository import (
    InMemorySubscriptionRepository,
)
from coffeeshop.infrastructure.persistence.menu import COFFEE_MENU, STORE_INFO
from coffeeshop.infrastructure.security import AdminTokenPolicy, OpenAccessPolicy

logger = logging.getLogger(__name__)


@dataclass
class Container:
    settings: Settings
    catalog_repo: CatalogRepository
    order_repo: OrderRepository
    review_repo: ReviewRepository
    subscription_repo: SubscriptionRepository
    mailer: Mailer
    access_policy: AccessPolicy


def mailer(settings: Settings) -> Mailer:
    if not settings.smtp_enabled:
        logger.warning("EMAIL_USER/EMAIL_PASS not set; mail will be logged, not sent")
        return ConsoleMailer()
    return SmtpMailer(
        host=settings.smtp_host,
        port=settings.smtp_port,
        username=settings.email_user,
        password=settings.email_pass,
        timeout=settings.smtp_timeout,
    )


def access_policy(settings: Settings) -> AccessPolicy:
    if not settings.admin_token:
        logger.warning("ADMIN_TOKEN not set; admin endpoints are open to everyone")
        return OpenAccessPolicy()
    return AdminTokenPolicy(settings.admin_token)


def build_container(
    settings: Settings,
    mailer_override: Mailer | None = None,
) -> Container:
    return Container(
        settings=settings,
        catalog_repo=InMemoryCatalogRepository(COFFEE_MENU, STORE_INFO),
        order_repo=InMemoryOrderRepository(),
        review_repo=InMemoryReviewRepository(),
        subscription_repo=InMemorySubscriptionRepository(),
        mailer=mailer_override or mailer(settings),
        access_policy=access_policy(settings),
    )
