"""Application service: Submit Contact Form use case.

Forwards the visitor's message to the shop and sends the visitor an
acknowledgement. Nothing is stored.
"""

from __future__ import annotations

import logging

from coffeeshop.application import mail_templates
from coffeeshop.domain.exceptions import NotificationError, ValidationError
from coffeeshop.domain.service.mailer import Mailer

logger = logging.getLogger(__name__)


class SubmitContactHandler:

    def __init__(self, mailer: Mailer, sender: str, shop_address: str) -> None:
        self._mailer = mailer
        self._sender = sender
        self._shop_address = shop_address

    def handle(
        self,
        name: str | None,
        email: str | None,
        message: str | None,
        phone: str | None = None,
    ) -> None:
        if not name or not name.strip() or not email or not email.strip() or not message or not message.strip():
            raise ValidationError("Name, email, and message are required")

        name, email, phone = name.strip(), email.strip(), (phone or "").strip()

        notification = mail_templates.contact_notification(
            sender=self._sender,
            to=self._shop_address,
            name=name,
            email=email,
            message=message,
            phone=phone,
        )
        auto_reply = mail_templates.contact_auto_reply(
            sender=self._sender, to=email, name=name, message=message
        )

        try:
            self._mailer.send(notification)
            self._mailer.send(auto_reply)
        except NotificationError as exc:
            logger.error("Contact mail for %s failed: %s", email, exc)
            raise NotificationError("Failed to send message") from exc

        logger.info("Contact message received from %s <%s>", name, email)
