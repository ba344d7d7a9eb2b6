"""Mailer that writes messages to the log instead of sending them.

Used when no SMTP credentials are configured (local development).
"""

from __future__ import annotations

import logging

from coffeeshop.domain.service.mailer import Mailer, MailMessage

logger = logging.getLogger(__name__)


class ConsoleMailer(Mailer):

    def send(self, message: MailMessage) -> None:
        logger.info(
            "Mail from %s to %s: %s\n%s",
            message.sender, message.to, message.subject, message.html_body,
        )
