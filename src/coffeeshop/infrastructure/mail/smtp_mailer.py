"""SMTP implementation of the Mailer collaborator."""

from __future__ import annotations

import logging
import smtplib
from email.message import EmailMessage

from coffeeshop.domain.exceptions import NotificationError
from coffeeshop.domain.service.mailer import Mailer, MailMessage

logger = logging.getLogger(__name__)


class SmtpMailer(Mailer):
    """Sends each message over a fresh STARTTLS connection."""

    def __init__(
        self,
        host: str,
        port: int,
        username: str | None = None,
        password: str | None = None,
        timeout: float = 10.0,
    ) -> None:
        self._host = host
        self._port = port
        self._username = username
        self._password = password
        self._timeout = timeout

    def send(self, message: MailMessage) -> None:
        try:
            email = self._build(message)
            with smtplib.SMTP(self._host, self._port, timeout=self._timeout) as smtp:
                smtp.starttls()
                if self._username and self._password:
                    smtp.login(self._username, self._password)
                smtp.send_message(email)
        except (smtplib.SMTPException, OSError, ValueError) as exc:
            logger.exception("SMTP delivery to %s failed", message.to)
            raise NotificationError(f"Mail delivery to {message.to} failed") from exc

        logger.info("Sent '%s' to %s", message.subject, message.to)

    @staticmethod
    def _build(message: MailMessage) -> EmailMessage:
        email = EmailMessage()
        email["From"] = message.sender
        email["To"] = message.to
        email["Subject"] = message.subject
        email.set_content("This message requires an HTML-capable mail client.")
        email.add_alternative(message.html_body, subtype="html")
        return email
