"""Mail dispatch collaborator.

The domain only knows that messages can be sent and that sending can
fail with NotificationError; transports live in infrastructure.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class MailMessage:
    sender: str
    to: str
    subject: str
    html_body: str


class Mailer(ABC):

    @abstractmethod
    def send(self, message: MailMessage) -> None:
        """Deliver *message* or raise NotificationError."""
