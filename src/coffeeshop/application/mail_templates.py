"""HTML bodies for the mails the shop sends.

Anything a visitor typed is escaped before it is put into markup, and
flattened to one line before it is put into a header.
"""

from __future__ import annotations

from html import escape

from coffeeshop.domain.model.catalog import StoreInfo
from coffeeshop.domain.service.mailer import MailMessage


def _one_line(value: str) -> str:
    """Header values must not carry CR or LF."""
    return " ".join(value.split())


def newsletter_welcome(sender: str, to: str, store: StoreInfo) -> MailMessage:
    return MailMessage(
        sender=sender,
        to=to,
        subject="Welcome to Coffee Shop Newsletter!",
        html_body=(
            "<h2>Welcome to our Coffee Family!</h2>\n"
            "<p>Thank you for subscribing to our newsletter. "
            "You'll receive updates about:</p>\n"
            "<ul>\n"
            "  <li>New coffee blends and seasonal specials</li>\n"
            "  <li>Exclusive discounts and promotions</li>\n"
            "  <li>Coffee brewing tips and recipes</li>\n"
            "  <li>Store events and news</li>\n"
            "</ul>\n"
            "<p>Visit us at our coffee shop!</p>\n"
            f"<p><strong>Hours:</strong><br>\n{escape(store.weekdays)}<br>\n"
            f"{escape(store.weekends)}</p>\n"
            f"<p><strong>Phone:</strong> {escape(store.phone)}</p>\n"
        ),
    )


def contact_notification(
    sender: str, to: str, name: str, email: str, message: str, phone: str
) -> MailMessage:
    return MailMessage(
        sender=sender,
        to=to,
        subject=f"New Contact Form Submission from {_one_line(name)}",
        html_body=(
            "<h2>New Contact Form Submission</h2>\n"
            f"<p><strong>Name:</strong> {escape(name)}</p>\n"
            f"<p><strong>Email:</strong> {escape(email)}</p>\n"
            f"<p><strong>Phone:</strong> {escape(phone) if phone else 'Not provided'}</p>\n"
            "<p><strong>Message:</strong></p>\n"
            f"<p>{escape(message)}</p>\n"
            "<hr>\n"
            "<p><em>Sent from Coffee Shop website contact form</em></p>\n"
        ),
    )


def contact_auto_reply(sender: str, to: str, name: str, message: str) -> MailMessage:
    return MailMessage(
        sender=sender,
        to=to,
        subject="Thank you for contacting Coffee Shop",
        html_body=(
            "<h2>Thank you for your message!</h2>\n"
            f"<p>Dear {escape(name)},</p>\n"
            "<p>We have received your message and will get back to you "
            "within 24 hours.</p>\n"
            "<p>Your message:</p>\n"
            f"<blockquote>{escape(message)}</blockquote>\n"
            "<p>Best regards,<br>Coffee Shop Team</p>\n"
        ),
    )
