"""Tests for the SMTP mailer with smtplib replaced by a recorder."""

import smtplib

import pytest

from coffeeshop.domain.exceptions import NotificationError
from coffeeshop.domain.service.mailer import MailMessage
from coffeeshop.infrastructure.mail import smtp_mailer
from coffeeshop.infrastructure.mail.smtp_mailer import SmtpMailer

MESSAGE = MailMessage(
    sender="shop@example.com",
    to="ann@example.com",
    subject="Welcome",
    html_body="<h2>Hello</h2>",
)


class RecordingSMTP:
    instances: list["RecordingSMTP"] = []

    def __init__(self, host, port, timeout=None):
        self.host, self.port, self.timeout = host, port, timeout
        self.calls: list[str] = []
        self.sent = []
        RecordingSMTP.instances.append(self)

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.calls.append("quit")
        return False

    def starttls(self):
        self.calls.append("starttls")

    def login(self, user, password):
        self.calls.append(f"login:{user}")

    def send_message(self, message):
        self.sent.append(message)


@pytest.fixture
def recording_smtp(monkeypatch):
    RecordingSMTP.instances = []
    monkeypatch.setattr(smtp_mailer.smtplib, "SMTP", RecordingSMTP)
    return RecordingSMTP


class TestSmtpMailer:

    def test_sends_html_message(self, recording_smtp):
        SmtpMailer("smtp.example.com", 587, "shop@example.com", "pw", timeout=3).send(MESSAGE)

        [smtp] = recording_smtp.instances
        assert (smtp.host, smtp.port, smtp.timeout) == ("smtp.example.com", 587, 3)
        assert smtp.calls == ["starttls", "login:shop@example.com", "quit"]
        [email] = smtp.sent
        assert email["To"] == "ann@example.com"
        assert email["Subject"] == "Welcome"
        assert email.get_body(preferencelist=("html",)).get_content().strip() == "<h2>Hello</h2>"

    def test_no_login_without_credentials(self, recording_smtp):
        SmtpMailer("localhost", 25).send(MESSAGE)
        assert "login:None" not in recording_smtp.instances[0].calls
        assert recording_smtp.instances[0].calls == ["starttls", "quit"]

    def test_transport_errors_become_notification_errors(self, monkeypatch):
        def refuse(*args, **kwargs):
            raise smtplib.SMTPConnectError(421, b"try later")

        monkeypatch.setattr(smtp_mailer.smtplib, "SMTP", refuse)
        with pytest.raises(NotificationError, match="ann@example.com"):
            SmtpMailer("smtp.example.com", 587).send(MESSAGE)

    def test_header_injection_becomes_notification_error(self, recording_smtp):
        message = MailMessage(
            sender="shop@example.com",
            to="ann@example.com",
            subject="Hello\r\nBcc: victim@example.com",
            html_body="<p>x</p>",
        )
        with pytest.raises(NotificationError):
            SmtpMailer("smtp.example.com", 587).send(message)
        assert recording_smtp.instances == []
