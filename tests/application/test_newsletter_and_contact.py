"""Integration tests for the mail-sending use cases."""

import pytest

from coffeeshop.application.submit_contact import SubmitContactHandler
from coffeeshop.application.subscribe_newsletter import SubscribeNewsletterHandler
from coffeeshop.domain.exceptions import ConflictError, NotificationError, ValidationError
from coffeeshop.infrastructure.persistence.memory_catalog_repository import (
    InMemoryCatalogRepository,
)
from coffeeshop.infrastructure.persistence.memory_subscription_repository import (
    InMemorySubscriptionRepository,
)
from coffeeshop.infrastructure.persistence.menu import COFFEE_MENU, STORE_INFO
from tests.fakes import FakeMailer

SENDER = "shop@example.com"


def _newsletter(mailer: FakeMailer):
    repo = InMemorySubscriptionRepository()
    handler = SubscribeNewsletterHandler(
        subscription_repo=repo,
        catalog_repo=InMemoryCatalogRepository(COFFEE_MENU, STORE_INFO),
        mailer=mailer,
        sender=SENDER,
    )
    return repo, handler


class TestSubscribeNewsletter:

    def test_subscribes_and_sends_welcome(self):
        mailer = FakeMailer()
        repo, handler = _newsletter(mailer)

        dto = handler.handle("ann@example.com")

        assert dto.id == 1
        assert dto.email == "ann@example.com"
        assert len(repo.list_all()) == 1
        [welcome] = mailer.sent
        assert welcome.to == "ann@example.com"
        assert welcome.sender == SENDER
        assert "Welcome" in welcome.subject
        assert STORE_INFO.phone in welcome.html_body

    def test_second_subscription_conflicts(self):
        mailer = FakeMailer()
        _, handler = _newsletter(mailer)
        handler.handle("ann@example.com")

        with pytest.raises(ConflictError, match="already subscribed"):
            handler.handle(" ANN@example.com ")
        assert len(mailer.sent) == 1

    @pytest.mark.parametrize("email", [None, "", "ann.example.com"])
    def test_invalid_email_rejected(self, email):
        _, handler = _newsletter(FakeMailer())
        with pytest.raises(ValidationError, match="Valid email address is required"):
            handler.handle(email)

    def test_failed_welcome_stores_nothing(self):
        mailer = FakeMailer(fail=True)
        repo, handler = _newsletter(mailer)

        with pytest.raises(NotificationError, match="Failed to subscribe to newsletter"):
            handler.handle("ann@example.com")
        assert repo.list_all() == []

        mailer.fail = False
        assert handler.handle("ann@example.com").id == 1


class TestSubmitContact:

    def test_notifies_shop_and_replies_to_visitor(self):
        mailer = FakeMailer()
        handler = SubmitContactHandler(mailer, sender=SENDER, shop_address="owner@example.com")

        handler.handle("Finn", "finn@example.com", "Do you sell <beans>?")

        notification, reply = mailer.sent
        assert notification.to == "owner@example.com"
        assert "Finn" in notification.subject
        assert "Not provided" in notification.html_body
        assert "&lt;beans&gt;" in notification.html_body
        assert reply.to == "finn@example.com"
        assert "Dear Finn" in reply.html_body

    @pytest.mark.parametrize(
        "name, email, message",
        [("", "f@x.io", "hi"), ("Finn", None, "hi"), ("Finn", "f@x.io", "  ")],
    )
    def test_required_fields(self, name, email, message):
        handler = SubmitContactHandler(FakeMailer(), sender=SENDER, shop_address=SENDER)
        with pytest.raises(ValidationError, match="Name, email, and message are required"):
            handler.handle(name, email, message)

    def test_dispatch_failure_reported(self):
        handler = SubmitContactHandler(FakeMailer(fail=True), sender=SENDER, shop_address=SENDER)
        with pytest.raises(NotificationError, match="Failed to send message"):
            handler.handle("Finn", "finn@example.com", "hi")

    def test_multiline_name_stays_out_of_headers(self):
        mailer = FakeMailer()
        handler = SubmitContactHandler(mailer, sender=SENDER, shop_address="owner@example.com")

        handler.handle("Finn\r\nBcc: victim@example.com", "finn@example.com", "hi")

        notification, _ = mailer.sent
        assert "\r" not in notification.subject
        assert "\n" not in notification.subject
        assert notification.subject == (
            "New Contact Form Submission from Finn Bcc: victim@example.com"
        )
