"""Fixtures for tests that go through the HTTP API."""

import pytest
from fastapi.testclient import TestClient

from coffeeshop.infrastructure.bootstrap import build_container
from coffeeshop.infrastructure.config import Settings
from coffeeshop.infrastructure.web.app import create_app
from tests.fakes import ADMIN_TOKEN, FakeMailer


@pytest.fixture
def mailer() -> FakeMailer:
    return FakeMailer()


@pytest.fixture
def container(mailer):
    settings = Settings(email_user="shop@example.com", contact_email="owner@example.com")
    return build_container(settings, mailer_override=mailer)


@pytest.fixture
def api(container):
    with TestClient(create_app(container)) as client:
        yield client


@pytest.fixture
def secured_api(mailer):
    settings = Settings(admin_token=ADMIN_TOKEN)
    with TestClient(create_app(build_container(settings, mailer_override=mailer))) as client:
        yield client
