"""Errors raised on the storefront (client) side."""

from __future__ import annotations


class StorefrontError(Exception):
    """Base class for storefront errors; the message is shown to the user."""


class CheckoutError(StorefrontError):
    """Checkout was refused before anything was sent to the shop."""


class ApiError(StorefrontError):
    """The shop API answered with a failure, or could not be reached."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
