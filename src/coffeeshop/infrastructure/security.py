"""AccessPolicy implementations for the admin endpoints."""

from __future__ import annotations

import hmac

from coffeeshop.domain.exceptions import AuthorizationError
from coffeeshop.domain.service.access_policy import AccessPolicy


class OpenAccessPolicy(AccessPolicy):
    """Lets every caller through. Used when no admin token is configured."""

    def authorize(self, token: str | None) -> None:
        return None


class AdminTokenPolicy(AccessPolicy):
    """Requires the caller to present the configured shared secret."""

    def __init__(self, admin_token: str) -> None:
        if not admin_token:
            raise ValueError("admin_token must not be empty")
        self._admin_token = admin_token

    def authorize(self, token: str | None) -> None:
        if not token or not hmac.compare_digest(token.encode(), self._admin_token.encode()):
            raise AuthorizationError("Unauthorized")
