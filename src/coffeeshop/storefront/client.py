"""HTTP client for the coffee shop API.

Every call unwraps the ``{success, data, message}`` envelope and raises
ApiError with the server's message when the call did not succeed.
"""

from __future__ import annotations

import logging
from typing import Any

import requests

from coffeeshop.storefront.exceptions import ApiError

logger = logging.getLogger(__name__)

DEFAULT_URL = "http://127.0.0.1:3000"
ADMIN_TOKEN_HEADER = "X-Admin-Token"


class CoffeeShopClient:

    def __init__(
        self,
        base_url: str = DEFAULT_URL,
        admin_token: str | None = None,
        timeout: float | None = 10.0,
        session: Any | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._admin_token = admin_token
        self._timeout = timeout
        # Anything with a requests-style ``request()`` works, e.g. a
        # FastAPI TestClient.
        self._session = session if session is not None else requests.Session()

    # --- Public endpoints -----------------------------------------------------

    def get_menu(self) -> list[dict[str, Any]]:
        return self._request("GET", "/api/menu").get("data", [])

    def get_store_info(self) -> dict[str, Any]:
        return self._request("GET", "/api/store-info").get("data", {})

    def subscribe_newsletter(self, email: str) -> dict[str, Any]:
        return self._request("POST", "/api/newsletter", json={"email": email})["data"]

    def submit_contact(
        self, name: str, email: str, message: str, phone: str | None = None
    ) -> str:
        body = {"name": name, "email": email, "message": message, "phone": phone}
        return self._request("POST", "/api/contact", json=body).get("message", "")

    def place_order(self, order: dict[str, Any]) -> dict[str, Any]:
        return self._request("POST", "/api/order", json=order)["data"]

    def submit_review(
        self, name: str, rating: int, comment: str, email: str | None = None
    ) -> dict[str, Any]:
        body = {"name": name, "email": email, "rating": rating, "comment": comment}
        return self._request("POST", "/api/reviews", json=body)["data"]

    def get_reviews(self) -> list[dict[str, Any]]:
        return self._request("GET", "/api/reviews").get("data", [])

    def health(self) -> dict[str, Any]:
        return self._request("GET", "/api/health")

    # --- Admin endpoints ------------------------------------------------------

    def list_orders(self) -> list[dict[str, Any]]:
        return self._request("GET", "/api/orders", admin=True).get("data", [])

    def update_order_status(self, order_id: int, status: str) -> dict[str, Any]:
        return self._request(
            "PUT", f"/api/orders/{order_id}", json={"status": status}, admin=True
        )["data"]

    # --- Internal helpers -----------------------------------------------------

    def _request(
        self,
        method: str,
        path: str,
        json: dict[str, Any] | None = None,
        admin: bool = False,
    ) -> dict[str, Any]:
        headers = {"Accept": "application/json"}
        if admin and self._admin_token:
            headers[ADMIN_TOKEN_HEADER] = self._admin_token

        kwargs: dict[str, Any] = {"headers": headers}
        if json is not None:
            kwargs["json"] = json
        if self._timeout is not None:
            kwargs["timeout"] = self._timeout

        url = f"{self._base_url}{path}"
        try:
            response = self._session.request(method, url, **kwargs)
        except requests.RequestException as exc:
            logger.error("%s %s failed: %s", method, url, exc)
            raise ApiError("Could not reach the coffee shop") from exc

        try:
            body = response.json()
        except ValueError:
            body = {}

        if not 200 <= response.status_code < 300 or not body.get("success", False):
            message = body.get("message") or "Request failed"
            logger.warning("%s %s -> %s: %s", method, path, response.status_code, message)
            raise ApiError(message, status_code=response.status_code)

        return body
