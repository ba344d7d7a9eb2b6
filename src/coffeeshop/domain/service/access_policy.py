"""Access check for administrative operations (order listing and updates)."""

from __future__ import annotations

from abc import ABC, abstractmethod


class AccessPolicy(ABC):

    @abstractmethod
    def authorize(self, token: str | None) -> None:
        """Return normally if *token* grants admin access.

        Raises AuthorizationError otherwise.
        """
