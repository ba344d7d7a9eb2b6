"""Abstract repository for reviews."""

from __future__ import annotations

from abc import ABC, abstractmethod

from coffeeshop.domain.model.review import Review


class ReviewRepository(ABC):

    @abstractmethod
    def get_by_id(self, review_id: int) -> Review | None:
        """Return a review by its ID, or None if not found."""

    @abstractmethod
    def list_approved(self) -> list[Review]:
        """Return approved reviews in submission order."""

    @abstractmethod
    def save(self, review: Review) -> None:
        """Persist a new or updated review, assigning an ID if needed."""
