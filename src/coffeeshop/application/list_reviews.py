"""Application service: List Reviews use case (public query)."""

from __future__ import annotations

from coffeeshop.application.dto import ReviewDTO
from coffeeshop.domain.repository.review_repository import ReviewRepository


class ListReviewsHandler:

    def __init__(self, review_repo: ReviewRepository) -> None:
        self._review_repo = review_repo

    def handle(self) -> list[ReviewDTO]:
        """Only approved reviews are ever returned."""
        return [
            ReviewDTO.from_domain(review)
            for review in self._review_repo.list_approved()
            if review.approved
        ]
