"""Application service: Submit Review use case."""

from __future__ import annotations

import logging

from coffeeshop.application.dto import ReviewDTO
from coffeeshop.domain.model.review import Review
from coffeeshop.domain.repository.review_repository import ReviewRepository

logger = logging.getLogger(__name__)


class SubmitReviewHandler:

    def __init__(self, review_repo: ReviewRepository) -> None:
        self._review_repo = review_repo

    def handle(
        self,
        name: str | None,
        rating: int | None,
        comment: str | None,
        email: str | None = None,
    ) -> ReviewDTO:
        """Store a review awaiting moderation."""
        review = Review.create(name=name, rating=rating, comment=comment, email=email)
        self._review_repo.save(review)

        logger.info("Review #%s submitted (%s), awaiting approval", review.id, review.rating)
        return ReviewDTO.from_domain(review)
