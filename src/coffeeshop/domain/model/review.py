"""Review entity with a moderation flag."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from coffeeshop.domain.exceptions import ValidationError
from coffeeshop.domain.model.value_objects import Rating


@dataclass
class Review:
    """A customer review.

    Reviews are created unapproved and stay hidden from the public listing
    until something calls ``approve()``. No HTTP endpoint does; moderation
    happens outside the API.
    """

    id: int | None
    name: str
    rating: Rating
    comment: str
    email: str = ""
    approved: bool = False
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(
        name: str | None,
        rating: int | None,
        comment: str | None,
        email: str | None = None,
    ) -> Review:
        if not name or not name.strip() or rating is None or not comment or not comment.strip():
            raise ValidationError("Name, rating, and comment are required")

        return Review(
            id=None,
            name=name.strip(),
            rating=Rating(rating),
            comment=comment.strip(),
            email=(email or "").strip(),
        )

    def approve(self) -> None:
        self.approved = True
