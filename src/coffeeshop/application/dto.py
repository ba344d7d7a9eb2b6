"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the web/CLI layers and the application layer
without exposing domain internals. Money stays a Decimal here; the web
layer decides how to render it.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from coffeeshop.domain.model.catalog import CatalogItem, StoreInfo
from coffeeshop.domain.model.order import Order
from coffeeshop.domain.model.review import Review
from coffeeshop.domain.model.subscription import NewsletterSubscription


@dataclass(frozen=True)
class OrderLineSpec:
    """Input: one cart line as submitted at checkout."""

    item_id: int | None
    name: str
    unit_price: Decimal
    quantity: int


@dataclass(frozen=True)
class OrderLineDTO:
    item_id: int | None
    name: str
    unit_price: Decimal
    quantity: int


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order."""

    id: int
    customer_name: str
    email: str
    phone: str
    lines: list[OrderLineDTO]
    total: Decimal
    notes: str
    status: str
    created_at: str
    updated_at: str | None

    @staticmethod
    def from_domain(order: Order) -> OrderDTO:
        return OrderDTO(
            id=order.id,  # type: ignore[arg-type]
            customer_name=order.customer_name,
            email=order.email,
            phone=order.phone,
            lines=[
                OrderLineDTO(
                    item_id=line.item_id,
                    name=line.name,
                    unit_price=line.unit_price.amount,
                    quantity=line.quantity.value,
                )
                for line in order.lines
            ],
            total=order.total.amount,
            notes=order.notes,
            status=order.status,
            created_at=order.created_at.isoformat(),
            updated_at=order.updated_at.isoformat() if order.updated_at else None,
        )


@dataclass(frozen=True)
class ReviewDTO:
    id: int
    name: str
    email: str
    rating: int
    comment: str
    approved: bool
    created_at: str

    @staticmethod
    def from_domain(review: Review) -> ReviewDTO:
        return ReviewDTO(
            id=review.id,  # type: ignore[arg-type]
            name=review.name,
            email=review.email,
            rating=review.rating.value,
            comment=review.comment,
            approved=review.approved,
            created_at=review.created_at.isoformat(),
        )


@dataclass(frozen=True)
class SubscriptionDTO:
    id: int
    email: str
    subscribed_at: str

    @staticmethod
    def from_domain(subscription: NewsletterSubscription) -> SubscriptionDTO:
        return SubscriptionDTO(
            id=subscription.id,  # type: ignore[arg-type]
            email=str(subscription.email),
            subscribed_at=subscription.subscribed_at.isoformat(),
        )


@dataclass(frozen=True)
class CatalogItemDTO:
    id: int
    name: str
    price: Decimal
    description: str

    @staticmethod
    def from_domain(item: CatalogItem) -> CatalogItemDTO:
        return CatalogItemDTO(
            id=item.id,
            name=item.name,
            price=item.price.amount,
            description=item.description,
        )


@dataclass(frozen=True)
class StoreInfoDTO:
    weekdays: str
    weekends: str
    phone: str

    @staticmethod
    def from_domain(info: StoreInfo) -> StoreInfoDTO:
        return StoreInfoDTO(weekdays=info.weekdays, weekends=info.weekends, phone=info.phone)
