"""Request bodies accepted by the HTTP API.

Required fields are declared optional on purpose: missing values reach
the application layer, which answers with the shop's own messages.
Wrong JSON types are rejected here and reported as a bad request.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field


class OrderItemIn(BaseModel):
    id: int | None = None
    name: str = ""
    price: Decimal = Field(ge=0)
    quantity: int = Field(ge=1)


class OrderIn(BaseModel):
    customer_name: str | None = Field(default=None, alias="customerName")
    email: str | None = None
    phone: str | None = None
    items: list[OrderItemIn] | None = None
    total: Decimal | None = Field(default=None, ge=0)
    notes: str | None = None


class OrderStatusIn(BaseModel):
    status: str | None = None


class ReviewIn(BaseModel):
    name: str | None = None
    email: str | None = None
    rating: int | None = None
    comment: str | None = None


class NewsletterIn(BaseModel):
    email: str | None = None


class ContactIn(BaseModel):
    name: str | None = None
    email: str | None = None
    message: str | None = None
    phone: str | None = None
