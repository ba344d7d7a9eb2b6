"""Render application DTOs as the camelCase JSON the storefront expects."""

from __future__ import annotations

from typing import Any

from coffeeshop.application.dto import (
    CatalogItemDTO,
    OrderDTO,
    ReviewDTO,
    StoreInfoDTO,
    SubscriptionDTO,
)
from coffeeshop.domain.model.value_objects import json_number


def success(data: Any = None, message: str | None = None) -> dict[str, Any]:
    body: dict[str, Any] = {"success": True}
    if message is not None:
        body["message"] = message
    if data is not None:
        body["data"] = data
    return body


def catalog_item(dto: CatalogItemDTO) -> dict[str, Any]:
    return {
        "id": dto.id,
        "name": dto.name,
        "price": json_number(dto.price),
        "description": dto.description,
    }


def store_info(dto: StoreInfoDTO) -> dict[str, Any]:
    return {"weekdays": dto.weekdays, "weekends": dto.weekends, "phone": dto.phone}


def order(dto: OrderDTO) -> dict[str, Any]:
    return {
        "id": dto.id,
        "customerName": dto.customer_name,
        "email": dto.email,
        "phone": dto.phone,
        "items": [
            {
                "id": line.item_id,
                "name": line.name,
                "price": json_number(line.unit_price),
                "quantity": line.quantity,
            }
            for line in dto.lines
        ],
        "total": json_number(dto.total),
        "notes": dto.notes,
        "status": dto.status,
        "createdAt": dto.created_at,
        "updatedAt": dto.updated_at,
    }


def review(dto: ReviewDTO) -> dict[str, Any]:
    return {
        "id": dto.id,
        "name": dto.name,
        "email": dto.email,
        "rating": dto.rating,
        "comment": dto.comment,
        "approved": dto.approved,
        "createdAt": dto.created_at,
    }


def subscription(dto: SubscriptionDTO) -> dict[str, Any]:
    return {"id": dto.id, "email": dto.email, "subscribedAt": dto.subscribed_at}
