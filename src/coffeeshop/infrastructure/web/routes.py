"""HTTP endpoints under ``/api``.

Each endpoint builds the matching application handler from the shared
Container and renders its DTOs. Domain exceptions are left to the
handlers registered in ``errors``.
"""

from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Header, Request

from coffeeshop.application.dto import OrderLineSpec
from coffeeshop.application.list_menu import ListMenuHandler
from coffeeshop.application.list_orders import ListOrdersHandler
from coffeeshop.application.list_reviews import ListReviewsHandler
from coffeeshop.application.place_order import PlaceOrderHandler
from coffeeshop.application.show_store_info import ShowStoreInfoHandler
from coffeeshop.application.submit_contact import SubmitContactHandler
from coffeeshop.application.submit_review import SubmitReviewHandler
from coffeeshop.application.subscribe_newsletter import SubscribeNewsletterHandler
from coffeeshop.application.update_order_status import UpdateOrderStatusHandler
from coffeeshop.infrastructure.bootstrap import Container
from coffeeshop.infrastructure.web import presenters
from coffeeshop.infrastructure.web.schemas import (
    ContactIn,
    NewsletterIn,
    OrderIn,
    OrderStatusIn,
    ReviewIn,
)

ADMIN_TOKEN_HEADER = "X-Admin-Token"

router = APIRouter(prefix="/api")


def get_container(request: Request) -> Container:
    return request.app.state.container


# --- Catalog --------------------------------------------------------------------


@router.get("/menu")
def get_menu(container: Container = Depends(get_container)):
    items = ListMenuHandler(container.catalog_repo).handle()
    return presenters.success(data=[presenters.catalog_item(item) for item in items])


@router.get("/store-info")
def get_store_info(container: Container = Depends(get_container)):
    info = ShowStoreInfoHandler(container.catalog_repo).handle()
    return presenters.success(data=presenters.store_info(info))


# --- Newsletter & contact -----------------------------------------------------------


@router.post("/newsletter")
def subscribe_newsletter(body: NewsletterIn, container: Container = Depends(get_container)):
    handler = SubscribeNewsletterHandler(
        subscription_repo=container.subscription_repo,
        catalog_repo=container.catalog_repo,
        mailer=container.mailer,
        sender=container.settings.mail_sender,
    )
    dto = handler.handle(body.email)
    return presenters.success(
        data=presenters.subscription(dto),
        message="Successfully subscribed to newsletter",
    )


@router.post("/contact")
def submit_contact(body: ContactIn, container: Container = Depends(get_container)):
    handler = SubmitContactHandler(
        mailer=container.mailer,
        sender=container.settings.mail_sender,
        shop_address=container.settings.shop_address,
    )
    handler.handle(name=body.name, email=body.email, message=body.message, phone=body.phone)
    return presenters.success(message="Message sent successfully")


# --- Orders ---------------------------------------------------------------------------


@router.post("/order")
def place_order(body: OrderIn, container: Container = Depends(get_container)):
    specs = [
        OrderLineSpec(
            item_id=item.id,
            name=item.name,
            unit_price=item.price,
            quantity=item.quantity,
        )
        for item in body.items or []
    ]
    dto = PlaceOrderHandler(container.order_repo).handle(
        customer_name=body.customer_name,
        email=body.email,
        line_specs=specs,
        phone=body.phone,
        total=body.total,
        notes=body.notes,
    )
    return presenters.success(data=presenters.order(dto), message="Order placed successfully")


@router.get("/orders")
def list_orders(
    container: Container = Depends(get_container),
    admin_token: str | None = Header(default=None, alias=ADMIN_TOKEN_HEADER),
):
    orders = ListOrdersHandler(container.order_repo, container.access_policy).handle(admin_token)
    return presenters.success(data=[presenters.order(dto) for dto in orders])


@router.put("/orders/{order_id}")
def update_order_status(
    order_id: str,
    body: OrderStatusIn,
    container: Container = Depends(get_container),
    admin_token: str | None = Header(default=None, alias=ADMIN_TOKEN_HEADER),
):
    handler = UpdateOrderStatusHandler(container.order_repo, container.access_policy)
    dto = handler.handle(order_id, body.status, admin_token)
    return presenters.success(data=presenters.order(dto), message="Order status updated")


# --- Reviews --------------------------------------------------------------------------


@router.post("/reviews")
def submit_review(body: ReviewIn, container: Container = Depends(get_container)):
    dto = SubmitReviewHandler(container.review_repo).handle(
        name=body.name, rating=body.rating, comment=body.comment, email=body.email
    )
    return presenters.success(data=presenters.review(dto), message="Review submitted successfully")


@router.get("/reviews")
def list_reviews(container: Container = Depends(get_container)):
    reviews = ListReviewsHandler(container.review_repo).handle()
    return presenters.success(data=[presenters.review(dto) for dto in reviews])


# --- Health ---------------------------------------------------------------------------


@router.get("/health")
def health():
    body = presenters.success(message="Server is running")
    body["timestamp"] = datetime.now(timezone.utc).isoformat()
    return body
