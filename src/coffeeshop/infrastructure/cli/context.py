"""Shared helpers for CLI commands that talk to a running shop."""

from __future__ import annotations

import click

from coffeeshop.storefront.client import DEFAULT_URL, CoffeeShopClient


def get_client(ctx: click.Context) -> CoffeeShopClient:
    """Return the client stored on the context, creating it on first use."""
    obj = ctx.ensure_object(dict)
    if "client" not in obj:
        obj["client"] = CoffeeShopClient(
            base_url=obj.get("url") or DEFAULT_URL,
            admin_token=obj.get("admin_token"),
        )
    return obj["client"]


def money(value: int | float) -> str:
    return f"${value:.2f}"
