"""CLI commands for the menu and store information."""

from __future__ import annotations

import click

from coffeeshop.infrastructure.cli.context import get_client, money
from coffeeshop.storefront.exceptions import StorefrontError


@click.command("menu")
@click.pass_context
def menu(ctx: click.Context) -> None:
    """List the coffee menu."""
    try:
        items = get_client(ctx).get_menu()
    except StorefrontError as exc:
        raise click.ClickException(str(exc))

    if not items:
        click.echo("The menu is empty.")
        return

    click.echo(f"{'ID':<4} {'Name':<16} {'Price':>8}  Description")
    click.echo("-" * 72)
    for item in items:
        click.echo(
            f"{item['id']:<4} {item['name']:<16} {money(item['price']):>8}  {item['description']}"
        )


@click.command("store-info")
@click.pass_context
def store_info(ctx: click.Context) -> None:
    """Show opening hours and phone number."""
    try:
        info = get_client(ctx).get_store_info()
    except StorefrontError as exc:
        raise click.ClickException(str(exc))

    click.echo(info.get("weekdays", ""))
    click.echo(info.get("weekends", ""))
    click.echo(f"Phone: {info.get('phone', '')}")
