"""CLI commands for the newsletter and contact form."""

from __future__ import annotations

import click

from coffeeshop.infrastructure.cli.context import get_client
from coffeeshop.storefront.exceptions import StorefrontError


@click.command("subscribe")
@click.option("--email", required=True, help="Address to subscribe.")
@click.pass_context
def subscribe(ctx: click.Context, email: str) -> None:
    """Subscribe to the newsletter."""
    try:
        subscription = get_client(ctx).subscribe_newsletter(email)
    except StorefrontError as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Subscribed {subscription['email']} (#{subscription['id']})")


@click.command("contact")
@click.option("--name", required=True, help="Your name.")
@click.option("--email", required=True, help="Where we should reply.")
@click.option("--message", required=True, help="What you want to tell us.")
@click.option("--phone", default=None, help="Optional phone number.")
@click.pass_context
def contact(ctx: click.Context, name: str, email: str, message: str, phone: str | None) -> None:
    """Send a message to the shop."""
    try:
        reply = get_client(ctx).submit_contact(name, email, message, phone)
    except StorefrontError as exc:
        raise click.ClickException(str(exc))

    click.echo(reply or "Message sent.")
