"""CLI commands for reviews."""

from __future__ import annotations

import click

from coffeeshop.infrastructure.cli.context import get_client
from coffeeshop.storefront.exceptions import StorefrontError


@click.command("submit")
@click.option("--name", required=True, help="Your name.")
@click.option("--rating", required=True, type=int, help="Stars, 1 to 5.")
@click.option("--comment", required=True, help="Your review.")
@click.option("--email", default=None, help="Optional email.")
@click.pass_context
def review_submit(
    ctx: click.Context, name: str, rating: int, comment: str, email: str | None
) -> None:
    """Submit a review for moderation."""
    try:
        review = get_client(ctx).submit_review(name, rating, comment, email)
    except StorefrontError as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Review #{review['id']} submitted. It will be reviewed before publishing.")


@click.command("list")
@click.pass_context
def review_list(ctx: click.Context) -> None:
    """Show published reviews."""
    try:
        reviews = get_client(ctx).get_reviews()
    except StorefrontError as exc:
        raise click.ClickException(str(exc))

    if not reviews:
        click.echo("No reviews yet.")
        return

    for r in reviews:
        click.echo(f"{'*' * r['rating']:<5}  {r['name']}: {r['comment']}")
