import click

from coffeeshop.infrastructure.cli.catalog_commands import menu, store_info
from coffeeshop.infrastructure.cli.customer_commands import contact, subscribe
from coffeeshop.infrastructure.cli.order_commands import (
    order_checkout,
    order_list,
    order_status,
)
from coffeeshop.infrastructure.cli.review_commands import review_list, review_submit
from coffeeshop.infrastructure.cli.server_commands import serve
from coffeeshop.storefront.client import DEFAULT_URL


@click.group()
@click.option(
    "--url",
    envvar="COFFEESHOP_URL",
    default=DEFAULT_URL,
    show_default=True,
    help="Base URL of the shop API.",
)
@click.option(
    "--admin-token",
    envvar="COFFEESHOP_ADMIN_TOKEN",
    default=None,
    help="Token sent with admin requests.",
)
@click.pass_context
def cli(ctx: click.Context, url: str, admin_token: str | None) -> None:
    """Coffee Shop — storefront API and client"""
    obj = ctx.ensure_object(dict)
    obj.setdefault("url", url)
    obj.setdefault("admin_token", admin_token)


@cli.group()
def order() -> None:
    """Manage orders (admin)."""


@cli.group()
def review() -> None:
    """Submit and read reviews."""


# Register subcommands
cli.add_command(serve)
cli.add_command(menu)
cli.add_command(store_info)
cli.add_command(order_checkout)
cli.add_command(subscribe)
cli.add_command(contact)
order.add_command(order_list)
order.add_command(order_status)
review.add_command(review_list)
review.add_command(review_submit)
