"""CLI commands for checkout and order administration."""

from __future__ import annotations

import click

from coffeeshop.infrastructure.cli.context import get_client, money
from coffeeshop.storefront.cart import Cart
from coffeeshop.storefront.checkout import CheckoutFlow
from coffeeshop.storefront.exceptions import StorefrontError


def _parse_items(raw: str) -> list[tuple[int, int]]:
    """Parse '1:3,5:1' into (menu id, quantity) pairs."""
    pairs: list[tuple[int, int]] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'MenuId:Quantity'."
            )
        id_str, qty_str = pair.split(":", 1)
        try:
            item_id, qty = int(id_str), int(qty_str)
        except ValueError:
            raise click.BadParameter(f"Invalid item '{pair}'. IDs and quantities are integers.")
        if qty < 1:
            raise click.BadParameter(f"Quantity for item {item_id} must be at least 1.")
        pairs.append((item_id, qty))
    return pairs


def _display_order(order: dict) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{order['id']}  (status={order['status']})")
    click.echo(f"Customer: {order['customerName']} <{order['email']}>")
    if order.get("phone"):
        click.echo(f"Phone:    {order['phone']}")
    click.echo(f"Created:  {order['createdAt']}")
    if order.get("updatedAt"):
        click.echo(f"Updated:  {order['updatedAt']}")
    click.echo()
    click.echo(f"  {'Item':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for line in order["items"]:
        click.echo(
            f"  {line['name']:<20} {line['quantity']:>5} "
            f"{money(line['price']):>10} {money(line['price'] * line['quantity']):>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Order Total':<27} {money(order['total']):>20}")
    if order.get("notes"):
        click.echo(f"Notes: {order['notes']}")


@click.command("checkout")
@click.option("--customer", required=True, help="Customer name.")
@click.option("--email", required=True, help="Customer email.")
@click.option("--phone", default="", help="Customer phone (optional).")
@click.option("--notes", default="", help="Notes for the barista.")
@click.option("--items", required=True, help="Menu items as 'MenuId:Qty,MenuId:Qty'.")
@click.pass_context
def order_checkout(
    ctx: click.Context, customer: str, email: str, phone: str, notes: str, items: str
) -> None:
    """Put menu items in a cart and place the order."""
    wanted = _parse_items(items)
    client = get_client(ctx)

    try:
        menu = {item["id"]: item for item in client.get_menu()}
    except StorefrontError as exc:
        raise click.ClickException(str(exc))

    cart = Cart()
    for item_id, qty in wanted:
        item = menu.get(item_id)
        if item is None:
            raise click.ClickException(f"Menu item #{item_id} not found")
        for _ in range(qty):
            cart.add_line(item["id"], item["name"], item["price"])

    try:
        order = CheckoutFlow(client).checkout(
            cart, customer_name=customer, email=email, phone=phone, notes=notes
        )
    except StorefrontError as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order placed successfully! Order ID: {order['id']}")
    click.echo()
    _display_order(order)


@click.command("list")
@click.pass_context
def order_list(ctx: click.Context) -> None:
    """List every order placed since the server started."""
    try:
        orders = get_client(ctx).list_orders()
    except StorefrontError as exc:
        raise click.ClickException(str(exc))

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<6} {'Customer':<20} {'Status':<12} {'Total':>10}")
    click.echo("-" * 51)
    for o in orders:
        click.echo(f"{o['id']:<6} {o['customerName']:<20} {o['status']:<12} {money(o['total']):>10}")


@click.command("status")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to update.")
@click.option("--status", required=True, help="New status, e.g. 'ready'.")
@click.pass_context
def order_status(ctx: click.Context, order_id: int, status: str) -> None:
    """Change the status of an order."""
    try:
        order = get_client(ctx).update_order_status(order_id, status)
    except StorefrontError as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} status updated to '{order['status']}'.")
