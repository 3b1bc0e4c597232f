"""CLI commands for read-only reports."""

from __future__ import annotations

import click

from ecommerce.application.customer_orders import CustomerOrdersHandler
from ecommerce.application.top_selling_products import (
    DEFAULT_LIMIT,
    TopSellingProductsHandler,
)
from ecommerce.domain.exceptions import DomainException
from ecommerce.infrastructure.bootstrap import unit_of_work


@click.command("top-sellers")
@click.option("--limit", default=DEFAULT_LIMIT, show_default=True, type=int)
def report_top_sellers(limit: int) -> None:
    """Best selling products by units sold."""
    try:
        sellers = TopSellingProductsHandler(unit_of_work()).handle(limit)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not sellers:
        click.echo("No sales yet.")
        return
    for seller in sellers:
        click.echo(f"Top Product: {seller.name} - {seller.price} ({seller.units_sold} sold)")


@click.command("customer-orders")
@click.option("--customer", "customer_id", required=True, type=int, help="Customer ID.")
def report_customer_orders(customer_id: int) -> None:
    """Orders of one customer, newest first."""
    try:
        orders = CustomerOrdersHandler(unit_of_work()).handle(customer_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not orders:
        click.echo("No orders found for this customer.")
        return

    click.echo(f"{'Order':<8} {'Date':<17} {'Total':>12} {'Status':>10}")
    click.echo("-" * 50)
    for order in orders:
        click.echo(f"{order.id:<8} {order.order_date:<17} {order.total:>12} {order.status:>10}")
    click.echo(f"Total orders: {len(orders)}")
