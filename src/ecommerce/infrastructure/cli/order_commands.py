"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from ecommerce.application.calculate_order_total import CalculateOrderTotalHandler
from ecommerce.application.create_order import CreateOrderHandler
from ecommerce.application.dto import OrderDTO, OrderLineSpec
from ecommerce.application.process_daily_orders import ProcessDailyOrdersHandler
from ecommerce.application.show_order import ShowOrderHandler
from ecommerce.domain.exceptions import DomainException
from ecommerce.infrastructure.bootstrap import unit_of_work


def _parse_lines(raw: str) -> list[OrderLineSpec]:
    """Parse '1:3,2:5' (product ID:quantity) into OrderLineSpec list."""
    specs: list[OrderLineSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductID:Quantity'."
            )
        pid_str, qty_str = pair.split(":", 1)
        try:
            specs.append(OrderLineSpec(product_id=int(pid_str), quantity=int(qty_str)))
        except ValueError:
            raise click.BadParameter(f"Invalid item '{pair}'. Both parts must be integers.")
    return specs


def _display_order(dto: OrderDTO) -> None:
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"Customer: {dto.customer_id}")
    click.echo(f"Date:     {dto.order_date}")
    click.echo()
    click.echo(f"  {'Product':<10} {'Qty':>5} {'Price':>12} {'Total':>12}")
    click.echo(f"  {'-'*42}")
    for item in dto.items:
        click.echo(
            f"  {item.product_id:<10} {item.quantity:>5} {item.unit_price:>12} {item.line_total:>12}"
        )
    click.echo(f"  {'-'*42}")
    click.echo(f"  {'Order Total':<17} {dto.total:>25}")


@click.command("create")
@click.option("--customer", "customer_id", required=True, type=int, help="Customer ID.")
@click.option("--items", required=True, help="Items as 'ProductID:Qty,ProductID:Qty'.")
def order_create(customer_id: int, items: str) -> None:
    """Create a new order (validates and decrements stock atomically)."""
    lines = _parse_lines(items)
    uow = unit_of_work()

    try:
        order_id = CreateOrderHandler(uow).handle(customer_id, lines)
        dto = ShowOrderHandler(uow).handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} created successfully. Total: {dto.total}")


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
def order_show(order_id: int) -> None:
    """Show details of an existing order."""
    try:
        dto = ShowOrderHandler(unit_of_work()).handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("total")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
def order_total(order_id: int) -> None:
    """Recalculate an order total from its items ($0.00 if unknown)."""
    try:
        total = CalculateOrderTotalHandler(unit_of_work()).handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {order_id} total: {total}")


@click.command("process")
def order_process() -> None:
    """Mark every PENDING order as PROCESSED (best effort, per order)."""
    try:
        report = ProcessDailyOrdersHandler(unit_of_work()).handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    for order_id, reason in report.failures.items():
        click.echo(f"Error processing order {order_id}: {reason}", err=True)
    click.echo(f"Total orders processed: {report.processed_count}")
