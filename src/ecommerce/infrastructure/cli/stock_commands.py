"""CLI commands for stock management."""

from __future__ import annotations

import click

from ecommerce.application.adjust_stock import AdjustStockHandler
from ecommerce.domain.exceptions import DomainException
from ecommerce.domain.model.inventory import NegativeStockRejected
from ecommerce.infrastructure.bootstrap import unit_of_work


@click.command("adjust")
@click.option("--product", "product_id", required=True, type=int, help="Product ID.")
@click.option("--delta", required=True, type=int, help="Signed change, e.g. 5 or -3.")
def stock_adjust(product_id: int, delta: int) -> None:
    """Restock (positive delta) or write off (negative delta) a product."""
    try:
        result = AdjustStockHandler(unit_of_work()).handle(product_id, delta)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if isinstance(result, NegativeStockRejected):
        raise click.ClickException(
            f"Stock cannot be negative for product {product_id} "
            f"(current {result.current_stock}, attempted change {result.attempted_change})"
        )
    click.echo(f"Stock updated for product {product_id}: {result.old_stock} -> {result.new_stock}")
