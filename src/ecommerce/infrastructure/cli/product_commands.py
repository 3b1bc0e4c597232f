"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from ecommerce.application.bulk_update_prices import BulkUpdatePricesHandler
from ecommerce.application.price_list import PriceListHandler
from ecommerce.application.show_product import ShowProductHandler
from ecommerce.domain.exceptions import DomainException
from ecommerce.infrastructure.bootstrap import unit_of_work


@click.command("show")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def product_show(product_id: int) -> None:
    """Show price and stock of a product."""
    try:
        dto = ShowProductHandler(unit_of_work()).handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product: {dto.name}, Price: {dto.price}, Stock: {dto.stock}")


@click.command("prices")
def product_prices() -> None:
    """List all products by category."""
    count = 0
    try:
        for entry in PriceListHandler(unit_of_work()).handle():
            click.echo(f"{entry.category}: {entry.name} - {entry.price}")
            count += 1
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if count == 0:
        click.echo("No products found.")


@click.command("bulk-update")
@click.option("--category", required=True, help="Category to reprice.")
@click.option("--percent", required=True, help="Signed percentage, e.g. 10 or -5.5.")
def product_bulk_update(category: str, percent: str) -> None:
    """Change every price in a category by a percentage (all or nothing)."""
    try:
        updated = BulkUpdatePricesHandler(unit_of_work()).handle(category, percent)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if updated == 0:
        click.echo(f"No products found in category: {category}")
    else:
        click.echo(f"Successfully updated {updated} products in category: {category}")
