import click

from ecommerce.infrastructure.bootstrap import init_db, unit_of_work
from ecommerce.infrastructure.cli.order_commands import (
    order_create,
    order_process,
    order_show,
    order_total,
)
from ecommerce.infrastructure.cli.product_commands import (
    product_bulk_update,
    product_prices,
    product_show,
)
from ecommerce.infrastructure.cli.report_commands import (
    report_customer_orders,
    report_top_sellers,
)
from ecommerce.infrastructure.cli.stock_commands import stock_adjust
from ecommerce.infrastructure.logging import configure_logging
from ecommerce.infrastructure.persistence.seed import seed_sample_data


@click.group()
def cli() -> None:
    """E-commerce order and inventory engine"""
    configure_logging()


@cli.group()
def db() -> None:
    """Manage the database."""


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def stock() -> None:
    """Manage stock levels."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def report() -> None:
    """Read-only reports."""


@db.command("init")
def db_init() -> None:
    """Create the tables."""
    init_db()
    click.echo("Database initialised.")


@db.command("seed")
def db_seed() -> None:
    """Create the tables and insert sample customers and products."""
    init_db()
    if seed_sample_data(unit_of_work()):
        click.echo("Sample data inserted.")
    else:
        click.echo("Sample data already present.")


# Register subcommands
order.add_command(order_create)
order.add_command(order_process)
order.add_command(order_show)
order.add_command(order_total)
stock.add_command(stock_adjust)
product.add_command(product_bulk_update)
product.add_command(product_prices)
product.add_command(product_show)
report.add_command(report_customer_orders)
report.add_command(report_top_sellers)
