import click

from pos.domain.exceptions import PersistenceError
from pos.infrastructure import bootstrap
from pos.infrastructure.cli.category_commands import category_add, category_list, category_show
from pos.infrastructure.cli.customer_commands import (
    customer_add,
    customer_list,
    customer_sales,
    customer_show,
    customer_update,
)
from pos.infrastructure.cli.product_commands import (
    product_activate,
    product_add,
    product_adjust_stock,
    product_deactivate,
    product_list,
    product_show,
    product_update,
)
from pos.infrastructure.cli.sale_commands import (
    sale_add_item,
    sale_cancel,
    sale_complete,
    sale_create,
    sale_discount,
    sale_open,
    sale_remove_item,
    sale_show,
)
from pos.infrastructure.config import get_settings
from pos.infrastructure.logging_config import configure_logging


@click.group()
def cli() -> None:
    """POS: Point of Sale backend"""
    configure_logging(get_settings())


@cli.group()
def db() -> None:
    """Manage the database."""


@db.command("init")
def db_init() -> None:
    """Create any missing tables."""
    try:
        bootstrap.engine()
    except PersistenceError as exc:
        raise click.ClickException(str(exc))
    click.echo(f"Database ready at {get_settings().database_url}")


@cli.command("health")
def health() -> None:
    """Check that the database answers."""
    try:
        bootstrap.check_health()
    except PersistenceError as exc:
        raise click.ClickException(f"Unhealthy: {exc}")
    click.echo("Healthy")


@cli.group()
def category() -> None:
    """Manage categories."""


@cli.group()
def customer() -> None:
    """Manage customers."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def sale() -> None:
    """Manage sales."""


# Register subcommands
category.add_command(category_add)
category.add_command(category_list)
category.add_command(category_show)
customer.add_command(customer_add)
customer.add_command(customer_list)
customer.add_command(customer_sales)
customer.add_command(customer_show)
customer.add_command(customer_update)
product.add_command(product_activate)
product.add_command(product_add)
product.add_command(product_adjust_stock)
product.add_command(product_deactivate)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_update)
sale.add_command(sale_add_item)
sale.add_command(sale_cancel)
sale.add_command(sale_complete)
sale.add_command(sale_create)
sale.add_command(sale_discount)
sale.add_command(sale_open)
sale.add_command(sale_remove_item)
sale.add_command(sale_show)
