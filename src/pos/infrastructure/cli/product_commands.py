"""CLI commands for the Product aggregate."""

from __future__ import annotations

from decimal import Decimal

import click

from pos.application.dto import (
    AdjustStockCommand,
    ByIdQuery,
    CreateProductCommand,
    ListQuery,
    SetProductActiveCommand,
    UpdateProductCommand,
)
from pos.infrastructure import bootstrap
from pos.infrastructure.cli.common import DECIMAL, execute


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--sku", required=True, help="Stock keeping unit (unique).")
@click.option("--price", required=True, type=DECIMAL, help="Unit sale price.")
@click.option("--cost", default="0", type=DECIMAL, help="Unit cost.")
@click.option("--stock", default=0, type=int, help="Initial stock quantity.")
@click.option("--category", "category_id", required=True, type=click.UUID, help="Category ID.")
@click.option("--description", default=None, help="Optional description.")
def product_add(
    name: str,
    sku: str,
    price: Decimal,
    cost: Decimal,
    stock: int,
    category_id,
    description: str | None,
) -> None:
    """Add a product to the catalog."""
    product_id = execute(
        bootstrap.create_product_handler(),
        CreateProductCommand(
            name=name,
            sku=sku,
            description=description,
            price=price,
            cost=cost,
            stock_quantity=stock,
            category_id=category_id,
        ),
    )
    click.echo(f"Product {product_id} created.")


@click.command("list")
def product_list() -> None:
    """List active products with price and stock."""
    products = execute(bootstrap.get_products_handler(), ListQuery())
    if not products:
        click.echo("No products.")
        return

    click.echo(f"  {'ID':<36}  {'SKU':<12} {'Name':<20} {'Price':>10} {'Stock':>6}")
    click.echo(f"  {'-'*88}")
    for p in products:
        click.echo(
            f"  {str(p.id):<36}  {p.sku:<12} {p.name:<20} {p.price:>10} {p.stock_quantity:>6}"
        )


@click.command("adjust-stock")
@click.option("--id", "product_id", required=True, type=click.UUID, help="Product ID.")
@click.option("--delta", required=True, type=int, help="Positive to restock, negative to consume.")
def product_adjust_stock(product_id, delta: int) -> None:
    """Restock or consume product stock."""
    stock = execute(bootstrap.adjust_stock_handler(), AdjustStockCommand(product_id, delta))
    click.echo(f"Product {product_id} stock is now {stock}.")


@click.command("show")
@click.option("--id", "product_id", required=True, type=click.UUID, help="Product ID.")
def product_show(product_id) -> None:
    """Show one product."""
    p = execute(bootstrap.get_product_by_id_handler(), ByIdQuery(product_id))
    click.echo(f"Product {p.id}  ({'active' if p.is_active else 'inactive'})")
    click.echo(f"Name:     {p.name}")
    click.echo(f"SKU:      {p.sku}")
    click.echo(f"Price:    {p.price}")
    click.echo(f"Cost:     {p.cost}")
    click.echo(f"Stock:    {p.stock_quantity}")
    click.echo(f"Category: {p.category_id}")


@click.command("update")
@click.option("--id", "product_id", required=True, type=click.UUID, help="Product ID.")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, type=DECIMAL, help="Unit sale price.")
@click.option("--cost", required=True, type=DECIMAL, help="Unit cost.")
@click.option("--category", "category_id", required=True, type=click.UUID, help="Category ID.")
@click.option("--description", default=None, help="Optional description.")
def product_update(
    product_id,
    name: str,
    price: Decimal,
    cost: Decimal,
    category_id,
    description: str | None,
) -> None:
    """Edit a product's details.  Existing sale lines keep their old price."""
    execute(
        bootstrap.update_product_handler(),
        UpdateProductCommand(
            product_id=product_id,
            name=name,
            description=description,
            price=price,
            cost=cost,
            category_id=category_id,
        ),
    )
    click.echo(f"Product {product_id} updated.")


@click.command("activate")
@click.option("--id", "product_id", required=True, type=click.UUID, help="Product ID.")
def product_activate(product_id) -> None:
    """Make a product available for sale again."""
    execute(bootstrap.set_product_active_handler(), SetProductActiveCommand(product_id, True))
    click.echo(f"Product {product_id} activated.")


@click.command("deactivate")
@click.option("--id", "product_id", required=True, type=click.UUID, help="Product ID.")
def product_deactivate(product_id) -> None:
    """Withdraw a product from sale."""
    execute(bootstrap.set_product_active_handler(), SetProductActiveCommand(product_id, False))
    click.echo(f"Product {product_id} deactivated.")
