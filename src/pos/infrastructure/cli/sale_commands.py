"""CLI commands for the Sale aggregate."""

from __future__ import annotations

from decimal import Decimal
from uuid import UUID

import click

from pos.application.dto import (
    AddSaleItemCommand,
    ApplyDiscountCommand,
    ByIdQuery,
    CreateSaleCommand,
    OpenSaleCommand,
    RemoveSaleItemCommand,
    SaleCommand,
    SaleItemSpec,
    SaleResponse,
)
from pos.infrastructure import bootstrap
from pos.infrastructure.cli.common import DECIMAL, execute


def _parse_items(raw: str) -> list[SaleItemSpec]:
    """Parse '<product-id>:3,<product-id>:5' into SaleItemSpec list."""
    specs: list[SaleItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductId:Quantity'."
            )
        product_str, qty_str = pair.rsplit(":", 1)
        try:
            product_id = UUID(product_str.strip())
        except ValueError:
            raise click.BadParameter(f"Invalid product id '{product_str}'.")
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{product_str}'."
            )
        specs.append(SaleItemSpec(product_id=product_id, quantity=qty))
    return specs


def _display_sale(sale: SaleResponse) -> None:
    click.echo(f"Sale {sale.id}  (status={sale.status})")
    click.echo(f"Payment:  {sale.payment_method}")
    if sale.customer_id is not None:
        click.echo(f"Customer: {sale.customer_id}")
    click.echo(f"Created:  {sale.created_at}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for item in sale.items:
        click.echo(
            f"  {item.product_name:<20} {item.quantity:>5} {item.unit_price:>10} {item.total_price:>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Subtotal':<27} {sale.subtotal:>20}")
    click.echo(f"  {'Tax':<27} {sale.tax_amount:>20}")
    click.echo(f"  {'Discount':<27} {sale.discount_amount:>20}")
    click.echo(f"  {'Total':<27} {sale.total_amount:>20}")


@click.command("create")
@click.option("--customer", "customer_id", default=None, type=click.UUID, help="Customer ID.")
@click.option("--payment", required=True, help="Payment method.")
@click.option("--items", required=True, help="Items as 'ProductId:Qty,ProductId:Qty'.")
def sale_create(customer_id, payment: str, items: str) -> None:
    """Check out a sale in one step (consumes stock and completes it)."""
    specs = _parse_items(items)
    sale_id = execute(
        bootstrap.create_sale_handler(),
        CreateSaleCommand(customer_id=customer_id, payment_method=payment, items=specs),
    )
    sale = execute(bootstrap.get_sale_handler(), ByIdQuery(sale_id))
    _display_sale(sale)


@click.command("open")
@click.option("--customer", "customer_id", default=None, type=click.UUID, help="Customer ID.")
@click.option("--payment", required=True, help="Payment method.")
def sale_open(customer_id, payment: str) -> None:
    """Open an empty pending sale."""
    sale_id = execute(
        bootstrap.open_sale_handler(),
        OpenSaleCommand(customer_id=customer_id, payment_method=payment),
    )
    click.echo(f"Sale {sale_id} opened.")


@click.command("add-item")
@click.option("--id", "sale_id", required=True, type=click.UUID, help="Sale ID.")
@click.option("--product", "product_id", required=True, type=click.UUID, help="Product ID.")
@click.option("--qty", "quantity", default=1, type=int, help="Quantity.")
def sale_add_item(sale_id, product_id, quantity: int) -> None:
    """Add units of a product to a pending sale."""
    execute(
        bootstrap.add_sale_item_handler(),
        AddSaleItemCommand(sale_id=sale_id, product_id=product_id, quantity=quantity),
    )
    click.echo(f"Added {quantity} x {product_id} to sale {sale_id}.")


@click.command("remove-item")
@click.option("--id", "sale_id", required=True, type=click.UUID, help="Sale ID.")
@click.option("--product", "product_id", required=True, type=click.UUID, help="Product ID.")
def sale_remove_item(sale_id, product_id) -> None:
    """Remove a product's line from a pending sale."""
    execute(
        bootstrap.remove_sale_item_handler(),
        RemoveSaleItemCommand(sale_id=sale_id, product_id=product_id),
    )
    click.echo(f"Removed {product_id} from sale {sale_id}.")


@click.command("discount")
@click.option("--id", "sale_id", required=True, type=click.UUID, help="Sale ID.")
@click.option("--amount", required=True, type=DECIMAL, help="Discount amount.")
def sale_discount(sale_id, amount: Decimal) -> None:
    """Set the discount of a pending sale."""
    execute(bootstrap.apply_discount_handler(), ApplyDiscountCommand(sale_id=sale_id, amount=amount))
    click.echo(f"Discount of {amount} applied to sale {sale_id}.")


@click.command("complete")
@click.option("--id", "sale_id", required=True, type=click.UUID, help="Sale ID.")
def sale_complete(sale_id) -> None:
    """Complete a pending sale (consumes stock)."""
    execute(bootstrap.complete_sale_handler(), SaleCommand(sale_id))
    click.echo(f"Sale {sale_id} completed.")


@click.command("cancel")
@click.option("--id", "sale_id", required=True, type=click.UUID, help="Sale ID.")
def sale_cancel(sale_id) -> None:
    """Cancel a pending sale."""
    execute(bootstrap.cancel_sale_handler(), SaleCommand(sale_id))
    click.echo(f"Sale {sale_id} cancelled.")


@click.command("show")
@click.option("--id", "sale_id", required=True, type=click.UUID, help="Sale ID to display.")
def sale_show(sale_id) -> None:
    """Show details of an existing sale."""
    sale = execute(bootstrap.get_sale_handler(), ByIdQuery(sale_id))
    _display_sale(sale)
