"""CLI commands for the Customer aggregate."""

from __future__ import annotations

import click

from pos.application.dto import ByIdQuery, CreateCustomerCommand, ListQuery, UpdateCustomerCommand
from pos.infrastructure import bootstrap
from pos.infrastructure.cli.common import execute


@click.command("add")
@click.option("--name", required=True, help="Customer name.")
@click.option("--email", default=None, help="Email address (unique).")
@click.option("--phone", default=None, help="Phone number.")
@click.option("--address", default=None, help="Postal address.")
def customer_add(name: str, email: str | None, phone: str | None, address: str | None) -> None:
    """Register a customer."""
    customer_id = execute(
        bootstrap.create_customer_handler(),
        CreateCustomerCommand(name=name, email=email, phone=phone, address=address),
    )
    click.echo(f"Customer {customer_id} created.")


@click.command("list")
def customer_list() -> None:
    """List active customers."""
    customers = execute(bootstrap.get_customers_handler(), ListQuery())
    if not customers:
        click.echo("No customers.")
        return

    click.echo(f"  {'ID':<36}  {'Name':<25} {'Email':<30}")
    click.echo(f"  {'-'*93}")
    for c in customers:
        click.echo(f"  {str(c.id):<36}  {c.name:<25} {c.email or '-':<30}")


@click.command("sales")
@click.option("--id", "customer_id", required=True, type=click.UUID, help="Customer ID.")
def customer_sales(customer_id) -> None:
    """List a customer's sales, oldest first."""
    sales = execute(bootstrap.get_customer_sales_handler(), ByIdQuery(customer_id))
    if not sales:
        click.echo("No sales.")
        return

    for s in sales:
        click.echo(f"  {str(s.id):<36}  {s.status:<10} {s.total_amount:>10}")


@click.command("update")
@click.option("--id", "customer_id", required=True, type=click.UUID, help="Customer ID.")
@click.option("--name", required=True, help="Customer name.")
@click.option("--email", default=None, help="Email address (unique).")
@click.option("--phone", default=None, help="Phone number.")
@click.option("--address", default=None, help="Postal address.")
def customer_update(
    customer_id,
    name: str,
    email: str | None,
    phone: str | None,
    address: str | None,
) -> None:
    """Replace a customer's contact details."""
    execute(
        bootstrap.update_customer_handler(),
        UpdateCustomerCommand(
            customer_id=customer_id,
            name=name,
            email=email,
            phone=phone,
            address=address,
        ),
    )
    click.echo(f"Customer {customer_id} updated.")


@click.command("show")
@click.option("--id", "customer_id", required=True, type=click.UUID, help="Customer ID.")
def customer_show(customer_id) -> None:
    """Show one customer."""
    c = execute(bootstrap.get_customer_by_id_handler(), ByIdQuery(customer_id))
    click.echo(f"Customer {c.id}  ({'active' if c.is_active else 'inactive'})")
    click.echo(f"Name:    {c.name}")
    click.echo(f"Email:   {c.email or '-'}")
    click.echo(f"Phone:   {c.phone or '-'}")
    click.echo(f"Address: {c.address or '-'}")
