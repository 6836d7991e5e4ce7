"""CLI commands for the Category aggregate."""

from __future__ import annotations

import click

from pos.application.dto import ByIdQuery, CreateCategoryCommand, ListQuery
from pos.infrastructure import bootstrap
from pos.infrastructure.cli.common import execute


@click.command("add")
@click.option("--name", required=True, help="Category name (unique).")
@click.option("--description", default=None, help="Optional description.")
def category_add(name: str, description: str | None) -> None:
    """Create a category."""
    category_id = execute(
        bootstrap.create_category_handler(),
        CreateCategoryCommand(name=name, description=description),
    )
    click.echo(f"Category {category_id} created.")


@click.command("list")
def category_list() -> None:
    """List active categories."""
    categories = execute(bootstrap.get_categories_handler(), ListQuery())
    if not categories:
        click.echo("No categories.")
        return

    click.echo(f"  {'ID':<36}  {'Name':<30}")
    click.echo(f"  {'-'*68}")
    for c in categories:
        click.echo(f"  {str(c.id):<36}  {c.name:<30}")


@click.command("show")
@click.option("--id", "category_id", required=True, type=click.UUID, help="Category ID.")
def category_show(category_id) -> None:
    """Show one category."""
    c = execute(bootstrap.get_category_by_id_handler(), ByIdQuery(category_id))
    click.echo(f"Category {c.id}  ({'active' if c.is_active else 'inactive'})")
    click.echo(f"Name:        {c.name}")
    click.echo(f"Description: {c.description or '-'}")
