"""CLI commands for inventory lookup and management."""

from __future__ import annotations

import click

from ims.application.check_stock import CheckStockHandler
from ims.application.set_inventory import SetInventoryHandler
from ims.application.show_inventory import ShowInventoryHandler
from ims.domain.exceptions import DomainException, StorageUnavailableError
from ims.infrastructure.bootstrap import inventory_repository, stock_availability_checker


@click.command("check")
@click.option("--sku", required=True, help="SKU code to look up.")
@click.option("--quantity", required=True, type=int, help="Requested quantity.")
def inventory_check(sku: str, quantity: int) -> None:
    """Print 'true' if the SKU has at least QUANTITY in stock, else 'false'."""
    try:
        handler = CheckStockHandler(checker=stock_availability_checker())
        dto = handler.handle(sku_code=sku, quantity=quantity)
    except (DomainException, StorageUnavailableError) as exc:
        raise click.ClickException(str(exc))

    click.echo("true" if dto.in_stock else "false")


@click.command("set")
@click.option("--sku", required=True, help="SKU code.")
@click.option("--quantity", required=True, type=int, help="Quantity on hand.")
def inventory_set(sku: str, quantity: int) -> None:
    """Set inventory level for a SKU."""
    try:
        handler = SetInventoryHandler(inventory_repo=inventory_repository())
        handler.handle(sku_code=sku, quantity=quantity)
    except (DomainException, StorageUnavailableError) as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Inventory for '{sku}' set to {quantity}")


@click.command("show")
def inventory_show() -> None:
    """Show current inventory levels."""
    try:
        handler = ShowInventoryHandler(inventory_repo=inventory_repository())
        lines = handler.handle()
    except StorageUnavailableError as exc:
        raise click.ClickException(str(exc))

    if not lines:
        click.echo("No inventory records found.")
        return

    click.echo(f"{'SKU':<30} {'Quantity':>10}")
    click.echo("-" * 41)
    for line in lines:
        click.echo(f"{line.sku_code:<30} {line.quantity:>10}")
