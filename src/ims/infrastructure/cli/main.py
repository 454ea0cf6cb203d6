import logging

import click

from ims.infrastructure.cli.inventory_commands import (
    inventory_check,
    inventory_set,
    inventory_show,
)
from ims.infrastructure.config import LOG_LEVELS, load_settings


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Logging verbosity (defaults to $IMS_LOG_LEVEL or WARNING).",
)
def cli(log_level: str | None) -> None:
    """IMS — Inventory Microservice"""
    level = (log_level or load_settings().log_level).upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def inventory() -> None:
    """Query and manage stock levels."""


# Register subcommands
inventory.add_command(inventory_check)
inventory.add_command(inventory_set)
inventory.add_command(inventory_show)
