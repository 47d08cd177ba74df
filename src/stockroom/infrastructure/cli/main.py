from __future__ import annotations

from pathlib import Path

import click

from stockroom.infrastructure.bootstrap import (
    DEFAULT_INVENTORY_FILE,
    configure_logging,
    inventory_repository,
)
from stockroom.infrastructure.cli.item_commands import (
    item_add,
    item_remove,
    item_set_quantity,
)
from stockroom.infrastructure.cli.menu import menu
from stockroom.infrastructure.cli.report_commands import (
    inventory_list,
    inventory_total,
    item_search,
)


@click.group(invoke_without_command=True)
@click.option(
    "--file",
    "file_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_INVENTORY_FILE,
    show_default=True,
    help="Inventory file to load and save.",
)
@click.option("-v", "--verbose", count=True, help="More log output (-vv for debug).")
@click.pass_context
def cli(ctx: click.Context, file_path: Path, verbose: int) -> None:
    """Stockroom — single-user inventory tracker.

    Without a command, starts the interactive menu.
    """
    configure_logging(verbose)
    ctx.obj = inventory_repository(file_path)
    if ctx.invoked_subcommand is None:
        ctx.invoke(menu)


# Register subcommands
cli.add_command(menu)
cli.add_command(inventory_list)
cli.add_command(inventory_total)
cli.add_command(item_search)
cli.add_command(item_add)
cli.add_command(item_remove)
cli.add_command(item_set_quantity)
