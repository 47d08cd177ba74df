"""CLI commands for read-only views: list, total and search."""

from __future__ import annotations

import click

from stockroom.application.dto import InventoryReportDTO, ItemDTO
from stockroom.application.search_item import SearchItemHandler
from stockroom.application.show_inventory import InventoryValueHandler, ShowInventoryHandler
from stockroom.domain.repository.inventory_repository import InventoryRepository
from stockroom.infrastructure.cli.common import load_or_fail


def echo_report(report: InventoryReportDTO) -> None:
    if not report.lines:
        click.echo("Inventory is empty.")
        return

    click.echo(f"{'Name':<30} {'Qty':>8} {'Price':>12} {'Value':>16}")
    click.echo("-" * 69)
    for line in report.lines:
        click.echo(
            f"{line.name:<30} {line.quantity:>8} {line.price:>12} {line.value:>16}"
        )
    click.echo("-" * 69)
    click.echo(f"{'TOTAL':<30} {'':>8} {'':>12} {report.total:>16}")


def echo_item(item: ItemDTO) -> None:
    click.echo(
        f"{item.name}: qty={item.quantity}, price={item.price}, "
        f"stock value={item.value}"
    )


@click.command("list")
@click.pass_obj
def inventory_list(repo: InventoryRepository) -> None:
    """List all items with their stock value."""
    inventory = load_or_fail(repo)
    echo_report(ShowInventoryHandler(inventory).handle())


@click.command("total")
@click.pass_obj
def inventory_total(repo: InventoryRepository) -> None:
    """Show the total value of all stock."""
    inventory = load_or_fail(repo)
    click.echo(f"Total inventory value: {InventoryValueHandler(inventory).handle()}")


@click.command("search")
@click.argument("name")
@click.pass_obj
def item_search(repo: InventoryRepository, name: str) -> None:
    """Look up an item by name (case-insensitive)."""
    inventory = load_or_fail(repo)
    item = SearchItemHandler(inventory).handle(name)
    if item is None:
        raise click.ClickException(f"Not found: '{name}'")
    echo_item(item)
