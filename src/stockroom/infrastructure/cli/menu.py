"""Interactive text menu.

The menu holds one Inventory for the whole session and only writes it back
when the user picks "Save & exit".  End of input leaves without saving.
"""

from __future__ import annotations

from typing import Callable

import click

from stockroom.application.add_item import AddItemHandler
from stockroom.application.remove_item import RemoveItemHandler
from stockroom.application.save_inventory import SaveInventoryHandler
from stockroom.application.search_item import SearchItemHandler
from stockroom.application.show_inventory import InventoryValueHandler, ShowInventoryHandler
from stockroom.application.update_quantity import UpdateQuantityHandler
from stockroom.domain.exceptions import DomainException, WriteError
from stockroom.domain.model.inventory import Inventory
from stockroom.domain.repository.inventory_repository import InventoryRepository
from stockroom.infrastructure.cli.common import load_or_fail
from stockroom.infrastructure.cli.report_commands import echo_item, echo_report

MENU_TEXT = """
  1. List all items
  2. Add / restock item
  3. Remove item
  4. Update quantity
  5. Search item
  6. Show total inventory value
  7. Save & exit
  8. Exit without saving"""

SAVE_AND_EXIT = "7"
EXIT = "8"


def _list(inventory: Inventory) -> None:
    echo_report(ShowInventoryHandler(inventory).handle())


def _add(inventory: Inventory) -> None:
    name = click.prompt("  Item name")
    quantity = click.prompt("  Quantity", type=int)
    price = click.prompt("  Price ($)")
    click.echo(AddItemHandler(inventory).handle(name, quantity, price).message)


def _remove(inventory: Inventory) -> None:
    name = click.prompt("  Item name to remove")
    click.echo(RemoveItemHandler(inventory).handle(name).message)


def _update_quantity(inventory: Inventory) -> None:
    name = click.prompt("  Item name")
    quantity = click.prompt("  New quantity", type=int)
    click.echo(UpdateQuantityHandler(inventory).handle(name, quantity).message)


def _search(inventory: Inventory) -> None:
    name = click.prompt("  Search name")
    item = SearchItemHandler(inventory).handle(name)
    if item is None:
        click.echo(f"  Not found: '{name}'")
    else:
        echo_item(item)


def _total(inventory: Inventory) -> None:
    click.echo(f"  Total inventory value: {InventoryValueHandler(inventory).handle()}")


ACTIONS: dict[str, Callable[[Inventory], None]] = {
    "1": _list,
    "2": _add,
    "3": _remove,
    "4": _update_quantity,
    "5": _search,
    "6": _total,
}


def run_menu(inventory: Inventory, repo: InventoryRepository) -> None:
    """Prompt for menu choices until the user exits or input ends."""
    while True:
        click.echo(MENU_TEXT)
        try:
            choice = click.prompt("Choice", default="", show_default=False).strip()

            if choice == SAVE_AND_EXIT:
                try:
                    report = SaveInventoryHandler(inventory, repo).handle()
                except WriteError as exc:
                    click.echo(f"Error: {exc}", err=True)
                    continue
                click.echo(report.message)
                return

            if choice == EXIT:
                click.echo("Exiting without saving.")
                return

            action = ACTIONS.get(choice)
            if action is None:
                click.echo(f"Unknown option '{choice}'. Try 1-8.")
                continue

            try:
                action(inventory)
            except DomainException as exc:
                click.echo(f"Error: {exc}", err=True)
        except click.Abort:
            click.echo()
            return


@click.command("menu")
@click.pass_obj
def menu(repo: InventoryRepository) -> None:
    """Run the interactive inventory menu."""
    inventory = load_or_fail(repo, show_notes=True)
    run_menu(inventory, repo)
