"""CLI commands that change the inventory.

Each command loads the file, applies one change and saves on success.
"""

from __future__ import annotations

import click

from stockroom.application.add_item import AddItemHandler
from stockroom.application.remove_item import RemoveItemHandler
from stockroom.application.update_quantity import UpdateQuantityHandler
from stockroom.domain.exceptions import DomainException
from stockroom.domain.repository.inventory_repository import InventoryRepository
from stockroom.infrastructure.cli.common import load_or_fail, save_or_fail


@click.command("add")
@click.option("--name", required=True, help="Item name.")
@click.option("--quantity", required=True, type=int, help="Units to add (> 0).")
@click.option("--price", required=True, help="Unit price (e.g. 0.99).")
@click.pass_obj
def item_add(repo: InventoryRepository, name: str, quantity: int, price: str) -> None:
    """Add an item, or restock it if the name already exists."""
    inventory = load_or_fail(repo)
    handler = AddItemHandler(inventory)

    try:
        result = handler.handle(name=name, quantity=quantity, price=price)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(result.message)
    save_or_fail(inventory, repo)


@click.command("remove")
@click.option("--name", required=True, help="Item name.")
@click.pass_obj
def item_remove(repo: InventoryRepository, name: str) -> None:
    """Remove an item from the inventory."""
    inventory = load_or_fail(repo)
    handler = RemoveItemHandler(inventory)

    try:
        result = handler.handle(name=name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(result.message)
    save_or_fail(inventory, repo)


@click.command("set-quantity")
@click.option("--name", required=True, help="Item name.")
@click.option("--quantity", required=True, type=int, help="New stock level (>= 0).")
@click.pass_obj
def item_set_quantity(repo: InventoryRepository, name: str, quantity: int) -> None:
    """Set an item's stock to an absolute quantity."""
    inventory = load_or_fail(repo)
    handler = UpdateQuantityHandler(inventory)

    try:
        result = handler.handle(name=name, quantity=quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(result.message)
    save_or_fail(inventory, repo)
