"""Helpers shared by the CLI commands: load/save with user-facing output."""

from __future__ import annotations

import click

from stockroom.application.load_inventory import LoadInventoryHandler
from stockroom.application.save_inventory import SaveInventoryHandler
from stockroom.domain.exceptions import ReadError, WriteError
from stockroom.domain.model.inventory import Inventory
from stockroom.domain.repository.inventory_repository import InventoryRepository


def load_or_fail(repo: InventoryRepository, show_notes: bool = False) -> Inventory:
    """Load the inventory, printing skipped records to stderr.

    A store that exists but cannot be read stops the command.
    """
    try:
        inventory, report = LoadInventoryHandler(inventory_repo=repo).handle()
    except ReadError as exc:
        raise click.ClickException(str(exc))

    if show_notes:
        for note in report.notes:
            click.echo(note)
    for warning in report.warnings:
        click.echo(f"Warning: {warning}", err=True)
    return inventory


def save_or_fail(inventory: Inventory, repo: InventoryRepository) -> None:
    try:
        report = SaveInventoryHandler(inventory=inventory, inventory_repo=repo).handle()
    except WriteError as exc:
        raise click.ClickException(str(exc))
    click.echo(report.message)
