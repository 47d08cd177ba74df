"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import logging
from pathlib import Path

from stockroom.domain.model.inventory import MAX_ITEMS
from stockroom.infrastructure.persistence.text_inventory_repository import (
    TextInventoryRepository,
)

# Relative to the current working directory.
DEFAULT_INVENTORY_FILE = Path("inventory.txt")

LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def inventory_repository(file_path: Path | None = None) -> TextInventoryRepository:
    return TextInventoryRepository(file_path or DEFAULT_INVENTORY_FILE, capacity=MAX_ITEMS)


def configure_logging(verbosity: int = 0) -> None:
    """WARNING by default, INFO with one ``-v``, DEBUG with two or more."""
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT)
