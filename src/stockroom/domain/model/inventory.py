"""Inventory aggregate — the ordered, bounded record store.

The Inventory owns its Items.  It is the only place items are created,
restocked, re-levelled or removed, so the uniqueness and capacity
invariants are checked here and nowhere else.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterator

from stockroom.domain.exceptions import (
    CapacityExceededError,
    DuplicateItemError,
    ItemNotFoundError,
)
from stockroom.domain.model.item import (
    Item,
    validate_name,
    validate_price,
    validate_quantity,
)
from stockroom.domain.model.value_objects import Money

logger = logging.getLogger(__name__)

MAX_ITEMS = 500


@dataclass(frozen=True)
class AddOutcome:
    """Result of ``Inventory.add``: the affected item and whether it already existed."""

    item: Item
    restocked: bool


class Inventory:
    """Aggregate root for the item catalog.

    Invariants:
    - at most one item per case-insensitive name
    - never more than ``capacity`` items
    - insertion order is preserved, including across removals
    """

    def __init__(self, items: list[Item] | None = None, capacity: int = MAX_ITEMS) -> None:
        if capacity <= 0:
            raise ValueError("Inventory capacity must be positive")
        self._capacity = capacity
        self._items: list[Item] = []
        for item in items or []:
            self.insert(item)

    # --- Queries --------------------------------------------------------------

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def is_full(self) -> bool:
        return len(self._items) >= self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(list(self._items))

    def find(self, name: str) -> Item | None:
        """Case-insensitive exact-name lookup."""
        index = self._index_of(name)
        return None if index is None else self._items[index]

    def total(self) -> Money:
        result = Money.zero()
        for item in self._items:
            result = result + item.value
        return result

    def lines(self) -> list[tuple[Item, Money]]:
        """Each item paired with its stock value, in catalog order."""
        return [(item, item.value) for item in self._items]

    # --- Mutations ------------------------------------------------------------

    def add(
        self,
        name: str,
        quantity: int,
        price: Money | str | float | int | Decimal,
    ) -> AddOutcome:
        """Add a new item or restock an existing one.

        Restocking sums the quantities and overwrites the price.
        """
        name = validate_name(name)
        quantity = validate_quantity(quantity, minimum=1)
        money = validate_price(price)

        existing = self.find(name)
        if existing is not None:
            existing.restock(quantity, money)
            logger.debug(
                "Restocked %r to qty=%d price=%s",
                existing.name, existing.quantity, existing.price,
            )
            return AddOutcome(item=existing, restocked=True)

        item = Item(name=name, quantity=quantity, price=money)
        self._append(item)
        logger.debug("Added %r qty=%d price=%s", item.name, item.quantity, item.price)
        return AddOutcome(item=item, restocked=False)

    def insert(self, item: Item) -> None:
        """Append an already-validated item without merging.

        Used when reconstituting a stored inventory: a repeated name is
        rejected rather than restocked.
        """
        if self.find(item.name) is not None:
            raise DuplicateItemError(f"Duplicate item name '{item.name}'")
        self._append(item)

    def remove(self, name: str) -> Item:
        """Delete the matching item; later items keep their relative order."""
        index = self._index_of(name)
        if index is None:
            raise ItemNotFoundError(f"Item not found: '{name}'")
        item = self._items.pop(index)
        logger.debug("Removed %r from position %d", item.name, index)
        return item

    def set_quantity(self, name: str, quantity: int) -> Item:
        """Set absolute stock for an item. Zero is allowed and keeps the item."""
        quantity = validate_quantity(quantity)
        item = self.find(name)
        if item is None:
            raise ItemNotFoundError(f"Item not found: '{name}'")
        item.set_quantity(quantity)
        logger.debug("Set %r quantity to %d", item.name, quantity)
        return item

    # --- Internal helpers -----------------------------------------------------

    def _append(self, item: Item) -> None:
        if self.is_full:
            raise CapacityExceededError(
                f"Inventory full (maximum {self._capacity} items)"
            )
        self._items.append(item)

    def _index_of(self, name: str) -> int | None:
        for index, item in enumerate(self._items):
            if item.matches(name):
                return index
        return None
