"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from stockroom.domain.model.item import Item


@dataclass(frozen=True)
class ItemDTO:
    """Output: a single item as displayed to the user."""

    name: str
    quantity: int
    price: str  # formatted, e.g. "$15.00"
    value: str

    @staticmethod
    def from_item(item: Item) -> ItemDTO:
        return ItemDTO(
            name=item.name,
            quantity=item.quantity,
            price=str(item.price),
            value=str(item.value),
        )


@dataclass(frozen=True)
class StockChangeDTO:
    """Output: the item touched by a mutation plus a confirmation line."""

    item: ItemDTO
    message: str


@dataclass(frozen=True)
class InventoryReportDTO:
    """Output: every item in catalog order and the total stock value."""

    lines: list[ItemDTO]
    total: str


@dataclass(frozen=True)
class LoadReportDTO:
    loaded: int
    notes: list[str]
    warnings: list[str]


@dataclass(frozen=True)
class SaveReportDTO:
    count: int
    message: str
