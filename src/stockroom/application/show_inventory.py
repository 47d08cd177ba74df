"""Application service: Show Inventory and Inventory Value use cases (queries)."""

from __future__ import annotations

from stockroom.application.dto import InventoryReportDTO, ItemDTO
from stockroom.domain.model.inventory import Inventory


class ShowInventoryHandler:

    def __init__(self, inventory: Inventory) -> None:
        self._inventory = inventory

    def handle(self) -> InventoryReportDTO:
        return InventoryReportDTO(
            lines=[
                ItemDTO(
                    name=item.name,
                    quantity=item.quantity,
                    price=str(item.price),
                    value=str(value),
                )
                for item, value in self._inventory.lines()
            ],
            total=str(self._inventory.total()),
        )


class InventoryValueHandler:

    def __init__(self, inventory: Inventory) -> None:
        self._inventory = inventory

    def handle(self) -> str:
        """Total stock value, formatted."""
        return str(self._inventory.total())
