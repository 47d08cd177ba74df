"""Application service: Search Item use case (query)."""

from __future__ import annotations

from stockroom.application.dto import ItemDTO
from stockroom.domain.model.inventory import Inventory


class SearchItemHandler:

    def __init__(self, inventory: Inventory) -> None:
        self._inventory = inventory

    def handle(self, name: str) -> ItemDTO | None:
        item = self._inventory.find(name)
        if item is None:
            return None
        return ItemDTO.from_item(item)
