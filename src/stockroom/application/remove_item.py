"""Application service: Remove Item use case."""

from __future__ import annotations

import logging

from stockroom.application.dto import ItemDTO, StockChangeDTO
from stockroom.domain.model.inventory import Inventory

logger = logging.getLogger(__name__)


class RemoveItemHandler:

    def __init__(self, inventory: Inventory) -> None:
        self._inventory = inventory

    def handle(self, name: str) -> StockChangeDTO:
        item = self._inventory.remove(name)
        message = f"Removed '{item.name}'"
        logger.info(message)
        return StockChangeDTO(item=ItemDTO.from_item(item), message=message)
