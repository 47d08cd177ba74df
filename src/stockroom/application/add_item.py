"""Application service: Add / Restock Item use case."""

from __future__ import annotations

import logging

from stockroom.application.dto import ItemDTO, StockChangeDTO
from stockroom.domain.model.inventory import Inventory

logger = logging.getLogger(__name__)


class AddItemHandler:

    def __init__(self, inventory: Inventory) -> None:
        self._inventory = inventory

    def handle(self, name: str, quantity: int, price: str) -> StockChangeDTO:
        """Add a new item, or restock an existing one with the same name.

        Restocking adds to the current quantity and replaces the price.
        """
        outcome = self._inventory.add(name, quantity, price)
        item = outcome.item

        verb = "Restocked" if outcome.restocked else "Added"
        message = f"{verb} '{item.name}': qty={item.quantity}, price={item.price}"
        logger.info(message)
        return StockChangeDTO(item=ItemDTO.from_item(item), message=message)
