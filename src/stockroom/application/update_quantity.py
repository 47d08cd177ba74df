"""Application service: Update Quantity use case."""

from __future__ import annotations

import logging

from stockroom.application.dto import ItemDTO, StockChangeDTO
from stockroom.domain.model.inventory import Inventory

logger = logging.getLogger(__name__)


class UpdateQuantityHandler:

    def __init__(self, inventory: Inventory) -> None:
        self._inventory = inventory

    def handle(self, name: str, quantity: int) -> StockChangeDTO:
        """Set the stock level of an item to an absolute value.

        Unlike adding, this replaces the quantity.  Zero leaves the item in
        the catalog as out of stock.
        """
        item = self._inventory.set_quantity(name, quantity)
        message = f"'{item.name}' quantity set to {item.quantity}"
        if item.quantity == 0:
            message += " (out of stock)"
        logger.info(message)
        return StockChangeDTO(item=ItemDTO.from_item(item), message=message)
