"""Application service: Save Inventory use case."""

from __future__ import annotations

from stockroom.application.dto import SaveReportDTO
from stockroom.domain.model.inventory import Inventory
from stockroom.domain.repository.inventory_repository import InventoryRepository


class SaveInventoryHandler:

    def __init__(
        self,
        inventory: Inventory,
        inventory_repo: InventoryRepository,
    ) -> None:
        self._inventory = inventory
        self._inventory_repo = inventory_repo

    def handle(self) -> SaveReportDTO:
        """Overwrite the store with the current in-memory inventory.

        On WriteError the inventory is left as it was, so the caller may
        retry or carry on.
        """
        count = self._inventory_repo.save(self._inventory)
        return SaveReportDTO(count=count, message=f"{count} item(s) saved.")
