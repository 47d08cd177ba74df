"""Application service: Load Inventory use case.

Runs once at startup.  Skipped records never abort the load; they are
returned as warning lines for the shell to display.
"""

from __future__ import annotations

import logging

from stockroom.application.dto import LoadReportDTO
from stockroom.domain.model.inventory import Inventory
from stockroom.domain.repository.inventory_repository import InventoryRepository

logger = logging.getLogger(__name__)


class LoadInventoryHandler:

    def __init__(self, inventory_repo: InventoryRepository) -> None:
        self._inventory_repo = inventory_repo

    def handle(self) -> tuple[Inventory, LoadReportDTO]:
        """Load the stored inventory.

        Raises ReadError only when an existing store cannot be read.
        """
        result = self._inventory_repo.load()
        if result.warnings:
            logger.info("%d record(s) skipped during load", len(result.warnings))
        report = LoadReportDTO(
            loaded=result.loaded,
            notes=list(result.notes),
            warnings=[str(w) for w in result.warnings],
        )
        return result.inventory, report
