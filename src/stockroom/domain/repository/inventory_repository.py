"""Abstract repository for the Inventory aggregate.

Defined in the domain layer so the domain never depends on
infrastructure.  Loading is tolerant: records that cannot be accepted
are reported as warnings on the ``LoadResult`` instead of aborting.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum

from stockroom.domain.model.inventory import Inventory


class WarningKind(Enum):
    MALFORMED_RECORD = "MALFORMED_RECORD"
    DUPLICATE_RECORD = "DUPLICATE_RECORD"
    CAPACITY_REACHED = "CAPACITY_REACHED"


@dataclass(frozen=True)
class LoadWarning:
    """A stored record that was skipped during load."""

    kind: WarningKind
    line_number: int
    content: str
    reason: str

    def __str__(self) -> str:
        return f"Line {self.line_number}: {self.reason} (skipped): {self.content}"


@dataclass
class LoadResult:
    inventory: Inventory
    warnings: list[LoadWarning] = field(default_factory=list)
    notes: list[str] = field(default_factory=list)

    @property
    def loaded(self) -> int:
        return len(self.inventory)


class InventoryRepository(ABC):

    @abstractmethod
    def load(self) -> LoadResult:
        """Read the stored inventory. A missing store yields an empty one."""

    @abstractmethod
    def save(self, inventory: Inventory) -> int:
        """Overwrite the store with *inventory*; return the records written."""
