"""Text-file-backed implementation of InventoryRepository.

File format, one record per line::

    # comment lines and blank lines are ignored
    name,quantity,price

There is no escaping: a name containing a comma, or starting with ``#``,
cannot be read back.  Saving such a name logs a warning.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from stockroom.domain.exceptions import (
    DuplicateItemError,
    InvalidNameError,
    InvalidPriceError,
    InvalidQuantityError,
    MalformedRecordError,
    ReadError,
    WriteError,
)
from stockroom.domain.model.inventory import MAX_ITEMS, Inventory
from stockroom.domain.model.item import Item
from stockroom.domain.repository.inventory_repository import (
    InventoryRepository,
    LoadResult,
    LoadWarning,
    WarningKind,
)

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = ","
COMMENT_PREFIX = "#"
HEADER = "# Stockroom inventory - format: name,quantity,price"

_INTEGER = re.compile(r"[+-]?[0-9]+")
_REAL = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def parse_record(line: str) -> Item:
    """Turn one stripped, non-comment line into a validated Item.

    Raises MalformedRecordError describing the first problem found.
    """
    fields = line.split(FIELD_SEPARATOR)
    if len(fields) != 3 or not all(fields):
        raise MalformedRecordError("malformed record, expected name,quantity,price")

    name, quantity_text, price_text = (f.strip() for f in fields)
    if not _INTEGER.fullmatch(quantity_text):
        raise MalformedRecordError(f"invalid quantity '{quantity_text}'")
    if not _REAL.fullmatch(price_text):
        raise MalformedRecordError(f"invalid price '{price_text}'")

    try:
        return Item.create(name, int(quantity_text), price_text)
    except InvalidNameError as exc:
        raise MalformedRecordError(f"invalid name ({exc})") from exc
    except InvalidQuantityError as exc:
        raise MalformedRecordError(f"invalid quantity '{quantity_text}' ({exc})") from exc
    except InvalidPriceError as exc:
        raise MalformedRecordError(f"invalid price '{price_text}' ({exc})") from exc


def format_record(item: Item) -> str:
    return FIELD_SEPARATOR.join(
        [item.name, str(item.quantity), item.price.format_plain()]
    )


class TextInventoryRepository(InventoryRepository):

    def __init__(self, file_path: Path, capacity: int = MAX_ITEMS) -> None:
        self._file_path = file_path
        self._capacity = capacity

    @property
    def file_path(self) -> Path:
        return self._file_path

    # --- InventoryRepository interface ----------------------------------------

    def load(self) -> LoadResult:
        result = LoadResult(inventory=Inventory(capacity=self._capacity))

        try:
            text = self._file_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            note = f"'{self._file_path}' not found - starting with empty inventory."
            logger.info(note)
            result.notes.append(note)
            return result
        except (OSError, UnicodeDecodeError) as exc:
            raise ReadError(f"Cannot read '{self._file_path}': {exc}") from exc

        capacity_reported = False
        # Records end at "\n" only; a name may contain other line separators.
        for line_number, raw in enumerate(text.split("\n"), start=1):
            line = raw.strip()
            if not line or line.startswith(COMMENT_PREFIX):
                continue

            # Keep reading to the end, but accept nothing more.
            if result.inventory.is_full:
                if not capacity_reported:
                    self._skip(
                        result, WarningKind.CAPACITY_REACHED, line_number, line,
                        f"maximum capacity ({self._capacity}) reached, "
                        f"remaining records ignored",
                    )
                    capacity_reported = True
                continue

            try:
                item = parse_record(line)
            except MalformedRecordError as exc:
                self._skip(result, WarningKind.MALFORMED_RECORD, line_number, line, str(exc))
                continue

            try:
                result.inventory.insert(item)
            except DuplicateItemError:
                self._skip(
                    result, WarningKind.DUPLICATE_RECORD, line_number, line,
                    f"duplicate name '{item.name}'",
                )

        note = f"Loaded {result.loaded} item(s) from '{self._file_path}'."
        logger.info(note)
        result.notes.append(note)
        return result

    def save(self, inventory: Inventory) -> int:
        lines = [HEADER]
        for item in inventory:
            if FIELD_SEPARATOR in item.name:
                logger.warning(
                    "Item name %r contains %r and will not load back correctly",
                    item.name, FIELD_SEPARATOR,
                )
            elif item.name.startswith(COMMENT_PREFIX):
                logger.warning(
                    "Item name %r starts with %r and will load back as a comment",
                    item.name, COMMENT_PREFIX,
                )
            lines.append(format_record(item))

        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        except OSError as exc:
            raise WriteError(f"Cannot write '{self._file_path}': {exc}") from exc

        count = len(lines) - 1
        logger.info("Saved %d item(s) to %s", count, self._file_path)
        return count

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _skip(
        result: LoadResult,
        kind: WarningKind,
        line_number: int,
        content: str,
        reason: str,
    ) -> None:
        warning = LoadWarning(
            kind=kind, line_number=line_number, content=content, reason=reason
        )
        logger.debug("%s", warning)
        result.warnings.append(warning)
