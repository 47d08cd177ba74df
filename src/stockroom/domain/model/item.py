"""Item entity — one stocked product in the catalog.

Items are identified by name, compared case-insensitively.  Values coming
from users or from storage go through ``Item.create()`` so an Item holding
an out-of-range quantity or price never reaches an Inventory.
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from decimal import Decimal

from stockroom.domain.exceptions import (
    InvalidNameError,
    InvalidPriceError,
    InvalidQuantityError,
    ValidationError,
)
from stockroom.domain.model.value_objects import Money

# ---------------------------------------------------------------------------
# Constants for item invariants
# ---------------------------------------------------------------------------
MAX_NAME_LENGTH = 63
MAX_QUANTITY = 1_000_000
MAX_PRICE = Decimal("1e9")

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def normalize_name(name: str) -> str:
    """Key used for every name comparison.

    Only ASCII A-Z are folded, so matching is the same under any locale and
    non-ASCII letters compare exactly.
    """
    return name.strip().translate(_ASCII_LOWER)


def validate_name(name: str) -> str:
    if not isinstance(name, str) or not name.strip():
        raise InvalidNameError("Item name is required")
    name = name.strip()
    if len(name) > MAX_NAME_LENGTH:
        raise InvalidNameError(
            f"Item name is too long ({len(name)} characters, "
            f"maximum {MAX_NAME_LENGTH})"
        )
    return name


def validate_quantity(quantity: int, *, minimum: int = 0) -> int:
    """Check that *quantity* is an integer in ``[minimum, MAX_QUANTITY]``."""
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise InvalidQuantityError(
            f"Quantity must be an integer, got {type(quantity).__name__}"
        )
    if quantity < minimum:
        if minimum == 0:
            raise InvalidQuantityError(f"Quantity cannot be negative, got {quantity}")
        raise InvalidQuantityError(f"Quantity must be at least {minimum}, got {quantity}")
    if quantity > MAX_QUANTITY:
        raise InvalidQuantityError(
            f"Quantity {quantity} exceeds the maximum of {MAX_QUANTITY}"
        )
    return quantity


def validate_price(price: Money | str | float | int | Decimal) -> Money:
    if not isinstance(price, Money):
        try:
            price = Money.of(price)
        except ValidationError as exc:
            raise InvalidPriceError(f"Invalid price {price!r}: {exc}") from exc
    if price.amount > MAX_PRICE:
        raise InvalidPriceError(
            f"Price {price.amount} exceeds the maximum of {MAX_PRICE:.0f}"
        )
    return price


@dataclass
class Item:
    """A named product with a stock level and a unit price.

    The plain ``__init__`` does no checking so tests and the inventory can
    build items cheaply; use ``Item.create()`` for untrusted values.
    """

    name: str
    quantity: int
    price: Money

    @staticmethod
    def create(
        name: str,
        quantity: int,
        price: Money | str | float | int | Decimal,
    ) -> Item:
        """Build a validated Item. Zero stock is allowed here."""
        return Item(
            name=validate_name(name),
            quantity=validate_quantity(quantity),
            price=validate_price(price),
        )

    # --- Computed properties --------------------------------------------------

    @property
    def key(self) -> str:
        return normalize_name(self.name)

    @property
    def value(self) -> Money:
        return self.price * self.quantity

    def matches(self, name: str) -> bool:
        return self.key == normalize_name(name)

    # --- Mutations ------------------------------------------------------------

    def restock(self, quantity: int, price: Money) -> None:
        """Add *quantity* units and replace the unit price."""
        new_quantity = self.quantity + quantity
        if new_quantity > MAX_QUANTITY:
            raise InvalidQuantityError(
                f"Restocking {self.name} by {quantity} would exceed the maximum "
                f"of {MAX_QUANTITY} (currently {self.quantity})"
            )
        self.quantity = new_quantity
        self.price = price

    def set_quantity(self, quantity: int) -> None:
        """Set stock to an absolute level; zero marks the item out of stock."""
        self.quantity = validate_quantity(quantity)
