"""Unit tests for the Inventory aggregate."""

import pytest

from stockroom.domain.exceptions import (
    CapacityExceededError,
    DuplicateItemError,
    InvalidNameError,
    InvalidPriceError,
    InvalidQuantityError,
    ItemNotFoundError,
)
from stockroom.domain.model.inventory import MAX_ITEMS, Inventory
from stockroom.domain.model.item import Item
from stockroom.domain.model.value_objects import Money


def _names(inventory: Inventory) -> list[str]:
    return [item.name for item in inventory]


class TestInventoryAdd:

    def test_add_new_item(self):
        inv = Inventory()
        outcome = inv.add("Apple", 100, "0.99")
        assert not outcome.restocked
        assert outcome.item.name == "Apple"
        assert len(inv) == 1

    def test_restock_accumulates_quantity_and_overwrites_price(self):
        inv = Inventory()
        inv.add("X", 5, 1.0)
        outcome = inv.add("X", 3, 2.0)
        assert outcome.restocked
        assert inv.find("X").quantity == 8
        assert inv.find("X").price == Money.of("2.0")
        assert len(inv) == 1

    def test_restock_is_case_insensitive_and_keeps_original_name(self):
        inv = Inventory()
        inv.add("Apple", 1, "1")
        inv.add("APPLE", 2, "1")
        inv.add("apple", 3, "1")
        assert _names(inv) == ["Apple"]
        assert inv.find("aPpLe").quantity == 6

    def test_zero_quantity_rejected(self):
        inv = Inventory()
        with pytest.raises(InvalidQuantityError, match="at least 1"):
            inv.add("Apple", 0, "1")
        assert len(inv) == 0

    def test_negative_quantity_rejected(self):
        with pytest.raises(InvalidQuantityError):
            Inventory().add("Apple", -5, "1")

    def test_empty_name_rejected(self):
        with pytest.raises(InvalidNameError):
            Inventory().add("", 1, "1")

    def test_negative_price_rejected(self):
        with pytest.raises(InvalidPriceError, match="cannot be negative"):
            Inventory().add("Apple", 1, -1)

    def test_failed_restock_leaves_item_untouched(self):
        inv = Inventory()
        inv.add("Apple", 5, "1.00")
        with pytest.raises(InvalidPriceError):
            inv.add("Apple", 5, "-2")
        assert inv.find("Apple").quantity == 5
        assert inv.find("Apple").price == Money.of("1.00")

    def test_add_beyond_capacity_rejected_without_mutation(self):
        inv = Inventory(capacity=2)
        inv.add("A", 1, "1")
        inv.add("B", 1, "1")
        with pytest.raises(CapacityExceededError, match="maximum 2 items"):
            inv.add("C", 1, "1")
        assert _names(inv) == ["A", "B"]

    def test_restock_allowed_when_full(self):
        inv = Inventory(capacity=1)
        inv.add("A", 1, "1")
        inv.add("a", 4, "3")
        assert inv.find("A").quantity == 5

    def test_default_capacity(self):
        assert Inventory().capacity == MAX_ITEMS

    def test_uniqueness_over_many_adds(self):
        inv = Inventory()
        for name in ["a", "B", "A", "b", "c", " C ", "a"]:
            inv.add(name, 1, "1")
        keys = [item.key for item in inv]
        assert sorted(keys) == ["a", "b", "c"]
        assert len(set(keys)) == len(keys)


class TestInventoryRemove:

    def test_remove_preserves_order(self):
        inv = Inventory()
        for name in ["A", "B", "C", "D"]:
            inv.add(name, 1, "1")
        removed = inv.remove("b")
        assert removed.name == "B"
        assert _names(inv) == ["A", "C", "D"]

    def test_remove_missing_rejected(self):
        inv = Inventory()
        inv.add("A", 1, "1")
        with pytest.raises(ItemNotFoundError, match="not found"):
            inv.remove("Z")
        assert _names(inv) == ["A"]

    def test_remove_frees_capacity(self):
        inv = Inventory(capacity=1)
        inv.add("A", 1, "1")
        inv.remove("A")
        inv.add("B", 1, "1")
        assert _names(inv) == ["B"]


class TestInventorySetQuantity:

    def test_set_quantity_replaces_stock(self):
        inv = Inventory()
        inv.add("Apple", 10, "1")
        inv.set_quantity("APPLE", 3)
        assert inv.find("Apple").quantity == 3

    def test_set_quantity_zero_keeps_item(self):
        inv = Inventory()
        inv.add("Apple", 10, "1")
        inv.set_quantity("Apple", 0)
        assert inv.find("Apple").quantity == 0
        assert len(inv) == 1

    def test_set_quantity_negative_rejected(self):
        inv = Inventory()
        inv.add("Apple", 10, "1")
        with pytest.raises(InvalidQuantityError, match="cannot be negative"):
            inv.set_quantity("Apple", -1)
        assert inv.find("Apple").quantity == 10

    def test_set_quantity_missing_rejected(self):
        with pytest.raises(ItemNotFoundError):
            Inventory().set_quantity("Apple", 1)


class TestInventoryQueries:

    def test_find_missing_returns_none(self):
        assert Inventory().find("Apple") is None

    def test_total_of_empty_inventory_is_zero(self):
        assert Inventory().total() == Money.zero()

    def test_total_sums_quantity_times_price(self):
        inv = Inventory()
        inv.add("A", 3, "0.10")
        inv.add("B", 2, "1.25")
        inv.add("C", 1, "0")
        assert inv.total() == Money.of("2.80")

    def test_lines_pair_items_with_values(self):
        inv = Inventory()
        inv.add("A", 3, "0.10")
        inv.add("B", 2, "1.25")
        lines = inv.lines()
        assert [(item.name, value) for item, value in lines] == [
            ("A", Money.of("0.30")),
            ("B", Money.of("2.50")),
        ]


class TestInventoryInsert:

    def test_insert_rejects_duplicates_instead_of_merging(self):
        inv = Inventory()
        inv.insert(Item.create("Apple", 1, "1"))
        with pytest.raises(DuplicateItemError, match="Duplicate"):
            inv.insert(Item.create("APPLE", 5, "2"))
        assert inv.find("apple").quantity == 1

    def test_insert_respects_capacity(self):
        inv = Inventory(capacity=1)
        inv.insert(Item.create("A", 1, "1"))
        assert inv.is_full
        with pytest.raises(CapacityExceededError):
            inv.insert(Item.create("B", 1, "1"))

    def test_constructor_inserts_items(self):
        inv = Inventory([Item.create("A", 0, "1"), Item.create("B", 2, "1")])
        assert _names(inv) == ["A", "B"]

    def test_non_positive_capacity_rejected(self):
        with pytest.raises(ValueError):
            Inventory(capacity=0)
