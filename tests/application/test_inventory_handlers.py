"""Tests for the list/total queries and the load/save use cases."""

import pytest

from stockroom.application.load_inventory import LoadInventoryHandler
from stockroom.application.save_inventory import SaveInventoryHandler
from stockroom.application.show_inventory import InventoryValueHandler, ShowInventoryHandler
from stockroom.domain.exceptions import WriteError
from stockroom.domain.model.inventory import Inventory
from stockroom.domain.model.item import Item
from tests.fakes import FakeInventoryRepository, widget_inventory


class TestShowInventoryHandler:

    def test_lists_items_in_order_with_values(self):
        report = ShowInventoryHandler(widget_inventory()).handle()
        assert [(line.name, line.value) for line in report.lines] == [
            ("Widget", "$25.00"),
            ("Gadget", "$40.00"),
            ("Gizmo", "$99.99"),
        ]
        assert report.total == "$164.99"

    def test_empty_inventory(self):
        report = ShowInventoryHandler(Inventory()).handle()
        assert report.lines == []
        assert report.total == "$0.00"

    def test_listing_does_not_mutate(self):
        inventory = widget_inventory()
        ShowInventoryHandler(inventory).handle()
        assert [item.quantity for item in inventory] == [10, 4, 1]


class TestInventoryValueHandler:

    def test_total(self):
        assert InventoryValueHandler(widget_inventory()).handle() == "$164.99"

    def test_total_empty(self):
        assert InventoryValueHandler(Inventory()).handle() == "$0.00"


class TestLoadInventoryHandler:

    def test_load_returns_inventory_and_report(self):
        repo = FakeInventoryRepository([Item.create("Apple", 3, "1.50")])
        inventory, report = LoadInventoryHandler(repo).handle()
        assert inventory.find("apple").quantity == 3
        assert report.loaded == 1
        assert report.warnings == []


class TestSaveInventoryHandler:

    def test_save_writes_current_state(self):
        repo = FakeInventoryRepository()
        inventory = widget_inventory()
        report = SaveInventoryHandler(inventory, repo).handle()
        assert report.count == 3
        assert report.message == "3 item(s) saved."
        assert [item.name for item in repo.stored] == ["Widget", "Gadget", "Gizmo"]

    def test_save_is_repeatable_without_changes(self):
        repo = FakeInventoryRepository()
        handler = SaveInventoryHandler(widget_inventory(), repo)
        handler.handle()
        handler.handle()
        assert repo.save_count == 2
        assert len(repo.stored) == 3

    def test_write_error_leaves_inventory_untouched(self):
        repo = FakeInventoryRepository(fail_on_save=True)
        inventory = widget_inventory()
        with pytest.raises(WriteError, match="disk full"):
            SaveInventoryHandler(inventory, repo).handle()
        assert len(inventory) == 3
