"""Tests for the JSON-file inventory repository."""

import json
import os

import pytest

from ims.domain.exceptions import StorageUnavailableError
from ims.domain.model.inventory import InventoryRecord
from ims.infrastructure.persistence.json_inventory_repository import (
    JsonInventoryRepository,
)


@pytest.fixture
def inventory_file(tmp_path):
    return tmp_path / "data" / "inventory.json"


@pytest.fixture
def repo(inventory_file):
    repo = JsonInventoryRepository(inventory_file)
    repo.save(InventoryRecord("iphone_13", 100))
    repo.save(InventoryRecord("iphone_13_red", 0))
    return repo


class TestFileLifecycle:

    def test_missing_file_is_created_empty(self, inventory_file):
        repo = JsonInventoryRepository(inventory_file)
        assert inventory_file.exists()
        assert repo.list_all() == []

    def test_records_survive_a_new_instance(self, inventory_file, repo):
        reopened = JsonInventoryRepository(inventory_file)
        assert reopened.get_by_sku_code("iphone_13").quantity == 100

    def test_file_format(self, inventory_file, repo):
        assert json.loads(inventory_file.read_text(encoding="utf-8")) == [
            {"sku_code": "iphone_13", "quantity": 100},
            {"sku_code": "iphone_13_red", "quantity": 0},
        ]


class TestExistsQuery:

    def test_equal_quantity(self, repo):
        assert repo.exists_by_sku_code_and_quantity_at_least("iphone_13", 100) is True

    def test_above_stored_quantity(self, repo):
        assert repo.exists_by_sku_code_and_quantity_at_least("iphone_13", 101) is False

    def test_unknown_sku(self, repo):
        assert repo.exists_by_sku_code_and_quantity_at_least("nonexistent_sku", 1) is False

    def test_zero_stock_zero_requested(self, repo):
        assert repo.exists_by_sku_code_and_quantity_at_least("iphone_13_red", 0) is True


class TestSave:

    def test_save_replaces_same_sku(self, inventory_file, repo):
        repo.save(InventoryRecord("iphone_13", 7))

        raw = json.loads(inventory_file.read_text(encoding="utf-8"))
        assert [r for r in raw if r["sku_code"] == "iphone_13"] == [
            {"sku_code": "iphone_13", "quantity": 7}
        ]
        assert len(raw) == 2


class TestStorageFailures:

    def test_invalid_json(self, inventory_file):
        inventory_file.parent.mkdir(parents=True)
        inventory_file.write_text("{not json", encoding="utf-8")
        repo = JsonInventoryRepository(inventory_file)

        with pytest.raises(StorageUnavailableError, match="not valid JSON"):
            repo.exists_by_sku_code_and_quantity_at_least("iphone_13", 1)

    def test_wrong_top_level_shape(self, inventory_file):
        inventory_file.parent.mkdir(parents=True)
        inventory_file.write_text('{"sku_code": "iphone_13"}', encoding="utf-8")
        repo = JsonInventoryRepository(inventory_file)

        with pytest.raises(StorageUnavailableError, match="list of objects"):
            repo.list_all()

    def test_malformed_record(self, inventory_file):
        inventory_file.parent.mkdir(parents=True)
        inventory_file.write_text(
            '[{"sku_code": "iphone_13", "quantity": -4}]', encoding="utf-8"
        )
        repo = JsonInventoryRepository(inventory_file)

        with pytest.raises(StorageUnavailableError, match="Malformed inventory record"):
            repo.exists_by_sku_code_and_quantity_at_least("iphone_13", 1)

    def test_file_removed_after_construction(self, inventory_file, repo):
        inventory_file.unlink()

        with pytest.raises(StorageUnavailableError, match="Cannot read"):
            repo.exists_by_sku_code_and_quantity_at_least("iphone_13", 1)

    def test_duplicate_sku_rejected(self, inventory_file):
        inventory_file.parent.mkdir(parents=True)
        inventory_file.write_text(
            '[{"sku_code": "iphone_13", "quantity": 100},'
            ' {"sku_code": "iphone_13", "quantity": 0}]',
            encoding="utf-8",
        )
        repo = JsonInventoryRepository(inventory_file)

        with pytest.raises(StorageUnavailableError, match="Duplicate inventory record"):
            repo.exists_by_sku_code_and_quantity_at_least("iphone_13", 1)


class TestAtomicWrites:

    def test_save_leaves_no_temp_files(self, inventory_file, repo):
        repo.save(InventoryRecord("pixel_7", 3))
        assert sorted(p.name for p in inventory_file.parent.iterdir()) == ["inventory.json"]

    def test_failed_write_keeps_previous_contents(self, inventory_file, repo, monkeypatch):
        before = inventory_file.read_text(encoding="utf-8")

        def failing_replace(src, dst):
            raise OSError("disk full")

        monkeypatch.setattr(os, "replace", failing_replace)

        with pytest.raises(StorageUnavailableError, match="Cannot write"):
            repo.save(InventoryRecord("iphone_13", 1))

        assert inventory_file.read_text(encoding="utf-8") == before
        assert sorted(p.name for p in inventory_file.parent.iterdir()) == ["inventory.json"]
