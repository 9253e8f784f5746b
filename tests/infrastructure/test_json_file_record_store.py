"""Tests for the JSON-file record store."""

import json

import pytest

from agripos.domain.exceptions import StoreError
from agripos.infrastructure.persistence.json_file_record_store import JsonFileRecordStore


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "data" / "db.json"


class TestJsonFileRecordStore:

    def test_creates_empty_document(self, db_path):
        JsonFileRecordStore(db_path)
        document = json.loads(db_path.read_text(encoding="utf-8"))
        assert document["products"] == []
        assert document["meta"]["categories"] == []

    def test_create_and_get(self, db_path):
        store = JsonFileRecordStore(db_path)
        store.create("products", {"id": "pr1", "name": "Phân Urê"})
        assert store.get("products", "pr1") == {"id": "pr1", "name": "Phân Urê"}
        assert "Phân Urê" in db_path.read_text(encoding="utf-8")

    def test_duplicate_id_rejected(self, db_path):
        store = JsonFileRecordStore(db_path)
        store.create("orders", {"id": "o1"})
        with pytest.raises(StoreError, match="duplicate"):
            store.create("orders", {"id": "o1"})

    def test_list_sorted(self, db_path):
        store = JsonFileRecordStore(db_path)
        for rid, ts in [("a", "2026-01-02"), ("b", "2026-01-03"), ("c", "2026-01-01")]:
            store.create("customers", {"id": rid, "createdAt": ts})
        assert [r["id"] for r in store.list("customers", sort="createdAt", descending=True)] == ["b", "a", "c"]
        assert [r["id"] for r in store.list("customers")] == ["a", "b", "c"]

    def test_replace(self, db_path):
        store = JsonFileRecordStore(db_path)
        store.create("products", {"id": "pr1", "stock": 5})
        store.replace("products", "pr1", {"id": "pr1", "stock": 3})
        assert store.get("products", "pr1")["stock"] == 3

    def test_replace_missing_rejected(self, db_path):
        store = JsonFileRecordStore(db_path)
        with pytest.raises(StoreError) as exc_info:
            store.replace("products", "nope", {"id": "nope"})
        assert exc_info.value.status_code == 404

    def test_delete(self, db_path):
        store = JsonFileRecordStore(db_path)
        store.create("products", {"id": "pr1"})
        store.delete("products", "pr1")
        assert store.get("products", "pr1") is None
        with pytest.raises(StoreError):
            store.delete("products", "pr1")

    def test_unknown_collection_is_empty(self, db_path):
        store = JsonFileRecordStore(db_path)
        assert store.list("articles") == []
        assert store.get("articles", "x") is None

    def test_corrupt_file_raises_store_error(self, db_path):
        db_path.parent.mkdir(parents=True)
        db_path.write_text("{not json", encoding="utf-8")
        store = JsonFileRecordStore(db_path)
        with pytest.raises(StoreError, match="Cannot read"):
            store.list("products")
        assert not store.ping()
