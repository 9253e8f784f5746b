"""JSON-file-backed implementation of RecordStore.

Reads and writes the same ``db.json`` document a json-server instance
serves, so the tool can run against a local copy of the shop's data.
The whole file is re-read on every call.
"""

from __future__ import annotations

import json
from pathlib import Path

from agripos.domain.exceptions import StoreError
from agripos.infrastructure.persistence.record_store import (
    CUSTOMERS,
    META,
    ORDERS,
    PRODUCTS,
    RecordStore,
)

_EMPTY_DOCUMENT = {META: {"shopName": "", "categories": []}, PRODUCTS: [], CUSTOMERS: [], ORDERS: []}


class JsonFileRecordStore(RecordStore):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- RecordStore interface ------------------------------------------------

    def list(self, collection: str, sort: str | None = None, descending: bool = False) -> list[dict]:
        records = list(self._load_raw().get(collection, []))
        if sort:
            records.sort(key=lambda r: r.get(sort) or "", reverse=descending)
        return records

    def get(self, collection: str, record_id: str) -> dict | None:
        for raw in self._load_raw().get(collection, []):
            if raw.get("id") == record_id:
                return raw
        return None

    def create(self, collection: str, record: dict) -> None:
        document = self._load_raw()
        records = document.setdefault(collection, [])
        if any(r.get("id") == record.get("id") for r in records):
            raise StoreError(f"Insert failed, duplicate id '{record.get('id')}' in {collection}")
        records.append(record)
        self._persist_raw(document)

    def replace(self, collection: str, record_id: str, record: dict) -> None:
        document = self._load_raw()
        records = document.get(collection, [])
        for i, raw in enumerate(records):
            if raw.get("id") == record_id:
                records[i] = {**record, "id": record_id}
                self._persist_raw(document)
                return
        raise StoreError(f"No record '{record_id}' in {collection}", status_code=404)

    def delete(self, collection: str, record_id: str) -> None:
        document = self._load_raw()
        records = document.get(collection, [])
        kept = [r for r in records if r.get("id") != record_id]
        if len(kept) == len(records):
            raise StoreError(f"No record '{record_id}' in {collection}", status_code=404)
        document[collection] = kept
        self._persist_raw(document)

    def get_document(self, name: str) -> dict:
        return self._load_raw().get(name) or {}

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> dict:
        try:
            return json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise StoreError(f"Cannot read {self._file_path}: {exc}") from exc

    def _persist_raw(self, document: dict) -> None:
        try:
            self._file_path.write_text(
                json.dumps(document, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
            )
        except OSError as exc:
            raise StoreError(f"Cannot write {self._file_path}: {exc}") from exc

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._persist_raw(_EMPTY_DOCUMENT)
