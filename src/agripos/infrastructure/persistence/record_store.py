"""Generic record-store protocol.

The shop's data lives in a plain collection store: named collections of
JSON records keyed by an ``id`` string, plus singleton documents such as
``meta``.  Repositories map records to domain objects on top of this.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Callable, TypeVar

from agripos.domain.exceptions import StoreError, ValidationError

T = TypeVar("T")

PRODUCTS = "products"
CUSTOMERS = "customers"
ORDERS = "orders"
META = "meta"


class RecordStore(ABC):

    @abstractmethod
    def list(self, collection: str, sort: str | None = None, descending: bool = False) -> list[dict]:
        """Return every record of *collection*, optionally sorted by a field."""

    @abstractmethod
    def get(self, collection: str, record_id: str) -> dict | None:
        """Return one record, or None if the store has no such id."""

    @abstractmethod
    def create(self, collection: str, record: dict) -> None:
        """Insert a record."""

    @abstractmethod
    def replace(self, collection: str, record_id: str, record: dict) -> None:
        """Overwrite an existing record."""

    @abstractmethod
    def delete(self, collection: str, record_id: str) -> None:
        """Remove a record."""

    @abstractmethod
    def get_document(self, name: str) -> dict:
        """Return a singleton document, or an empty dict."""

    def ping(self) -> bool:
        """True if the store can be read."""
        try:
            self.get_document(META)
        except StoreError:
            return False
        return True


# --- Timestamp helpers --------------------------------------------------------


def format_timestamp(value: datetime) -> str:
    """ISO-8601 UTC with milliseconds and a ``Z`` suffix, sortable as text."""
    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_timestamp(raw: str | None) -> datetime:
    if not raw:
        return datetime.fromtimestamp(0, timezone.utc)
    value = datetime.fromisoformat(raw.replace("Z", "+00:00"))
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value


# --- Record decoding ----------------------------------------------------------

_MALFORMED = (KeyError, TypeError, ValueError, AttributeError, ValidationError)


def decode_record(collection: str, raw: dict, to_domain: Callable[[dict], T]) -> T:
    """Map *raw* with *to_domain*, turning a malformed record into StoreError."""
    try:
        return to_domain(raw)
    except _MALFORMED as exc:
        record_id = raw.get("id") if isinstance(raw, dict) else None
        raise StoreError(
            f"Malformed record {record_id!r} in {collection}: {exc}",
            detail=repr(raw),
        ) from exc
