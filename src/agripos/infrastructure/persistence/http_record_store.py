"""HTTP implementation of RecordStore for a json-server style REST API.

    GET    /{collection}?_sort=field&_order=desc
    GET    /{collection}/{id}
    POST   /{collection}
    PUT    /{collection}/{id}
    DELETE /{collection}/{id}
    GET    /meta

Every call is synchronous and completes before the caller continues.
Transport failures and non-2xx answers become StoreError carrying the
store's own response text.
"""

from __future__ import annotations

import logging
from urllib.parse import quote

import httpx

from agripos.domain.exceptions import StoreError
from agripos.infrastructure.persistence.record_store import META, RecordStore

logger = logging.getLogger(__name__)


class HttpRecordStore(RecordStore):

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._client = httpx.Client(
            base_url=base_url.rstrip("/"),
            timeout=timeout,
            headers={"Content-Type": "application/json"},
            transport=transport,
        )

    # --- RecordStore interface ------------------------------------------------

    def list(self, collection: str, sort: str | None = None, descending: bool = False) -> list[dict]:
        params = {}
        if sort:
            params = {"_sort": sort, "_order": "desc" if descending else "asc"}
        records = self._json(self._send("GET", f"/{collection}", params=params))
        if not isinstance(records, list):
            raise StoreError(f"API: expected a list of {collection}, got {type(records).__name__}")
        return records

    def get(self, collection: str, record_id: str) -> dict | None:
        response = self._send("GET", self._path(collection, record_id), allow_missing=True)
        if response.status_code == 404:
            return None
        return self._json(response)

    def create(self, collection: str, record: dict) -> None:
        self._send("POST", f"/{collection}", json=record)

    def replace(self, collection: str, record_id: str, record: dict) -> None:
        self._send("PUT", self._path(collection, record_id), json=record)

    def delete(self, collection: str, record_id: str) -> None:
        self._send("DELETE", self._path(collection, record_id))

    def get_document(self, name: str) -> dict:
        response = self._send("GET", f"/{name}", allow_missing=True)
        if response.status_code == 404:
            return {}
        document = self._json(response) or {}
        if not isinstance(document, dict):
            raise StoreError(f"API: expected an object for {name}, got {type(document).__name__}")
        return document

    # --- Extras ---------------------------------------------------------------

    def ping(self) -> bool:
        """True if the store answers its meta document."""
        try:
            self._send("GET", f"/{META}")
        except StoreError:
            return False
        return True

    def close(self) -> None:
        self._client.close()

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _path(collection: str, record_id: str) -> str:
        return f"/{collection}/{quote(record_id, safe='')}"

    def _send(self, method: str, path: str, allow_missing: bool = False, **kwargs) -> httpx.Response:
        try:
            response = self._client.request(method, path, **kwargs)
        except httpx.TimeoutException as exc:
            logger.error("Store %s %s timed out: %s", method, path, exc)
            raise StoreError(f"API timeout: {method} {path}") from exc
        except httpx.RequestError as exc:
            logger.error("Store %s %s failed: %s", method, path, exc)
            raise StoreError(f"API unreachable: {exc}") from exc

        if allow_missing and response.status_code == 404:
            return response
        if response.is_error:
            text = response.text
            logger.error("Store %s %s answered %s: %s", method, path, response.status_code, text)
            raise StoreError(
                f"API {response.status_code}: {text or response.reason_phrase}",
                status_code=response.status_code,
                detail=text,
            )
        return response

    @staticmethod
    def _json(response: httpx.Response):
        try:
            return response.json()
        except ValueError as exc:
            request = response.request
            logger.error(
                "Store %s %s answered %s with a non-JSON body: %r",
                request.method, request.url.path, response.status_code, response.text[:200],
            )
            raise StoreError(
                f"API {response.status_code}: invalid JSON body",
                status_code=response.status_code,
                detail=response.text,
            ) from exc
