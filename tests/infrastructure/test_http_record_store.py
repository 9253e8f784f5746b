"""Tests for HttpRecordStore against a mocked json-server."""

import json

import httpx
import pytest

from agripos.application.checkout import CheckoutFailed, CheckoutHandler, CheckoutState
from agripos.application.dto import ContactForm
from agripos.application.session import PosSession
from agripos.domain.exceptions import StoreError
from agripos.domain.service.catalog_snapshot import CatalogSnapshot
from agripos.infrastructure.persistence.http_record_store import HttpRecordStore
from agripos.infrastructure.persistence.store_customer_repository import StoreCustomerRepository
from agripos.infrastructure.persistence.store_meta_repository import StoreMetaRepository
from agripos.infrastructure.persistence.store_order_repository import StoreOrderRepository
from agripos.infrastructure.persistence.store_product_repository import StoreProductRepository


class FakeJsonServer:
    """Just enough of json-server's routing to exercise the client."""

    def __init__(self) -> None:
        self.db = {
            "meta": {"shopName": "Tiến Liên", "categories": ["Phân bón"]},
            "products": [
                {"id": "pr1", "name": "Urê", "updatedAt": "2026-01-01T00:00:00.000Z"},
                {"id": "pr2", "name": "Kali", "updatedAt": "2026-02-01T00:00:00.000Z"},
            ],
        }
        self.requests: list[httpx.Request] = []
        self.write_status = 200
        self.good_reads: dict[str, int] = {}

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        parts = [p for p in request.url.path.split("/") if p]
        collection = parts[0]
        if collection == "meta":
            return httpx.Response(200, json=self.db["meta"])
        records = self.db.setdefault(collection, [])

        if len(parts) == 1 and request.method == "GET":
            result = list(records)
            sort = request.url.params.get("_sort")
            if sort:
                desc = request.url.params.get("_order") == "desc"
                result.sort(key=lambda r: r.get(sort, ""), reverse=desc)
            return httpx.Response(200, json=result)
        if len(parts) == 1 and request.method == "POST":
            record = json.loads(request.content)
            records.append(record)
            if self.write_status == 204:
                return httpx.Response(204)
            return httpx.Response(201, json=record)

        record_id = parts[1]
        found = next((r for r in records if r["id"] == record_id), None)
        if found is None:
            return httpx.Response(404, json={})
        if request.method == "GET":
            path = request.url.path
            if path in self.good_reads:
                if self.good_reads[path] == 0:
                    return httpx.Response(200, text="<html>proxy error</html>")
                self.good_reads[path] -= 1
            return httpx.Response(200, json=found)
        if request.method == "PUT":
            record = json.loads(request.content)
            records[records.index(found)] = record
            if self.write_status == 204:
                return httpx.Response(204)
            return httpx.Response(200, json=record)
        if request.method == "DELETE":
            records.remove(found)
            return httpx.Response(200, json={})
        return httpx.Response(405, text="Method Not Allowed")


@pytest.fixture
def server():
    return FakeJsonServer()


@pytest.fixture
def store(server):
    store = HttpRecordStore("http://store.test/", transport=httpx.MockTransport(server))
    yield store
    store.close()


class TestHttpRecordStore:

    def test_list_sorted_descending(self, store, server):
        records = store.list("products", sort="updatedAt", descending=True)
        assert [r["id"] for r in records] == ["pr2", "pr1"]
        params = server.requests[-1].url.params
        assert params["_sort"] == "updatedAt"
        assert params["_order"] == "desc"

    def test_list_without_sort_sends_no_params(self, store, server):
        store.list("products")
        assert not server.requests[-1].url.params

    def test_get_existing(self, store):
        assert store.get("products", "pr1")["name"] == "Urê"

    def test_get_missing_is_none(self, store):
        assert store.get("products", "nope") is None

    def test_create_posts_json(self, store, server):
        store.create("customers", {"id": "c1", "phone": "0900000001"})
        request = server.requests[-1]
        assert request.method == "POST"
        assert request.url.path == "/customers"
        assert request.headers["content-type"] == "application/json"
        assert server.db["customers"] == [{"id": "c1", "phone": "0900000001"}]

    def test_replace_puts_record(self, store, server):
        store.replace("products", "pr1", {"id": "pr1", "name": "Urê Phú Mỹ"})
        assert server.requests[-1].method == "PUT"
        assert server.db["products"][0]["name"] == "Urê Phú Mỹ"

    def test_replace_missing_raises(self, store):
        with pytest.raises(StoreError) as exc_info:
            store.replace("products", "nope", {"id": "nope"})
        assert exc_info.value.status_code == 404

    def test_delete(self, store, server):
        store.delete("products", "pr1")
        assert [r["id"] for r in server.db["products"]] == ["pr2"]

    def test_get_document(self, store):
        assert store.get_document("meta")["shopName"] == "Tiến Liên"

    def test_ping(self, store):
        assert store.ping()


class TestHttpRecordStoreErrors:

    def test_server_error_text_kept_verbatim(self):
        transport = httpx.MockTransport(lambda request: httpx.Response(500, text="db.json locked"))
        store = HttpRecordStore("http://store.test", transport=transport)
        with pytest.raises(StoreError, match="API 500: db.json locked") as exc_info:
            store.list("products")
        assert exc_info.value.detail == "db.json locked"

    def test_connection_failure(self):
        def refuse(request):
            raise httpx.ConnectError("connection refused", request=request)

        store = HttpRecordStore("http://store.test", transport=httpx.MockTransport(refuse))
        with pytest.raises(StoreError, match="unreachable") as exc_info:
            store.create("orders", {"id": "o1"})
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    def test_timeout(self):
        def slow(request):
            raise httpx.ReadTimeout("timed out", request=request)

        store = HttpRecordStore("http://store.test", transport=httpx.MockTransport(slow))
        with pytest.raises(StoreError, match="timeout"):
            store.get("products", "pr1")

    def test_ping_offline(self):
        def refuse(request):
            raise httpx.ConnectError("connection refused", request=request)

        store = HttpRecordStore("http://store.test", transport=httpx.MockTransport(refuse))
        assert not store.ping()

    def test_non_json_body_becomes_store_error(self):
        transport = httpx.MockTransport(lambda request: httpx.Response(200, text="<html>oops</html>"))
        store = HttpRecordStore("http://store.test", transport=transport)
        with pytest.raises(StoreError, match="API 200: invalid JSON body") as exc_info:
            store.get("products", "pr1")
        assert exc_info.value.detail == "<html>oops</html>"

    def test_list_must_be_an_array(self):
        transport = httpx.MockTransport(lambda request: httpx.Response(200, json={"id": "pr1"}))
        store = HttpRecordStore("http://store.test", transport=transport)
        with pytest.raises(StoreError, match="expected a list of products"):
            store.list("products")

    def test_writes_accept_empty_no_content_reply(self, store, server):
        server.write_status = 204
        store.create("customers", {"id": "c1"})
        store.replace("products", "pr1", {"id": "pr1", "name": "Urê"})
        assert server.db["customers"] == [{"id": "c1"}]


class TestCheckoutOverHttp:

    @pytest.fixture
    def server(self):
        server = FakeJsonServer()
        server.db["products"] = [
            {"id": "pr1", "name": "Urê", "price": 10000, "stock": 5, "updatedAt": "2026-01-01T00:00:00.000Z"},
        ]
        return server

    @pytest.fixture
    def checkout(self, store):
        products = StoreProductRepository(store)
        customers = StoreCustomerRepository(store)
        orders = StoreOrderRepository(store)
        catalog = CatalogSnapshot(products, customers, orders, StoreMetaRepository(store))
        catalog.reload()
        session = PosSession(catalog)
        session.cart.add("pr1", 2)
        return session, CheckoutHandler(session, products, customers, orders)

    def test_completes_when_writes_answer_no_content(self, server, checkout):
        server.write_status = 204
        session, handler = checkout

        result = handler.handle(ContactForm(phone="0900000001", name="Anh Ba"))

        assert handler.state is CheckoutState.COMPLETED
        assert result.total_amount == 20000
        assert server.db["products"][0]["stock"] == 3
        assert len(server.db["orders"]) == 1
        assert session.cart.is_empty

    def test_garbled_read_during_decrement_is_reported(self, server, checkout):
        # the stock check reads pr1 once; the decrement's read is garbled
        server.good_reads["/products/pr1"] = 1
        session, handler = checkout

        with pytest.raises(CheckoutFailed) as exc_info:
            handler.handle(ContactForm(phone="0900000001", name="Anh Ba"))

        failure = exc_info.value
        assert failure.state is CheckoutState.DECREMENTING_STOCK
        assert isinstance(failure.cause, StoreError)
        assert failure.progress.order_id == server.db["orders"][0]["id"]
        assert failure.progress.decremented == []
        assert handler.state is CheckoutState.FAILED
        assert server.db["products"][0]["stock"] == 5
        assert len(session.cart) == 1
