"""Tests for the record mapping of the store-backed repositories."""

from datetime import datetime, timezone

import pytest

from agripos.domain.exceptions import StoreError
from agripos.domain.model.customer import Customer
from agripos.domain.model.order import Order, OrderLineItem
from agripos.domain.model.product import Product
from agripos.domain.model.value_objects import ContactDetails, Money, Quantity
from agripos.domain.service.catalog_snapshot import CatalogSnapshot
from agripos.infrastructure.persistence.json_file_record_store import JsonFileRecordStore
from agripos.infrastructure.persistence.record_store import format_timestamp, parse_timestamp
from agripos.infrastructure.persistence.store_customer_repository import StoreCustomerRepository
from agripos.infrastructure.persistence.store_meta_repository import StoreMetaRepository
from agripos.infrastructure.persistence.store_order_repository import StoreOrderRepository
from agripos.infrastructure.persistence.store_product_repository import StoreProductRepository

AT = datetime(2026, 7, 4, 3, 2, 1, 123000, tzinfo=timezone.utc)


@pytest.fixture
def store(tmp_path):
    return JsonFileRecordStore(tmp_path / "db.json")


class TestTimestamps:

    def test_format_matches_javascript_iso(self):
        assert format_timestamp(AT) == "2026-07-04T03:02:01.123Z"

    def test_parse_z_suffix(self):
        assert parse_timestamp("2026-07-04T03:02:01.123Z") == AT

    def test_parse_missing(self):
        assert parse_timestamp(None).year == 1970


class TestProductRecords:

    def test_wire_format(self, store):
        repo = StoreProductRepository(store)
        repo.create(Product(
            id="pr1", name="Urê", category="Phân bón", price=Money(15000), stock=9,
            images=["a.jpg"], description="bao 1kg", created_at=AT, updated_at=AT,
        ))
        assert store.get("products", "pr1") == {
            "id": "pr1", "category": "Phân bón", "name": "Urê", "price": 15000, "stock": 9,
            "description": "bao 1kg", "images": ["a.jpg"],
            "createdAt": "2026-07-04T03:02:01.123Z", "updatedAt": "2026-07-04T03:02:01.123Z",
        }

    def test_reads_loose_records(self, store):
        store.create("products", {"id": "pr2", "name": "Kali", "price": "12000", "images": ["", "b.jpg"]})
        product = StoreProductRepository(store).get_by_id("pr2")
        assert product.price == Money(12000)
        assert product.stock == 0
        assert product.images == ["b.jpg"]

    def test_unknown_fields_survive_replace(self, store):
        store.create("products", {"id": "pr3", "name": "Regent", "price": 1, "stock": 4, "supplier": "ABC"})
        repo = StoreProductRepository(store)
        product = repo.get_by_id("pr3")
        product.remove_stock(1)
        repo.replace(product)
        raw = store.get("products", "pr3")
        assert raw["stock"] == 3
        assert raw["supplier"] == "ABC"

    def test_list_most_recently_updated_first(self, store):
        store.create("products", {"id": "a", "updatedAt": "2026-01-01T00:00:00.000Z"})
        store.create("products", {"id": "b", "updatedAt": "2026-03-01T00:00:00.000Z"})
        assert [p.id for p in StoreProductRepository(store).list_all()] == ["b", "a"]


class TestCustomerRecords:

    def test_round_trip_uses_camel_case(self, store):
        repo = StoreCustomerRepository(store)
        repo.create(Customer(id="c1", name="Nguyen A", phone="0900000001", address_detail="ngõ 2", created_at=AT))
        raw = store.get("customers", "c1")
        assert raw["addressDetail"] == "ngõ 2"
        assert repo.get_by_id("c1").address_detail == "ngõ 2"
        repo.delete("c1")
        assert repo.get_by_id("c1") is None


class TestOrderRecords:

    def test_wire_format(self, store):
        order = Order.create(
            order_id="o1",
            customer_id="c1",
            customer_snapshot=ContactDetails(name="Nguyen A", phone="0900000001", village="Thon 2"),
            items=[OrderLineItem("pr1", "Urê", Quantity(2), Money(15000))],
            note="trả sau",
            created_at=AT,
        )
        StoreOrderRepository(store).create(order)
        raw = store.get("orders", "o1")
        assert raw["customerId"] == "c1"
        assert raw["customerSnapshot"]["village"] == "Thon 2"
        assert raw["items"] == [{"productId": "pr1", "name": "Urê", "price": 15000, "qty": 2, "lineTotal": 30000}]
        assert raw["total"] == 30000
        assert raw["note"] == "trả sau"

    def test_reads_back_equal(self, store):
        order = Order.create(
            "o2", "c1", ContactDetails(name="A", phone="1"),
            [OrderLineItem("pr1", "Urê", Quantity(1), Money(15000))], created_at=AT,
        )
        repo = StoreOrderRepository(store)
        repo.create(order)
        assert repo.get_by_id("o2") == order


class TestMetaRecords:

    def test_reads_meta(self, store):
        meta = StoreMetaRepository(store).get()
        assert meta.categories == ()
        assert meta.shop_name  # falls back to the default name


class TestMalformedRecords:

    def test_product_without_id(self, store):
        store.create("products", {"name": "Urê", "price": 1000})
        with pytest.raises(StoreError, match="Malformed record None in products"):
            StoreProductRepository(store).list_all()

    def test_product_with_non_numeric_stock(self, store):
        store.create("products", {"id": "pr1", "stock": "nhiều"})
        with pytest.raises(StoreError, match="'pr1' in products") as exc_info:
            StoreProductRepository(store).get_by_id("pr1")
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_order_item_without_quantity(self, store):
        store.create("orders", {"id": "o1", "customerId": "c1", "items": [{"productId": "pr1", "price": 1}]})
        with pytest.raises(StoreError, match="'o1' in orders"):
            StoreOrderRepository(store).list_all()

    def test_customer_with_bad_timestamp(self, store):
        store.create("customers", {"id": "c1", "createdAt": "hôm qua"})
        with pytest.raises(StoreError, match="'c1' in customers"):
            StoreCustomerRepository(store).list_all()

    def test_reload_keeps_previous_snapshot(self, store):
        store.create("products", {"id": "pr1", "name": "Urê", "price": 1000, "stock": 3})
        catalog = CatalogSnapshot(
            StoreProductRepository(store),
            StoreCustomerRepository(store),
            StoreOrderRepository(store),
            StoreMetaRepository(store),
        )
        catalog.reload()
        store.create("products", {"id": "pr2", "price": "Infinity"})

        with pytest.raises(StoreError):
            catalog.reload()
        assert [p.id for p in catalog.products] == ["pr1"]
