"""
Tests for record parsing at the storage and form boundary.
"""
from datetime import date, datetime

import pytest

from ob_order_tracker.data.models import Order, OrderItem, SKU, Seller, TargetRegistry
from ob_order_tracker.utils.date_helpers import parse_order_date
from ob_order_tracker.utils.exceptions import ValidationError


def test_order_from_form_fields():
    order = Order.from_dict({
        "obContact": "P-01",
        "route": "Route 1",
        "date": "2024-05-20",
        "totalShops": "60",
        "visitedShops": 40,
        "productiveShops": 25,
        "categoryProductiveShops": {"Kite Glow": 12},
        "items": {"kg-10": {"ctn": 10, "dzn": "", "pks": 3}}
    })

    assert order.seller_id == "P-01"
    assert order.order_date == date(2024, 5, 20)
    assert order.visits.total_shops == 60
    assert order.category_productive_shops == {"Kite Glow": 12}
    assert order.items["kg-10"] == OrderItem("kg-10", cartons=10, dozens=0, pieces=3)


def test_order_from_storage_row():
    order = Order.from_dict({
        "id": 7,
        "ob_contact": "P-02",
        "date": "2024-05-20T09:30:00.000Z",
        "order_data": {"kg-20": {"cartons": 1}},
        "category_productive_data": {},
        "submitted_at": "2024-05-20 09:31:00"
    })

    assert order.order_id == 7
    assert order.is_submitted
    assert order.order_date == date(2024, 5, 20)
    assert order.submitted_at == datetime(2024, 5, 20, 9, 31)


def test_unparsable_date_kept_as_text():
    order = Order.from_dict({"seller_id": "P-01", "date": "yesterday"})

    assert order.order_date is None
    assert order.date_text == "yesterday"
    assert order.to_dict()["date"] == "yesterday"


def test_order_requires_seller():
    with pytest.raises(ValidationError):
        Order.from_dict({"route": "Route 1"})


def test_fractional_quantity_rejected():
    with pytest.raises(ValidationError):
        OrderItem.from_dict("kg-10", {"cartons": 1.5})


def test_order_dict_round_trip_keeps_items():
    order = Order(seller_id="P-01", route="Route 1", order_date=date(2024, 5, 20))
    order.set_quantity("kg-10", cartons=2, dozens=3, pieces=6)

    restored = Order.from_dict(order.to_dict())

    assert restored.items == order.items
    assert restored.order_date == order.order_date


def test_item_for_missing_sku_is_zero():
    assert Order(seller_id="P-01").item_for("kg-10").is_empty


@pytest.mark.parametrize("value, expected", [
    ("2024-05-20", date(2024, 5, 20)),
    (datetime(2024, 5, 20, 18, 0), date(2024, 5, 20)),
    (date(2024, 5, 20), date(2024, 5, 20)),
    ("", None),
    (None, None),
    (20240520, None),
])
def test_parse_order_date(value, expected):
    assert parse_order_date(value) == expected


def test_sku_from_camel_case_record():
    sku = SKU.from_dict({"id": "kg-1kg", "name": "Kite 1kg", "category": "Kite Glow", "unitsPerCarton": 12})

    assert sku.sku_id == "kg-1kg"
    assert sku.units_per_dozen == 0
    assert not sku.allows_dozens


def test_seller_routes_from_stored_json():
    seller = Seller.from_dict({"id": 3, "contact": "P-01", "name": "Bilal", "routes": '["Route 1", "Route 2"]'})

    assert seller.seller_id == "P-01"
    assert seller.record_id == 3
    assert seller.has_route("Route 2")


def test_registry_upsert_replaces():
    registry = TargetRegistry()
    registry.upsert("P-01", "Vero", 5)
    registry.upsert("P-01", "Vero", 7)

    assert len(registry) == 1
    assert registry.get("P-01", "Vero") == 7.0
    assert registry.get("P-01", "DWB") is None
    assert ("P-01", "Vero") in registry
    assert registry.for_seller("P-01") == {"Vero": 7.0}
