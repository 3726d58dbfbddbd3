"""
Tests for order and admin input validation.
"""
from datetime import date

import pytest

from ob_order_tracker.utils.exceptions import ValidationError
from ob_order_tracker.utils.validation import (
    validate_category,
    validate_date_format,
    validate_order,
    validate_target
)


@pytest.fixture
def p01(sellers):
    return sellers[0]


@pytest.fixture
def valid_order(order_factory):
    return order_factory("P-01", date(2024, 5, 20), {"kg-10": (1, 0, 0)})


def test_valid_order_passes(valid_order, p01, catalog):
    assert validate_order(valid_order, p01, catalog) is valid_order


def test_unknown_seller_rejected(valid_order, catalog):
    with pytest.raises(ValidationError) as excinfo:
        validate_order(valid_order, None, catalog)
    assert excinfo.value.field == "seller_id"


def test_missing_route_rejected(valid_order, p01, catalog):
    valid_order.route = None
    with pytest.raises(ValidationError, match="Please enter a route name"):
        validate_order(valid_order, p01, catalog)


def test_route_must_belong_to_seller(valid_order, p01, catalog):
    valid_order.route = "Route 9"
    with pytest.raises(ValidationError, match="not assigned"):
        validate_order(valid_order, p01, catalog)


def test_any_route_allowed_when_seller_has_none(valid_order, p01, catalog):
    p01.routes = []
    valid_order.route = "Route 9"
    assert validate_order(valid_order, p01, catalog) is valid_order


def test_undated_order_rejected(valid_order, p01, catalog):
    valid_order.order_date = None
    valid_order.date_text = "20/05/2024"
    with pytest.raises(ValidationError, match="20/05/2024"):
        validate_order(valid_order, p01, catalog)


def test_productive_cannot_exceed_visited(valid_order, p01, catalog):
    valid_order.visits.productive_shops = valid_order.visits.visited_shops + 1
    with pytest.raises(ValidationError, match="cannot exceed"):
        validate_order(valid_order, p01, catalog)


def test_negative_quantity_rejected(valid_order, p01, catalog):
    valid_order.set_quantity("kg-20", cartons=-1)
    with pytest.raises(ValidationError, match="negative"):
        validate_order(valid_order, p01, catalog)


def test_unknown_sku_rejected(valid_order, p01, catalog):
    valid_order.set_quantity("zz-1", cartons=1)
    with pytest.raises(ValidationError, match="Unknown SKU"):
        validate_order(valid_order, p01, catalog)


def test_dozens_rejected_for_kg_packs(valid_order, p01, catalog):
    valid_order.set_quantity("kg-1kg", dozens=1)
    with pytest.raises(ValidationError, match="dozens"):
        validate_order(valid_order, p01, catalog)


def test_empty_order_rejected(order_factory, p01, catalog):
    order = order_factory("P-01", date(2024, 5, 20), {"kg-10": (0, 0, 0)})
    with pytest.raises(ValidationError, match="Cannot submit an empty order"):
        validate_order(order, p01, catalog)


def test_validate_target():
    assert validate_target("12.5") == 12.5
    assert validate_target(0) == 0.0
    for bad in (-1, "abc", None, float("nan")):
        with pytest.raises(ValidationError):
            validate_target(bad)


def test_validate_category():
    assert validate_category("Vero", ["Kite Glow", "Vero"]) == "Vero"
    with pytest.raises(ValidationError):
        validate_category("Soap", ["Kite Glow", "Vero"])


def test_validate_date_format():
    assert validate_date_format("2024-05-20")
    assert not validate_date_format("2024-13-01")
    assert not validate_date_format("20-05-2024")
