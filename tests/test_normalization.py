"""
Tests for carton/dozen/piece normalization.
"""
import pytest

from ob_order_tracker.analysis.normalization import (
    catalog_categories,
    category_total,
    category_totals,
    normalized_quantity,
    total_pieces
)
from ob_order_tracker.data.models import Order, OrderItem, SKU

KG_10 = SKU("kg-10", "Kite Rs 10", "Kite Glow", units_per_carton=144, units_per_dozen=12)


def test_kite_example_converts_to_equivalent_cartons():
    item = OrderItem("kg-10", cartons=2, dozens=3, pieces=6)

    assert total_pieces(item, KG_10) == 330
    assert normalized_quantity(item, KG_10) == pytest.approx(330 / 144)
    assert normalized_quantity(item, KG_10) == pytest.approx(2.2917, abs=1e-4)


@pytest.mark.parametrize("cartons, dozens, pieces", [(1, 0, 0), (0, 1, 0), (0, 0, 1), (7, 11, 143)])
def test_normalized_quantity_matches_piece_formula(cartons, dozens, pieces):
    item = OrderItem("kg-10", cartons=cartons, dozens=dozens, pieces=pieces)
    expected = (cartons * 144 + dozens * 12 + pieces) / 144
    assert normalized_quantity(item, KG_10) == pytest.approx(expected)


def test_empty_item_is_zero():
    assert normalized_quantity(OrderItem("kg-10"), KG_10) == 0


def test_sku_without_carton_size_yields_zero():
    broken = SKU("x-1", "Broken", "Kite Glow", units_per_carton=0, units_per_dozen=12)
    item = OrderItem("x-1", cartons=5, dozens=2, pieces=9)

    assert normalized_quantity(item, broken) == 0.0


def test_category_total_only_counts_its_own_skus(catalog):
    order = Order(seller_id="P-01")
    order.set_quantity("kg-10", cartons=1)
    order.set_quantity("kg-1kg", pieces=6)
    order.set_quantity("v-20kg", cartons=3)

    assert category_total(order, "Kite Glow", catalog) == pytest.approx(1.5)
    assert category_total(order, "Vero", catalog) == pytest.approx(3.0)
    assert category_total(order, "Match", catalog) == 0.0


def test_category_totals_cover_every_catalog_category(catalog):
    order = Order(seller_id="P-01")
    order.set_quantity("m-large", cartons=2, dozens=1)

    totals = category_totals(order, catalog)

    assert list(totals) == catalog_categories(catalog)
    assert totals["Match"] == pytest.approx((2 * 10 + 12) / 10)
    assert sum(totals.values()) == pytest.approx(totals["Match"])


def test_category_totals_with_explicit_categories_reports_empty_ones(catalog):
    order = Order(seller_id="P-01")
    order.set_quantity("kg-10", cartons=1)

    totals = category_totals(order, catalog, ["Kite Glow", "Washing Powder"])

    assert totals == {"Kite Glow": 1.0, "Washing Powder": 0.0}


def test_catalog_categories_keeps_first_seen_order():
    skus = [
        SKU("b-1", "Beta", "B", 1),
        SKU("a-1", "Alpha", "A", 1),
        SKU("b-2", "Beta 2", "B", 1),
    ]
    assert catalog_categories(skus) == ["B", "A"]
