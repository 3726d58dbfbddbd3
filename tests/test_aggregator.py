"""
Tests for achievement windows, roll-ups and the global summary.
"""
from datetime import date

import pytest

from ob_order_tracker.analysis.aggregator import (
    achievement_percentage,
    filter_by_window,
    rollup_by_route,
    rollup_by_seller,
    rollup_by_tsm,
    sum_category_totals,
    summarize,
    target_for_seller
)
from ob_order_tracker.analysis.analyzer_factory import AnalyzerFactory
from ob_order_tracker.analysis.normalization import category_totals
from ob_order_tracker.analysis.rollup import SellerAnalyzer
from ob_order_tracker.data.models import Order, TargetRegistry, VisitCounts
from ob_order_tracker.utils.date_helpers import month_to_date_window


def test_sum_is_linear_over_orders(orders, catalog):
    combined = sum_category_totals(orders, catalog)

    for category, value in combined.items():
        expected = sum(category_totals(order, catalog)[category] for order in orders)
        assert value == pytest.approx(expected)


def test_sum_of_no_orders_is_all_zeros(catalog):
    totals = sum_category_totals([], catalog)
    assert totals and all(value == 0.0 for value in totals.values())


def test_month_to_date_window_excludes_earlier_months(orders, catalog, as_of):
    mtd = filter_by_window(orders, *month_to_date_window(as_of))

    assert [order.order_id for order in mtd] == [1, 2, 3, 4]
    assert sum_category_totals(mtd, catalog)["DWB"] == pytest.approx(1 + 24 / 48)
    assert sum_category_totals(orders, catalog)["DWB"] == pytest.approx(1 + 24 / 48 + 5)


def test_undated_orders_only_appear_without_bounds(order_factory):
    undated = order_factory("P-01", None, {"kg-10": (1, 0, 0)})
    dated = order_factory("P-01", date(2024, 5, 1), {"kg-10": (1, 0, 0)})

    assert filter_by_window([undated, dated]) == [undated, dated]
    assert filter_by_window([undated, dated], start=date(2024, 5, 1)) == [dated]
    assert filter_by_window([undated, dated], end=date(2024, 5, 31)) == [dated]


def test_window_bounds_are_inclusive(order_factory):
    first = order_factory("P-01", date(2024, 5, 1), {})
    last = order_factory("P-01", date(2024, 5, 31), {})
    outside = order_factory("P-01", date(2024, 6, 1), {})

    selected = filter_by_window([first, last, outside], date(2024, 5, 1), date(2024, 5, 31))
    assert selected == [first, last]


def test_missing_target_is_zero(registry):
    assert target_for_seller("P-01", "Kite Glow", registry) == 10.0
    assert target_for_seller("P-01", "Match", registry) == 0.0
    assert target_for_seller("NOBODY", "Kite Glow", registry) == 0.0


@pytest.mark.parametrize("achievement", [0.0, 3.5, 1e6])
def test_zero_target_reports_zero_percent(achievement):
    assert achievement_percentage(achievement, 0.0) == 0.0


def test_p01_kite_glow_percentage(orders, catalog, sellers, registry, as_of):
    rollups = rollup_by_seller(filter_by_window(orders, as_of, as_of), catalog, sellers, registry)
    p01 = next(r for r in rollups if r.seller_id == "P-01")

    assert p01.category_totals["Kite Glow"] == pytest.approx(330 / 144)
    kite_pct = achievement_percentage(p01.category_totals["Kite Glow"], target_for_seller("P-01", "Kite Glow", registry))
    assert round(kite_pct, 2) == 22.92


def test_two_orders_from_one_seller_add_up(small_catalog, order_factory, sellers):
    orders = [
        order_factory("P-01", date(2024, 5, 1), {"a-1": (1, 0, 0), "b-1": (2, 0, 0)}),
        order_factory("P-01", date(2024, 5, 2), {"a-1": (3, 0, 0)}),
    ]

    rollups = rollup_by_seller(orders, small_catalog, sellers, TargetRegistry())

    assert len(rollups) == 1
    assert rollups[0].category_totals == {"A": 4.0, "B": 2.0}
    assert rollups[0].total_achievement == pytest.approx(6.0)
    assert rollups[0].order_count == 2
    assert rollups[0].visits.visited_shops == 60


def test_seller_and_tsm_rollups_agree(orders, catalog, sellers, registry):
    seller_rollups = rollup_by_seller(orders, catalog, sellers, registry)
    tsm_rollups = rollup_by_tsm(orders, catalog, sellers, registry)

    by_seller = {r.seller_id: r.total_achievement for r in seller_rollups}
    shoaib = next(r for r in tsm_rollups if r.tsm_name == "Muhammad Shoaib")
    imran = next(r for r in tsm_rollups if r.tsm_name == "Imran Khan")

    assert shoaib.total_achievement == pytest.approx(by_seller["P-01"] + by_seller["P-02"])
    assert imran.total_achievement == pytest.approx(by_seller["M-01"])
    assert sum(r.total_achievement for r in tsm_rollups) == pytest.approx(sum(by_seller.values()))


def test_tsm_rollup_counts_members_and_targets(orders, catalog, sellers, registry):
    tsm_rollups = rollup_by_tsm(orders, catalog, sellers, registry)
    shoaib = next(r for r in tsm_rollups if r.tsm_name == "Muhammad Shoaib")

    assert shoaib.ob_count == 2
    assert shoaib.total_target == pytest.approx(35.0)


def test_tsm_without_orders_still_listed(catalog, sellers, registry):
    tsm_rollups = rollup_by_tsm([], catalog, sellers, registry)

    assert {r.tsm_name for r in tsm_rollups} == {"Muhammad Shoaib", "Imran Khan"}
    assert all(r.total_achievement == 0.0 for r in tsm_rollups)


def test_seller_missing_from_directory_uses_recorded_tsm(catalog, order_factory):
    order = order_factory("X-99", date(2024, 5, 1), {"kg-10": (1, 0, 0)}, tsm="Field TSM")

    seller_rollups = rollup_by_seller([order], catalog, [], TargetRegistry())
    tsm_rollups = rollup_by_tsm([order], catalog, [], TargetRegistry())

    assert seller_rollups[0].tsm == "Field TSM"
    assert seller_rollups[0].name is None
    assert tsm_rollups[0].tsm_name == "Field TSM"
    assert tsm_rollups[0].ob_count == 1


def test_seller_rollup_sorted_by_achievement(orders, catalog, sellers, registry):
    rollups = rollup_by_seller(orders, catalog, sellers, registry)
    totals = [r.total_achievement for r in rollups]

    assert totals == sorted(totals, reverse=True)


def test_idle_sellers_only_listed_on_request(catalog, sellers, registry, order_factory):
    orders = [order_factory("P-01", date(2024, 5, 1), {"kg-10": (1, 0, 0)})]

    assert [r.seller_id for r in rollup_by_seller(orders, catalog, sellers, registry)] == ["P-01"]

    everyone = rollup_by_seller(orders, catalog, sellers, registry, include_idle=True)
    assert [r.seller_id for r in everyone] == ["P-01", "P-02", "M-01"]
    idle = everyone[1]
    assert idle.total_achievement == 0.0
    assert idle.total_target == pytest.approx(20.0)
    assert idle.percentage == 0.0


def test_route_rollup_groups_missing_routes_as_unknown(catalog, order_factory):
    orders = [
        order_factory("P-01", date(2024, 5, 1), {"kg-10": (1, 0, 0)}, route=None),
        order_factory("P-02", date(2024, 5, 1), {"kg-10": (2, 0, 0)}, route="Route 1"),
        order_factory("P-02", date(2024, 5, 2), {"kg-10": (1, 0, 0)}, route="Route 1"),
    ]

    routes = rollup_by_route(orders, catalog)

    assert [(r.route_name, r.order_count) for r in routes] == [("Route 1", 2), ("Unknown", 1)]
    assert routes[0].achievement == pytest.approx(3.0)


def test_empty_inputs_give_empty_rollups(catalog, sellers, registry):
    assert rollup_by_seller([], catalog, sellers, registry) == []
    assert rollup_by_route([], catalog) == []


def test_summary_today_and_month_to_date(orders, catalog, sellers, registry, as_of):
    summary = summarize(orders, catalog, sellers, registry, as_of, working_days=25)

    today = {row.category: row for row in summary.today}
    mtd = {row.category: row for row in summary.month_to_date}

    assert today["Kite Glow"].achievement == pytest.approx(330 / 144 + 3)
    assert today["Vero"].achievement == 0.0
    assert mtd["Vero"].achievement == pytest.approx(1.5)
    assert mtd["Kite Glow"].target == pytest.approx(30.0)
    assert today["Kite Glow"].target == pytest.approx(30.0)
    assert summary.total_target == pytest.approx(43.0)
    assert summary.days_worked == 3
    assert summary.remaining_working_days == 22
    assert summary.mtd_visits.visited_shops == 120
    assert summary.daily_target == pytest.approx(43.0 / 25)


def test_today_percentage_uses_full_target(catalog, sellers, order_factory, as_of):
    registry = TargetRegistry()
    registry.upsert("P-01", "Kite Glow", 10.0)
    order = order_factory("P-01", as_of, {"kg-10": (2, 3, 6)})

    summary = summarize([order], catalog, sellers[:1], registry, as_of, working_days=25)

    today = {row.category: row for row in summary.today}
    mtd = {row.category: row for row in summary.month_to_date}
    assert round(today["Kite Glow"].percentage, 2) == 22.92
    assert round(mtd["Kite Glow"].percentage, 2) == 22.92
    assert summary.daily_target == pytest.approx(10.0 / 25)
    assert round(summary.daily_percentage, 2) == 572.92


def test_required_daily_rate(orders, catalog, sellers, registry, as_of):
    summary = summarize(orders, catalog, sellers, registry, as_of, working_days=25)

    expected = (summary.total_target - summary.mtd_achievement) / 22
    assert summary.required_daily_rate == pytest.approx(expected)


def test_required_daily_rate_is_zero_when_no_days_left(catalog, registry):
    summary = summarize([], catalog, [], registry, date(2024, 5, 31), working_days=0)

    assert summary.required_daily_rate == 0.0
    assert summary.daily_target == 0.0
    assert summary.daily_percentage == 0.0


def test_targets_changes_apply_to_past_orders(orders, catalog, sellers, as_of):
    registry = TargetRegistry()
    registry.upsert("P-01", "Kite Glow", 10.0)
    before = rollup_by_seller(orders, catalog, sellers, registry)

    registry.upsert("P-01", "Kite Glow", 20.0)
    after = rollup_by_seller(orders, catalog, sellers, registry)

    p01_before = next(r for r in before if r.seller_id == "P-01")
    p01_after = next(r for r in after if r.seller_id == "P-01")
    assert p01_after.percentage == pytest.approx(p01_before.percentage / 2)


def test_factory_builds_known_levels_only(catalog, sellers, registry):
    factory = AnalyzerFactory(catalog, sellers, registry)

    assert isinstance(factory.get_analyzer("seller"), SellerAnalyzer)
    assert factory.get_analyzer("brand") is None
    assert set(factory.get_all_analyzers()) == {"seller", "tsm", "route"}


def test_seller_output_dataframe_columns(orders, catalog, sellers, registry):
    analyzer = SellerAnalyzer(catalog, sellers, registry)
    df = analyzer.prepare_output_dataframe(analyzer.run(orders))

    assert list(df.columns[:3]) == ["SELLER_ID", "NAME", "TSM"]
    assert "Kite Glow" in df.columns
    assert len(df) == 3


def test_visit_percentages():
    visits = VisitCounts(total_shops=40, visited_shops=20, productive_shops=5)
    assert visits.productivity_pct == 25.0
    assert visits.coverage_pct == 50.0
    assert visits.non_productive_shops == 15
    assert VisitCounts().productivity_pct == 0.0


def test_order_without_items_counts_zero(catalog):
    assert sum(category_totals(Order(seller_id="P-01"), catalog).values()) == 0.0
