"""
Tests for CSV export of reports and order lines.
"""
import os

import pandas as pd
import pytest

from ob_order_tracker.analysis.aggregator import rollup_by_route, rollup_by_seller, rollup_by_tsm, summarize
from ob_order_tracker.analysis.exporters.csv_exporter import ORDER_EXPORT_COLUMNS, CSVExporter
from ob_order_tracker.data.models import AchievementReport


@pytest.fixture
def report(orders, catalog, sellers, registry, as_of):
    return AchievementReport(
        summary=summarize(orders, catalog, sellers, registry, as_of),
        sellers=rollup_by_seller(orders, catalog, sellers, registry),
        tsms=rollup_by_tsm(orders, catalog, sellers, registry),
        routes=rollup_by_route(orders, catalog)
    )


def test_export_writes_every_table(report, catalog, tmp_path):
    output_dir = CSVExporter(catalog).export(report, str(tmp_path / "report"))

    for name in ("summary", "seller_rollup", "tsm_rollup", "route_rollup"):
        assert os.path.exists(os.path.join(output_dir, f"{name}.csv"))

    summary = pd.read_csv(os.path.join(output_dir, "summary.csv"))
    kite = summary[summary["CATEGORY"] == "Kite Glow"].iloc[0]
    assert kite["MTD_TARGET"] == 30.0
    assert kite["TODAY_TARGET"] == 30.0
    assert kite["MTD_ACHIEVEMENT"] == pytest.approx(5.292, abs=1e-3)


def test_order_lines_flatten_one_row_per_sku(orders, catalog):
    df = CSVExporter(catalog).prepare_orders_dataframe(orders)

    assert list(df.columns) == ORDER_EXPORT_COLUMNS
    assert len(df) == 6
    first = df.iloc[0]
    assert first["Brand"] == "Kite Glow"
    assert first["SKU"] == "Kite Rs 10"
    assert first["Total (Ctn)"] == "2.292"
    assert first["Date"] == "2024-05-20"


def test_export_orders_with_no_orders_writes_header(catalog, tmp_path):
    output_path = CSVExporter(catalog).export_orders([], str(tmp_path / "out" / "orders.csv"))

    df = pd.read_csv(output_path)
    assert df.empty
    assert list(df.columns) == ORDER_EXPORT_COLUMNS


def test_report_export_defaults_to_timestamped_directory(app, report, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    output_dir = app.export_report(report)

    assert os.path.basename(output_dir).startswith("achievement_report_")
    assert os.path.exists(os.path.join(output_dir, "summary.csv"))
