"""
Tests for the command-line interface.
"""
import json
import os

import pytest

from ob_order_tracker.cli.order_tracker_cli import main, parse_args


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "orders.db")


@pytest.fixture
def order_file(tmp_path):
    path = tmp_path / "order.json"
    path.write_text(json.dumps({
        "data": {
            "obContact": "P-01",
            "route": "Route 1",
            "date": "2024-05-20",
            "visitedShops": 40,
            "productiveShops": 25,
            "items": {"kg-10": {"ctn": 2, "dzn": 3, "pks": 6}}
        }
    }))
    return str(path)


def test_parse_args_report_dates():
    args = parse_args(["report", "--as-of", "2024-05-20", "--tsm", "Muhammad Shoaib"])

    assert args.command == "report"
    assert args.as_of.isoformat() == "2024-05-20"
    assert args.tsm == "Muhammad Shoaib"


def test_parse_args_rejects_bad_date():
    with pytest.raises(SystemExit):
        parse_args(["report", "--as-of", "20/05/2024"])


def test_submit_then_report(db_path, order_file, tmp_path, capsys):
    assert main(["--db", db_path, "set-target", "P-01", "Kite Glow", "10"]) == 0
    assert main(["--db", db_path, "submit", order_file]) == 0

    output_dir = str(tmp_path / "report")
    assert main(["--db", db_path, "report", "--as-of", "2024-05-20", "--output-dir", output_dir]) == 0

    out = capsys.readouterr().out
    assert "submitted successfully for P-01" in out
    assert "22.9%" in out
    assert os.path.exists(os.path.join(output_dir, "seller_rollup.csv"))


def test_invalid_order_returns_error(db_path, tmp_path, capsys):
    path = tmp_path / "empty.json"
    path.write_text(json.dumps({"obContact": "P-01", "route": "Route 1", "date": "2024-05-20", "items": {}}))

    assert main(["--db", db_path, "submit", str(path)]) == 1
    assert "Cannot submit an empty order" in capsys.readouterr().out


def test_unknown_seller_target_returns_error(db_path, capsys):
    assert main(["--db", db_path, "set-target", "NOBODY", "Vero", "1"]) == 1
    assert "Unknown order booker" in capsys.readouterr().out


def test_draft_save_and_show(db_path, order_file, capsys):
    assert main(["--db", db_path, "draft", order_file]) == 0
    assert main(["--db", db_path, "draft"]) == 0

    out = capsys.readouterr().out
    assert '"seller_id": "P-01"' in out


def test_missing_draft(db_path, capsys):
    assert main(["--db", db_path, "draft", "--draft-id", "nothing"]) == 1


def test_sellers_lists_seed_directory(db_path, capsys):
    assert main(["--db", db_path, "sellers"]) == 0
    assert "P-01" in capsys.readouterr().out


def test_export_orders(db_path, order_file, tmp_path):
    assert main(["--db", db_path, "submit", order_file]) == 0

    output_file = str(tmp_path / "orders.csv")
    assert main(["--db", db_path, "export-orders", output_file, "--seller", "P-01"]) == 0
    with open(output_file, encoding="utf-8") as fh:
        lines = fh.read().splitlines()
    assert len(lines) == 2
    assert lines[1].endswith("2.292")


def test_working_days(db_path, capsys):
    assert main(["--db", db_path, "working-days", "22"]) == 0
    assert "Working days: 22" in capsys.readouterr().out
    assert main(["--db", db_path, "working-days", "0"]) == 1
