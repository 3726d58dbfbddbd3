"""
Command-line interface for the OB order tracker.
"""
import argparse
import json
import logging
import sys
from datetime import datetime
from typing import List, Optional

from ob_order_tracker.config.app_config import DEFAULT_DRAFT_ID, WORKING_DAYS_SETTING
from ob_order_tracker.data.models.order import Order, OrderFilter
from ob_order_tracker.main import OrderTrackerApp
from ob_order_tracker.utils.date_helpers import format_date
from ob_order_tracker.utils.exceptions import RecordNotFoundError, ValidationError
from ob_order_tracker.utils.validation import validate_date_format


def _date_arg(value: str):
    if not validate_date_format(value):
        raise argparse.ArgumentTypeError(f"Invalid date format: {value}. Use YYYY-MM-DD format.")
    return datetime.strptime(value, '%Y-%m-%d').date()


def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Args:
        args (Optional[List[str]]): Command-line arguments (uses sys.argv if None)

    Returns:
        argparse.Namespace: Parsed arguments
    """
    parser = argparse.ArgumentParser(
        description="OB Order Tracker - Capture field orders and report achievement against targets"
    )

    parser.add_argument(
        "--db",
        type=str,
        help="SQLite database file (default: OB_TRACKER_DB_PATH or orders.db)"
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    report = subparsers.add_parser("report", help="Build the achievement report and export it to CSV")
    report.add_argument("--as-of", type=_date_arg, help="Reporting date (YYYY-MM-DD, default: today)")
    report.add_argument("--start-date", type=_date_arg, help="First day of the roll-up window (default: 1st of month)")
    report.add_argument("--end-date", type=_date_arg, help="Last day of the roll-up window (default: as-of date)")
    report.add_argument("--all-time", action="store_true", help="Roll up every order, including undated ones")
    report.add_argument("--tsm", type=str, help="Restrict the report to one TSM")
    report.add_argument("--output-dir", type=str, help="Output directory (default: auto-generated based on timestamp)")

    submit = subparsers.add_parser("submit", help="Submit an order from a JSON file")
    submit.add_argument("order_file", type=str, help="Path to the order JSON")
    submit.add_argument("--draft-id", type=str, default=DEFAULT_DRAFT_ID, help="Draft to discard after submission")

    draft = subparsers.add_parser("draft", help="Save an order JSON as a draft, or print a saved draft")
    draft.add_argument("order_file", type=str, nargs="?", help="Path to the order JSON (omit to print the draft)")
    draft.add_argument("--draft-id", type=str, default=DEFAULT_DRAFT_ID, help=f"Draft id (default: {DEFAULT_DRAFT_ID})")

    set_target = subparsers.add_parser("set-target", help="Set a seller's target for a brand category")
    set_target.add_argument("seller_id", type=str, help="Order booker contact (e.g. P-01)")
    set_target.add_argument("category", type=str, help="Brand category (e.g. \"Kite Glow\")")
    set_target.add_argument("target", type=float, help="Target in equivalent cartons")

    targets = subparsers.add_parser("targets", help="List a seller's targets")
    targets.add_argument("seller_id", type=str, help="Order booker contact")

    subparsers.add_parser("sellers", help="List the order booker directory")
    subparsers.add_parser("reseed", help="Replace the order booker directory with the seed list")

    export_orders = subparsers.add_parser("export-orders", help="Export submitted order lines to CSV")
    export_orders.add_argument("output_file", type=str, help="CSV file to write")
    export_orders.add_argument("--seller", type=str, help="Only this order booker")
    export_orders.add_argument("--tsm", type=str, help="Only this TSM")
    export_orders.add_argument("--start-date", type=_date_arg, help="First order date")
    export_orders.add_argument("--end-date", type=_date_arg, help="Last order date")

    working_days = subparsers.add_parser("working-days", help="Show or set the month's working days")
    working_days.add_argument("days", type=int, nargs="?", help="New number of working days")

    subparsers.add_parser("reset", help="Delete all submitted orders and drafts")

    return parser.parse_args(args)


def _load_order(path: str) -> Order:
    with open(path, "r", encoding="utf-8") as fh:
        data = json.load(fh)
    # Accept the {"data": {...}} envelope used by the entry form
    if isinstance(data, dict) and isinstance(data.get("data"), dict):
        data = data["data"]
    return Order.from_dict(data)


def _print_report(report) -> None:
    summary = report.summary
    print(f"\nAchievement as of {format_date(summary.as_of)}")
    print(f"{'Category':<16}{'Today':>10}{'MTD':>10}{'Target':>10}{'%':>8}")
    for today_row, mtd_row in zip(summary.today, summary.month_to_date):
        print(
            f"{mtd_row.category:<16}{today_row.achievement:>10.3f}{mtd_row.achievement:>10.3f}"
            f"{mtd_row.target:>10.2f}{mtd_row.percentage:>7.1f}%"
        )
    print(
        f"{'Total':<16}{summary.today_achievement:>10.3f}{summary.mtd_achievement:>10.3f}"
        f"{summary.total_target:>10.2f}{summary.mtd_percentage:>7.1f}%"
    )
    print(f"Required per remaining working day: {summary.required_daily_rate:.3f} Ctn")

    if report.tsms:
        print(f"\n{'TSM':<24}{'OBs':>5}{'Achieved':>10}{'Target':>10}{'%':>8}")
        for row in report.tsms:
            print(f"{row.tsm_name:<24}{row.ob_count:>5}{row.total_achievement:>10.3f}{row.total_target:>10.2f}{row.percentage:>7.1f}%")


def main(args: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        args (Optional[List[str]]): Command-line arguments (uses sys.argv if None)

    Returns:
        int: Exit code (0 for success, non-zero for errors)
    """
    parsed_args = parse_args(args)

    log_level = logging.DEBUG if parsed_args.verbose else logging.INFO

    try:
        app = OrderTrackerApp(db_path=parsed_args.db, log_level=log_level)
    except Exception as e:
        print(f"\nError opening database: {str(e)}")
        return 1

    try:
        command = parsed_args.command

        if command == "report":
            report = app.build_report(
                as_of=parsed_args.as_of,
                start_date=parsed_args.start_date,
                end_date=parsed_args.end_date,
                tsm=parsed_args.tsm,
                all_time=parsed_args.all_time
            )
            _print_report(report)
            output_dir = app.export_report(report, parsed_args.output_dir)
            print(f"\nAchievement report complete. Results saved in {output_dir}")

        elif command == "submit":
            stored = app.submit_order(_load_order(parsed_args.order_file), draft_id=parsed_args.draft_id)
            print(f"Order {stored.order_id} submitted successfully for {stored.seller_id}.")

        elif command == "draft":
            if parsed_args.order_file:
                app.save_draft(_load_order(parsed_args.order_file), parsed_args.draft_id)
                print(f"Draft {parsed_args.draft_id} saved.")
            else:
                draft = app.load_draft(parsed_args.draft_id)
                if draft is None:
                    print(f"Draft {parsed_args.draft_id} not found.")
                    return 1
                print(json.dumps(draft.to_dict(), indent=2))

        elif command == "set-target":
            entry = app.set_target(parsed_args.seller_id, parsed_args.category, parsed_args.target)
            print(f"Target for {entry.seller_id} / {entry.category} set to {entry.target_cartons:.2f} Ctn.")

        elif command == "targets":
            targets = app.get_targets(parsed_args.seller_id)
            for category in app.categories:
                print(f"{category:<16}{targets.get(category, 0.0):>10.2f}")

        elif command == "sellers":
            for seller in app.seller_repository.get_all():
                print(f"{seller.seller_id:<8}{seller.name:<20}{seller.town or '':<14}{seller.tsm or '':<20}{', '.join(seller.routes)}")

        elif command == "reseed":
            count = app.seller_repository.reseed()
            print(f"Loaded {count} order bookers.")

        elif command == "export-orders":
            output_file = app.export_orders(parsed_args.output_file, OrderFilter(
                seller_id=parsed_args.seller,
                tsm=parsed_args.tsm,
                start_date=parsed_args.start_date,
                end_date=parsed_args.end_date
            ))
            print(f"Orders exported to {output_file}")

        elif command == "working-days":
            if parsed_args.days is not None:
                if parsed_args.days <= 0:
                    print("Error: working days must be positive.")
                    return 1
                app.settings_repository.set(WORKING_DAYS_SETTING, parsed_args.days)
            print(f"Working days: {app.settings_repository.working_days()}")

        elif command == "reset":
            app.reset_orders()
            print("All submitted orders and drafts deleted.")

        return 0

    except (ValidationError, RecordNotFoundError) as e:
        print(f"Error: {str(e)}")
        return 1

    except Exception as e:
        print(f"\nError: {str(e)}")
        if parsed_args.verbose:
            import traceback
            traceback.print_exc()
        return 1

    finally:
        app.close()


if __name__ == "__main__":
    sys.exit(main())
