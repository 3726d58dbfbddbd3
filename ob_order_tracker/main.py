"""
Main entry point for the OB order tracker application.
"""
import logging
from dataclasses import replace
from datetime import date
from typing import Dict, List, Optional

from ob_order_tracker.analysis.aggregator import summarize
from ob_order_tracker.analysis.analyzer_factory import AnalyzerFactory
from ob_order_tracker.analysis.achievement import filter_by_window
from ob_order_tracker.analysis.exporters.csv_exporter import CSVExporter
from ob_order_tracker.config.app_config import DEFAULT_DRAFT_ID, ROLLUP_LEVELS
from ob_order_tracker.config.database_config import get_database_config
from ob_order_tracker.data.connectors.base_connector import BaseConnector
from ob_order_tracker.data.connectors.sqlite_connector import SQLiteConnector
from ob_order_tracker.data.models.order import Order, OrderFilter
from ob_order_tracker.data.models.report import AchievementReport
from ob_order_tracker.data.models.seller import Seller
from ob_order_tracker.data.models.target import TargetEntry
from ob_order_tracker.data.repositories.catalog_repository import CatalogRepository
from ob_order_tracker.data.repositories.draft_repository import DraftRepository
from ob_order_tracker.data.repositories.order_repository import OrderRepository
from ob_order_tracker.data.repositories.seller_repository import SellerRepository
from ob_order_tracker.data.repositories.settings_repository import SettingsRepository
from ob_order_tracker.data.repositories.target_repository import TargetRepository
from ob_order_tracker.utils.date_helpers import get_timestamp_str, get_today, month_to_date_window
from ob_order_tracker.utils.logging_config import setup_logging
from ob_order_tracker.utils.validation import validate_category, validate_order, validate_target


class OrderTrackerApp:
    """
    Main application class: order entry, targets and achievement reporting.
    """

    def __init__(
        self,
        connector: Optional[BaseConnector] = None,
        catalog_repository: Optional[CatalogRepository] = None,
        db_path: Optional[str] = None,
        seed: bool = True,
        log_level=logging.INFO
    ):
        """
        Initialize the application.

        Args:
            connector (Optional[BaseConnector]): Database connector (defaults to SQLite)
            catalog_repository (Optional[CatalogRepository]): SKU catalog (defaults to the built-in one)
            db_path (Optional[str]): SQLite file used when no connector is given
            seed (bool): Load the seed seller directory into an empty database
            log_level: Logging level
        """
        self.logger = setup_logging(log_level=log_level)

        self.connector = connector or SQLiteConnector(get_database_config(db_path))

        self.catalog_repository = catalog_repository or CatalogRepository()
        self.order_repository = OrderRepository(self.connector)
        self.target_repository = TargetRepository(self.connector)
        self.seller_repository = SellerRepository(self.connector)
        self.draft_repository = DraftRepository(self.connector)
        self.settings_repository = SettingsRepository(self.connector)

        if seed:
            self.seller_repository.seed_if_empty()

    @property
    def catalog(self):
        return self.catalog_repository.get_all()

    @property
    def categories(self) -> List[str]:
        return self.catalog_repository.categories()

    def save_draft(self, order: Order, draft_id: str = DEFAULT_DRAFT_ID) -> None:
        self.draft_repository.save(draft_id, order)

    def load_draft(self, draft_id: str = DEFAULT_DRAFT_ID) -> Optional[Order]:
        return self.draft_repository.get(draft_id)

    def submit_order(self, order: Order, draft_id: Optional[str] = DEFAULT_DRAFT_ID) -> Order:
        """
        Validate and store an order, then discard its draft.

        Seller details (name, TSM, town, distributor) are filled in from the
        directory on a copy, and the route's total shops default to the
        seller's. The caller's order is left unchanged.

        Args:
            order (Order): The order to submit
            draft_id (Optional[str]): Draft to discard after submission

        Returns:
            Order: The stored order with its id and timestamp

        Raises:
            ValidationError: If the order fails validation
        """
        seller = self.seller_repository.find(order.seller_id)
        validate_order(order, seller, self.catalog)

        visits = replace(order.visits)
        if visits.total_shops == 0:
            visits.total_shops = seller.total_shops
        order = replace(
            order,
            order_booker=order.order_booker or seller.name,
            tsm=order.tsm or seller.tsm,
            town=order.town or seller.town,
            distributor=order.distributor or seller.distributor,
            visits=visits
        )

        try:
            stored = self.order_repository.insert(order)
        except Exception as e:
            self.logger.error(f"Failed to submit order for {order.seller_id}: {str(e)}", exc_info=True)
            raise

        if draft_id:
            self.draft_repository.delete(draft_id)
        return stored

    def set_target(self, seller_id: str, category: str, target_cartons) -> TargetEntry:
        """
        Set a seller's target for a brand category.

        Raises:
            ValidationError: If the category is unknown or the target is negative
            RecordNotFoundError: If the seller is not in the directory
        """
        self.seller_repository.get(seller_id)
        validate_category(category, self.categories)
        return self.target_repository.upsert(seller_id, category, validate_target(target_cartons))

    def get_targets(self, seller_id: str) -> Dict[str, float]:
        return self.target_repository.get_for_seller(seller_id)

    def save_seller(self, seller: Seller) -> Seller:
        return self.seller_repository.save(seller)

    def get_orders(self, filter_criteria: Optional[OrderFilter] = None) -> List[Order]:
        return self.order_repository.get_all(filter_criteria)

    def reset_orders(self) -> None:
        """Delete every submitted order and draft."""
        self.order_repository.clear()
        self.draft_repository.clear()

    def build_report(
        self,
        as_of: Optional[date] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        tsm: Optional[str] = None,
        include_idle: bool = False,
        all_time: bool = False
    ) -> AchievementReport:
        """
        Build the achievement report.

        The summary always covers today and month-to-date as of ``as_of``. The
        roll-ups cover ``start_date`` to ``end_date``, defaulting to
        month-to-date, or every order (undated ones included) with ``all_time``.

        Args:
            as_of (Optional[date]): Reporting date (defaults to today)
            start_date (Optional[date]): First day of the roll-up window
            end_date (Optional[date]): Last day of the roll-up window
            tsm (Optional[str]): Restrict the report to one TSM's orders
            include_idle (bool): List sellers without orders in the seller roll-up
            all_time (bool): Roll up every order instead of a date window

        Returns:
            AchievementReport: Summary and roll-ups
        """
        as_of = as_of or get_today()
        if all_time:
            start_date, end_date = None, None
        elif start_date is None and end_date is None:
            start_date, end_date = month_to_date_window(as_of)

        self.logger.info(f"Building achievement report as of {as_of} for {start_date} to {end_date}")

        # One snapshot of every input for the whole report
        orders = self.order_repository.get_all(OrderFilter(tsm=tsm))
        sellers = self.seller_repository.get_all()
        if tsm:
            sellers = [seller for seller in sellers if seller.tsm == tsm]
        registry = self.target_repository.get_registry()
        catalog = self.catalog
        categories = self.categories

        window_orders = filter_by_window(orders, start_date, end_date)
        factory = AnalyzerFactory(catalog, sellers, registry, categories)

        rollups = {}
        for level in ROLLUP_LEVELS:
            analyzer = factory.get_analyzer(level)
            rollups[level] = analyzer.run(window_orders, include_idle=include_idle)

        summary = summarize(
            orders, catalog, sellers, registry, as_of,
            working_days=self.settings_repository.working_days(),
            categories=categories
        )

        return AchievementReport(
            summary=summary,
            sellers=rollups['seller'],
            tsms=rollups['tsm'],
            routes=rollups['route'],
            start_date=start_date,
            end_date=end_date
        )

    def export_report(self, report: AchievementReport, output_dir: Optional[str] = None) -> str:
        output_dir = output_dir or f"achievement_report_{get_timestamp_str()}"
        exporter = CSVExporter(self.catalog, self.categories)
        return exporter.export(report, output_dir)

    def export_orders(self, output_path: str, filter_criteria: Optional[OrderFilter] = None) -> str:
        exporter = CSVExporter(self.catalog, self.categories)
        return exporter.export_orders(self.get_orders(filter_criteria), output_path)

    def close(self) -> None:
        try:
            self.connector.disconnect()
        except Exception as e:
            self.logger.error(f"Error closing database connection: {str(e)}")
            raise


def run_report(
    as_of: Optional[date] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    tsm: Optional[str] = None,
    all_time: bool = False,
    output_dir: Optional[str] = None,
    db_path: Optional[str] = None,
    log_level: int = logging.INFO
) -> str:
    """
    Build an achievement report and export it to CSV.

    Args:
        as_of (Optional[date]): Reporting date (defaults to today)
        start_date (Optional[date]): First day of the roll-up window
        end_date (Optional[date]): Last day of the roll-up window
        tsm (Optional[str]): Restrict the report to one TSM
        all_time (bool): Roll up every order instead of a date window
        output_dir (Optional[str]): Output directory for results
        db_path (Optional[str]): SQLite database file
        log_level (int): Logging level

    Returns:
        str: Path to the output directory
    """
    app = OrderTrackerApp(db_path=db_path, log_level=log_level)
    try:
        report = app.build_report(as_of=as_of, start_date=start_date, end_date=end_date, tsm=tsm, all_time=all_time)
        return app.export_report(report, output_dir)
    finally:
        app.close()
