"""
CSV exporter for achievement reports and order history.
"""
import os
from typing import Dict, Iterable, Optional, Sequence
import pandas as pd

from ob_order_tracker.analysis.exporters.base_exporter import BaseExporter
from ob_order_tracker.analysis.normalization import normalized_quantity
from ob_order_tracker.analysis.rollup import RouteAnalyzer, SellerAnalyzer, TSMAnalyzer
from ob_order_tracker.data.models.catalog import SKU
from ob_order_tracker.data.models.order import Order
from ob_order_tracker.data.models.report import AchievementReport
from ob_order_tracker.utils.date_helpers import format_date
from ob_order_tracker.utils.logging_config import get_logger

logger = get_logger(__name__)

ORDER_EXPORT_COLUMNS = [
    "ID", "Date", "TSM", "Town", "Distributor", "OB", "Route", "Visited", "Productive",
    "Brand", "Brand Prod", "SKU", "Ctn", "Dzn", "Pks", "Total (Ctn)"
]


class CSVExporter(BaseExporter):
    """
    Exporter for achievement reports to CSV files.
    """

    def __init__(self, catalog: Sequence[SKU], categories: Optional[Sequence[str]] = None):
        """
        Initialize the CSV exporter.

        Args:
            catalog (Sequence[SKU]): The SKU catalog
            categories (Optional[Sequence[str]]): Categories to report
        """
        self.catalog = list(catalog)
        self.categories = categories

    def export(self, report: AchievementReport, output_dir: str) -> str:
        """
        Export the summary and every roll-up to CSV files.

        Args:
            report (AchievementReport): The report to export
            output_dir (str): Directory for output files

        Returns:
            str: The output directory
        """
        os.makedirs(output_dir, exist_ok=True)

        tables: Dict[str, pd.DataFrame] = {
            "summary": self.prepare_summary_dataframe(report.summary),
            "seller_rollup": SellerAnalyzer(self.catalog, categories=self.categories)
                .prepare_output_dataframe(report.sellers),
            "tsm_rollup": TSMAnalyzer(self.catalog, categories=self.categories)
                .prepare_output_dataframe(report.tsms),
            "route_rollup": RouteAnalyzer(self.catalog, categories=self.categories)
                .prepare_output_dataframe(report.routes)
        }

        for name, df in tables.items():
            output_path = os.path.join(output_dir, f"{name}.csv")
            df.to_csv(output_path, index=False)
            logger.info(f"Exported {name} ({len(df)} rows) to {output_path}")

        return output_dir

    def prepare_orders_dataframe(self, orders: Iterable[Order]) -> pd.DataFrame:
        """
        Flatten orders into one row per entered SKU.

        Args:
            orders (Iterable[Order]): Submitted orders

        Returns:
            pd.DataFrame: Order lines with equivalent cartons to three decimals
        """
        skus = {sku.sku_id: sku for sku in self.catalog}
        data = []
        for order in orders:
            for sku_id, item in order.items.items():
                sku = skus.get(sku_id)
                category = sku.category if sku else ""
                cartons = normalized_quantity(item, sku) if sku else 0.0
                data.append({
                    "ID": order.order_id,
                    "Date": format_date(order.order_date) if order.order_date else order.date_text,
                    "TSM": order.tsm,
                    "Town": order.town,
                    "Distributor": order.distributor,
                    "OB": order.order_booker,
                    "Route": order.route,
                    "Visited": order.visits.visited_shops,
                    "Productive": order.visits.productive_shops,
                    "Brand": category,
                    "Brand Prod": order.category_productive_shops.get(category, 0),
                    "SKU": sku.name if sku else sku_id,
                    "Ctn": item.cartons,
                    "Dzn": item.dozens,
                    "Pks": item.pieces,
                    "Total (Ctn)": f"{cartons:.3f}"
                })
        return pd.DataFrame(data, columns=ORDER_EXPORT_COLUMNS)

    def export_orders(self, orders: Iterable[Order], output_path: str) -> str:
        """
        Write the flattened order history to a CSV file.

        Args:
            orders (Iterable[Order]): Submitted orders
            output_path (str): Target file path

        Returns:
            str: The written file path
        """
        df = self.prepare_orders_dataframe(orders)
        directory = os.path.dirname(output_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        df.to_csv(output_path, index=False)
        logger.info(f"Exported {len(df)} order lines to {output_path}")
        return output_path
