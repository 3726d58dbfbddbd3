"""
Order repository for submitted orders.
"""
import json
from dataclasses import replace
from datetime import datetime
from typing import List, Optional
import pandas as pd

from ob_order_tracker.analysis.achievement import filter_by_window
from ob_order_tracker.config.database_config import ORDER_INSERT, ORDER_QUERY_TEMPLATE
from ob_order_tracker.data.connectors.base_connector import BaseConnector
from ob_order_tracker.data.models.order import Order, OrderFilter
from ob_order_tracker.data.repositories.base_repository import BaseRepository, row_to_dict
from ob_order_tracker.utils.date_helpers import format_date
from ob_order_tracker.utils.logging_config import get_logger

logger = get_logger(__name__)


class OrderRepository(BaseRepository[Order]):
    """
    Repository for the append-only log of submitted orders.
    """

    def __init__(self, connector: BaseConnector):
        super().__init__(connector)

    def insert(self, order: Order) -> Order:
        """
        Append a submitted order.

        Args:
            order (Order): The order to store

        Returns:
            Order: A copy of the order carrying its assigned id and submission timestamp
        """
        submitted_at = datetime.now().replace(microsecond=0)
        params = {
            "date": format_date(order.order_date) if order.order_date else order.date_text,
            "tsm": order.tsm,
            "town": order.town,
            "distributor": order.distributor,
            "order_booker": order.order_booker,
            "ob_contact": order.seller_id,
            "route": order.route,
            "total_shops": order.visits.total_shops,
            "visited_shops": order.visits.visited_shops,
            "productive_shops": order.visits.productive_shops,
            "category_productive_data": json.dumps(order.category_productive_shops),
            "order_data": json.dumps({sku_id: item.to_dict() for sku_id, item in order.items.items()}),
            "submitted_at": submitted_at.isoformat(sep=' ')
        }
        order_id = self._execute_statement(ORDER_INSERT, params)
        logger.info(f"Stored order {order_id} for {order.seller_id} on route {order.route}.")
        return replace(order, order_id=order_id, submitted_at=submitted_at)

    def get_raw_data(self, filter_criteria: Optional[OrderFilter] = None) -> pd.DataFrame:
        """
        Get submitted order rows, filtered by seller and TSM.

        Args:
            filter_criteria (Optional[OrderFilter]): Filtering criteria

        Returns:
            pd.DataFrame: The order rows, newest first
        """
        if filter_criteria is None:
            filter_criteria = OrderFilter()

        params = {
            "seller_id": filter_criteria.seller_id,
            "tsm": filter_criteria.tsm
        }
        df = self._execute_query(ORDER_QUERY_TEMPLATE, params)
        logger.info(f"Retrieved {len(df)} order records.")
        return df

    def get_all(self, filter_criteria: Optional[OrderFilter] = None) -> List[Order]:
        """
        Get submitted orders matching the criteria.

        A date range excludes orders whose stored date cannot be parsed.

        Args:
            filter_criteria (Optional[OrderFilter]): Filtering criteria

        Returns:
            List[Order]: Matching orders, newest first
        """
        if filter_criteria is None:
            filter_criteria = OrderFilter()

        df = self.get_raw_data(filter_criteria)

        orders = []
        for _, row in df.iterrows():
            record = row_to_dict(row)
            record["order_data"] = json.loads(record.get("order_data") or "{}")
            record["category_productive_data"] = json.loads(record.get("category_productive_data") or "{}")
            orders.append(Order.from_dict(record))

        return filter_by_window(orders, filter_criteria.start_date, filter_criteria.end_date)

    def clear(self) -> None:
        """Delete every submitted order."""
        self._execute_statement("DELETE FROM submitted_orders")
        logger.warning("All submitted orders deleted.")
