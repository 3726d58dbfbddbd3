"""
Draft repository for in-progress orders.
"""
import json
from typing import List, Optional
import pandas as pd

from ob_order_tracker.config.database_config import DRAFT_QUERY, DRAFT_UPSERT
from ob_order_tracker.data.connectors.base_connector import BaseConnector
from ob_order_tracker.data.models.order import Order
from ob_order_tracker.data.repositories.base_repository import BaseRepository
from ob_order_tracker.utils.logging_config import get_logger

logger = get_logger(__name__)


class DraftRepository(BaseRepository[Order]):
    """
    Repository for saved drafts; one draft per id, last write wins.
    """

    def __init__(self, connector: BaseConnector):
        super().__init__(connector)

    def get_raw_data(self) -> pd.DataFrame:
        return self._execute_query("SELECT id, data, updated_at FROM drafts ORDER BY updated_at DESC")

    def get_all(self) -> List[Order]:
        df = self.get_raw_data()
        return [Order.from_dict(json.loads(data)) for data in df['data']]

    def save(self, draft_id: str, order: Order) -> None:
        """
        Save a draft, replacing any earlier draft with the same id.

        Args:
            draft_id (str): Draft identifier
            order (Order): The in-progress order
        """
        self._execute_statement(DRAFT_UPSERT, {"draft_id": draft_id, "data": json.dumps(order.to_dict())})
        logger.info(f"Draft {draft_id} saved.")

    def get(self, draft_id: str) -> Optional[Order]:
        """
        Restore a draft.

        Args:
            draft_id (str): Draft identifier

        Returns:
            Optional[Order]: The saved order, or None if there is no such draft
        """
        df = self._execute_query(DRAFT_QUERY, {"draft_id": draft_id})
        if df.empty:
            return None
        return Order.from_dict(json.loads(df.iloc[0]['data']))

    def delete(self, draft_id: str) -> None:
        self._execute_statement("DELETE FROM drafts WHERE id = :draft_id", {"draft_id": draft_id})

    def clear(self) -> None:
        self._execute_statement("DELETE FROM drafts")
        logger.warning("All drafts deleted.")
