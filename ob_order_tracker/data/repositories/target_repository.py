"""
Target repository for per-seller brand targets.
"""
from typing import Dict, List, Optional
import pandas as pd

from ob_order_tracker.config.database_config import TARGET_QUERY_TEMPLATE, TARGET_UPSERT
from ob_order_tracker.data.connectors.base_connector import BaseConnector
from ob_order_tracker.data.models.target import TargetEntry, TargetRegistry
from ob_order_tracker.data.repositories.base_repository import BaseRepository
from ob_order_tracker.utils.logging_config import get_logger

logger = get_logger(__name__)


class TargetRepository(BaseRepository[TargetEntry]):
    """
    Repository for brand targets keyed by (seller, category).
    """

    def __init__(self, connector: BaseConnector):
        super().__init__(connector)

    def get_raw_data(self, seller_id: Optional[str] = None) -> pd.DataFrame:
        return self._execute_query(TARGET_QUERY_TEMPLATE, {"seller_id": seller_id})

    def get_all(self, seller_id: Optional[str] = None) -> List[TargetEntry]:
        """
        Get stored targets, optionally for one seller.

        Args:
            seller_id (Optional[str]): Restrict to this order booker

        Returns:
            List[TargetEntry]: Stored targets
        """
        df = self.get_raw_data(seller_id)
        return [
            TargetEntry(
                seller_id=str(row['ob_contact']),
                category=str(row['brand_name']),
                target_cartons=float(row['target_ctn']) if pd.notnull(row['target_ctn']) else 0.0
            )
            for _, row in df.iterrows()
        ]

    def get_for_seller(self, seller_id: str) -> Dict[str, float]:
        """Get a seller's targets keyed by category."""
        return {entry.category: entry.target_cartons for entry in self.get_all(seller_id)}

    def get_registry(self) -> TargetRegistry:
        """
        Load every stored target into a registry snapshot.

        Returns:
            TargetRegistry: Targets read at this moment
        """
        registry = TargetRegistry(self.get_all())
        logger.debug(f"Loaded {len(registry)} targets.")
        return registry

    def upsert(self, seller_id: str, category: str, target_cartons: float) -> TargetEntry:
        """
        Insert or replace the target for a seller and category.

        Args:
            seller_id (str): Order booker contact
            category (str): Brand category
            target_cartons (float): Target carton-equivalents

        Returns:
            TargetEntry: The stored target
        """
        self._execute_statement(TARGET_UPSERT, {
            "seller_id": seller_id,
            "category": category,
            "target_ctn": float(target_cartons)
        })
        logger.info(f"Target for {seller_id} / {category} set to {target_cartons}.")
        return TargetEntry(seller_id, category, float(target_cartons))
