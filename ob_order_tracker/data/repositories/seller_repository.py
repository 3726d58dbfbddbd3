"""
Seller repository for the order booker directory.
"""
import json
from typing import Any, Dict, Iterable, List, Optional
import pandas as pd

from ob_order_tracker.config.catalog_config import SEED_SELLERS
from ob_order_tracker.config.database_config import SELLER_QUERY_TEMPLATE, SELLER_UPSERT
from ob_order_tracker.data.connectors.base_connector import BaseConnector
from ob_order_tracker.data.models.seller import Seller
from ob_order_tracker.data.repositories.base_repository import BaseRepository, row_to_dict
from ob_order_tracker.utils.exceptions import RecordNotFoundError
from ob_order_tracker.utils.logging_config import get_logger

logger = get_logger(__name__)


def _seller_params(seller: Seller) -> Dict[str, Any]:
    return {
        "name": seller.name,
        "contact": seller.seller_id,
        "town": seller.town,
        "distributor": seller.distributor,
        "tsm": seller.tsm,
        "total_shops": seller.total_shops,
        "routes": json.dumps(seller.routes)
    }


class SellerRepository(BaseRepository[Seller]):
    """
    Repository for order bookers, their TSM and their routes.
    """

    def __init__(self, connector: BaseConnector):
        super().__init__(connector)

    def get_raw_data(self) -> pd.DataFrame:
        return self._execute_query(SELLER_QUERY_TEMPLATE)

    def get_all(self) -> List[Seller]:
        """
        Get every seller in the directory.

        Returns:
            List[Seller]: Sellers in insertion order
        """
        df = self.get_raw_data()
        return [Seller.from_dict(row_to_dict(row)) for _, row in df.iterrows()]

    def find(self, seller_id: str) -> Optional[Seller]:
        for seller in self.get_all():
            if seller.seller_id == seller_id:
                return seller
        return None

    def get(self, seller_id: str) -> Seller:
        """
        Get one seller by contact id.

        Raises:
            RecordNotFoundError: If no seller has that contact id
        """
        seller = self.find(seller_id)
        if seller is None:
            raise RecordNotFoundError(f"Unknown order booker: {seller_id}")
        return seller

    def save(self, seller: Seller) -> Seller:
        """
        Insert a seller, or update the one with the same contact id.

        Args:
            seller (Seller): The seller to store

        Returns:
            Seller: The stored seller with its record id
        """
        self._execute_statement(SELLER_UPSERT, _seller_params(seller))
        logger.info(f"Saved order booker {seller.seller_id}.")
        return self.get(seller.seller_id)

    def delete(self, seller_id: str) -> None:
        self._execute_statement("DELETE FROM ob_assignments WHERE contact = :contact", {"contact": seller_id})
        logger.info(f"Deleted order booker {seller_id}.")

    def reseed(self, records: Optional[Iterable[Dict[str, Any]]] = None) -> int:
        """
        Replace the directory with seed records in one transaction.

        Args:
            records (Optional[Iterable[Dict[str, Any]]]): Seller records (defaults to SEED_SELLERS)

        Returns:
            int: Number of sellers loaded
        """
        sellers = [Seller.from_dict(record) for record in (SEED_SELLERS if records is None else records)]
        statements = [("DELETE FROM ob_assignments", None)]
        statements.extend((SELLER_UPSERT, _seller_params(seller)) for seller in sellers)
        self.connector.execute_many(statements)
        logger.info(f"Seeded {len(sellers)} order bookers.")
        return len(sellers)

    def seed_if_empty(self) -> int:
        """Load the seed directory into an empty database."""
        if self.get_raw_data().empty:
            return self.reseed()
        return 0
