"""
Base analyzer for achievement roll-ups.
"""
from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional, Sequence
import pandas as pd

from ob_order_tracker.analysis.normalization import catalog_categories, category_totals
from ob_order_tracker.config.app_config import UNASSIGNED_TSM, UNKNOWN_ROUTE
from ob_order_tracker.data.models.catalog import SKU
from ob_order_tracker.data.models.order import Order
from ob_order_tracker.data.models.seller import Seller
from ob_order_tracker.data.models.target import TargetRegistry

META_COLUMNS = [
    'order_id', 'seller_id', 'tsm', 'route', 'order_date',
    'total_shops', 'visited_shops', 'productive_shops'
]
TOTAL_COLUMN = 'total_achievement'


class BaseAnalyzer(ABC):
    """
    Base class for roll-up analyzers.

    Orders are first flattened into an achievement frame (one row per order,
    one column per brand category) which subclasses group by their dimension.
    """

    def __init__(
        self,
        catalog: Sequence[SKU],
        sellers: Optional[Iterable[Seller]] = None,
        registry: Optional[TargetRegistry] = None,
        categories: Optional[Sequence[str]] = None
    ):
        """
        Initialize the base analyzer.

        Args:
            catalog (Sequence[SKU]): The SKU catalog
            sellers (Optional[Iterable[Seller]]): The seller directory
            registry (Optional[TargetRegistry]): Current targets
            categories (Optional[Sequence[str]]): Categories to report (defaults to the catalog's)
        """
        self.catalog = list(catalog)
        self.sellers: Dict[str, Seller] = {s.seller_id: s for s in (sellers or [])}
        self.registry = registry if registry is not None else TargetRegistry()
        self.categories = list(categories) if categories is not None else catalog_categories(self.catalog)

    def tsm_for(self, seller_id: str, recorded_tsm: Optional[str] = None) -> str:
        """
        Resolve the TSM a seller reports to.

        The seller directory wins; the TSM recorded on the order is used for
        sellers missing from it.
        """
        seller = self.sellers.get(seller_id)
        if seller is not None:
            return seller.tsm or UNASSIGNED_TSM
        return recorded_tsm or UNASSIGNED_TSM

    def prepare_data(self, orders: Iterable[Order]) -> pd.DataFrame:
        """
        Flatten orders into an achievement frame.

        Args:
            orders (Iterable[Order]): Orders to flatten

        Returns:
            pd.DataFrame: One row per order with meta, visit and per-category columns
        """
        rows = []
        for order in orders:
            row = {
                'order_id': order.order_id,
                'seller_id': order.seller_id,
                'tsm': self.tsm_for(order.seller_id, order.tsm),
                'route': order.route or UNKNOWN_ROUTE,
                'order_date': order.order_date,
                'total_shops': order.visits.total_shops,
                'visited_shops': order.visits.visited_shops,
                'productive_shops': order.visits.productive_shops
            }
            totals = category_totals(order, self.catalog, self.categories)
            row.update(totals)
            row[TOTAL_COLUMN] = sum(totals.values(), 0.0)
            rows.append(row)

        columns = META_COLUMNS + self.categories + [TOTAL_COLUMN]
        return pd.DataFrame(rows, columns=columns)

    def sum_categories(self, group: pd.DataFrame) -> Dict[str, float]:
        """Sum each category column of a group of order rows."""
        return {category: float(group[category].sum()) for category in self.categories}

    @abstractmethod
    def analyze(self, achievement_data: pd.DataFrame, **kwargs) -> List:
        """
        Roll the achievement frame up along the analyzer's dimension.

        Args:
            achievement_data (pd.DataFrame): Frame from prepare_data
            **kwargs: Additional arguments

        Returns:
            List: Roll-up records sorted for presentation
        """
        pass

    def run(self, orders: Iterable[Order], **kwargs) -> List:
        """Flatten and roll up orders in one step."""
        return self.analyze(self.prepare_data(orders), **kwargs)

    @abstractmethod
    def prepare_output_dataframe(self, rollups: List) -> pd.DataFrame:
        """
        Prepare an output DataFrame from roll-up records.

        Args:
            rollups (List): Records returned by analyze

        Returns:
            pd.DataFrame: The roll-ups as a table
        """
        pass
