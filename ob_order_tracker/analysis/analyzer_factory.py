"""
Factory for creating roll-up analyzers.
"""
from typing import Dict, Iterable, Optional, Sequence, Type

from ob_order_tracker.analysis.base_analyzer import BaseAnalyzer
from ob_order_tracker.analysis.rollup import RouteAnalyzer, SellerAnalyzer, TSMAnalyzer
from ob_order_tracker.data.models.catalog import SKU
from ob_order_tracker.data.models.seller import Seller
from ob_order_tracker.data.models.target import TargetRegistry
from ob_order_tracker.utils.logging_config import get_logger

logger = get_logger(__name__)


class AnalyzerFactory:
    """
    Factory for creating the different roll-up analyzers.
    """

    def __init__(
        self,
        catalog: Sequence[SKU],
        sellers: Optional[Iterable[Seller]] = None,
        registry: Optional[TargetRegistry] = None,
        categories: Optional[Sequence[str]] = None
    ):
        """
        Initialize the analyzer factory.

        Args:
            catalog (Sequence[SKU]): The SKU catalog
            sellers (Optional[Iterable[Seller]]): The seller directory
            registry (Optional[TargetRegistry]): Current targets
            categories (Optional[Sequence[str]]): Categories to report
        """
        self.catalog = list(catalog)
        self.sellers = list(sellers or [])
        self.registry = registry
        self.categories = categories

        self._analyzers: Dict[str, Type[BaseAnalyzer]] = {
            'seller': SellerAnalyzer,
            'tsm': TSMAnalyzer,
            'route': RouteAnalyzer
        }

    def get_analyzer(self, level: str) -> Optional[BaseAnalyzer]:
        """
        Get an analyzer for the specified level.

        Args:
            level (str): The roll-up level ('seller', 'tsm', 'route')

        Returns:
            Optional[BaseAnalyzer]: An analyzer instance, or None if the level is unknown
        """
        if level not in self._analyzers:
            logger.warning(f"Unknown analyzer level: {level}")
            return None

        analyzer_class = self._analyzers[level]
        return analyzer_class(
            catalog=self.catalog,
            sellers=self.sellers,
            registry=self.registry,
            categories=self.categories
        )

    def get_all_analyzers(self) -> Dict[str, BaseAnalyzer]:
        return {level: self.get_analyzer(level) for level in self._analyzers}
