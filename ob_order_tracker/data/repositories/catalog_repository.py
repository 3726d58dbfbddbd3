"""
Catalog repository: read-only access to the SKU catalog.
"""
from typing import Any, Dict, Iterable, List, Optional
import pandas as pd

from ob_order_tracker.config.app_config import CATEGORIES
from ob_order_tracker.config.catalog_config import SKU_CATALOG
from ob_order_tracker.data.models.catalog import SKU
from ob_order_tracker.utils.exceptions import ValidationError
from ob_order_tracker.utils.logging_config import get_logger
from ob_order_tracker.utils.validation import validate_dataframe

logger = get_logger(__name__)

CATALOG_CSV_COLUMNS = ['id', 'name', 'category', 'units_per_carton']


class CatalogRepository:
    """
    Repository for the static SKU catalog.

    The catalog is loaded once and never changes at runtime.
    """

    def __init__(self, records: Optional[Iterable[Dict[str, Any]]] = None):
        """
        Initialize the catalog repository.

        Args:
            records (Optional[Iterable[Dict[str, Any]]]): Catalog records (defaults to SKU_CATALOG)
        """
        source = SKU_CATALOG if records is None else records
        self._skus: List[SKU] = [SKU.from_dict(record) for record in source]
        self._by_id: Dict[str, SKU] = {sku.sku_id: sku for sku in self._skus}
        logger.debug(f"Loaded {len(self._skus)} SKUs.")

    @classmethod
    def from_csv(cls, path: str) -> "CatalogRepository":
        """
        Load a catalog from a CSV file with id, name, category,
        units_per_carton and units_per_dozen columns.
        """
        df = pd.read_csv(path)
        if not validate_dataframe(df, CATALOG_CSV_COLUMNS):
            raise ValidationError(f"Catalog file {path} must have columns: {', '.join(CATALOG_CSV_COLUMNS)}")
        df = df.astype(object).where(pd.notnull(df), None)
        return cls(df.to_dict(orient='records'))

    def get_all(self) -> List[SKU]:
        return list(self._skus)

    def get(self, sku_id: str) -> Optional[SKU]:
        return self._by_id.get(sku_id)

    def categories(self) -> List[str]:
        """
        List the brand categories: the configured ones first, then any others
        found in the catalog.

        Returns:
            List[str]: Category names in display order
        """
        categories = list(CATEGORIES)
        for sku in self._skus:
            if sku.category not in categories:
                categories.append(sku.category)
        return categories

    def get_raw_data(self) -> pd.DataFrame:
        """
        Get the catalog as a DataFrame.

        Returns:
            pd.DataFrame: One row per SKU
        """
        return pd.DataFrame(
            [
                {
                    'SKU_ID': sku.sku_id,
                    'NAME': sku.name,
                    'CATEGORY': sku.category,
                    'UNITS_PER_CARTON': sku.units_per_carton,
                    'UNITS_PER_DOZEN': sku.units_per_dozen,
                    'PRICE_PER_CARTON': sku.price_per_carton
                }
                for sku in self._skus
            ],
            columns=['SKU_ID', 'NAME', 'CATEGORY', 'UNITS_PER_CARTON', 'UNITS_PER_DOZEN', 'PRICE_PER_CARTON']
        )
