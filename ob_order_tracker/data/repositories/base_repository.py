"""
Base repository interface for data access.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Optional, TypeVar
import pandas as pd

from ob_order_tracker.data.connectors.base_connector import BaseConnector

# Entity type a repository returns
T = TypeVar('T')


def clean_value(value: Any) -> Any:
    """Convert pandas missing values (NaN, NaT) in a row to None."""
    if pd.api.types.is_scalar(value) and pd.isna(value):
        return None
    return value


def row_to_dict(row: pd.Series) -> Dict[str, Any]:
    return {key: clean_value(value) for key, value in row.items()}


class BaseRepository(ABC, Generic[T]):
    """
    Repository over a connector: ``get_raw_data`` returns the rows as a
    DataFrame, ``get_all`` maps them to model objects.
    """

    def __init__(self, connector: BaseConnector):
        self.connector = connector

    @abstractmethod
    def get_all(self, *args, **kwargs) -> List[T]:
        pass

    @abstractmethod
    def get_raw_data(self, *args, **kwargs) -> pd.DataFrame:
        pass

    def _execute_query(self, query: str, params: Optional[Dict[str, Any]] = None) -> pd.DataFrame:
        return self.connector.execute_query(query, params)

    def _execute_statement(self, statement: str, params: Optional[Dict[str, Any]] = None) -> Optional[int]:
        return self.connector.execute_statement(statement, params)
