"""
Base database connector interface.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, Optional, Tuple
import pandas as pd

# A write and its named parameters
Statement = Tuple[str, Optional[Dict[str, Any]]]


class BaseConnector(ABC):
    """
    Abstract base class for the order database.

    Reads come back as DataFrames; writes commit before returning.
    Usable as a context manager that opens and closes the connection.
    """

    @abstractmethod
    def connect(self) -> Any:
        """Open the connection if needed and return it."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        pass

    @abstractmethod
    def execute_query(self, query: str, params: Optional[Dict[str, Any]] = None) -> pd.DataFrame:
        """
        Run a SELECT with named parameters.

        Args:
            query (str): SQL with :name placeholders
            params (Optional[Dict[str, Any]]): Values for the placeholders

        Returns:
            pd.DataFrame: One row per result row, columns named as selected
        """
        pass

    @abstractmethod
    def execute_statement(self, statement: str, params: Optional[Dict[str, Any]] = None) -> Optional[int]:
        """
        Run and commit one INSERT, UPDATE or DELETE.

        Returns:
            Optional[int]: Row id assigned by an INSERT, if any
        """
        pass

    @abstractmethod
    def execute_many(self, statements: Iterable[Statement]) -> None:
        """Run several writes in one transaction; none are applied if one fails."""
        pass

    def __enter__(self) -> "BaseConnector":
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.disconnect()
