"""
SQLite database connector implementation.
"""
import sqlite3
import pandas as pd
from typing import Any, Dict, Iterable, Optional

from ob_order_tracker.config.database_config import DEFAULT_SETTINGS, SCHEMA_STATEMENTS, get_database_config
from ob_order_tracker.data.connectors.base_connector import BaseConnector, Statement
from ob_order_tracker.utils.logging_config import get_logger

logger = get_logger(__name__)


class SQLiteConnector(BaseConnector):
    """
    Connector for a local SQLite database.

    The schema is created on first connect. Every write commits on its own,
    so concurrent submissions are plain appends.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        Initialize the SQLite connector.

        Args:
            config (Optional[Dict[str, Any]]): Connection configuration.
                                              If None, uses get_database_config()
        """
        self.config = config if config is not None else get_database_config()
        self.connection = None

    def connect(self) -> sqlite3.Connection:
        """
        Open the database and make sure the schema exists.

        Returns:
            sqlite3.Connection: The open connection
        """
        if self.connection is None:
            try:
                self.connection = sqlite3.connect(
                    self.config["database"],
                    timeout=self.config.get("timeout", 5.0),
                    check_same_thread=self.config.get("check_same_thread", True)
                )
                self._initialize_schema()
                logger.info(f"SQLite connection established: {self.config['database']}")
            except sqlite3.Error as e:
                logger.error(f"Error connecting to SQLite: {str(e)}")
                raise

        return self.connection

    def _initialize_schema(self) -> None:
        with self.connection:
            for statement in SCHEMA_STATEMENTS:
                self.connection.execute(statement)
            for key, value in DEFAULT_SETTINGS.items():
                self.connection.execute(
                    "INSERT OR IGNORE INTO app_config (key, value) VALUES (?, ?)", (key, value)
                )

    def disconnect(self) -> None:
        """
        Close the SQLite connection.
        """
        if self.connection is not None:
            self.connection.close()
            self.connection = None
            logger.info("SQLite connection closed.")

    def execute_query(self, query: str, params: Optional[Dict[str, Any]] = None) -> pd.DataFrame:
        """
        Execute a SQL query and return the results as a DataFrame.

        Args:
            query (str): The SQL query to execute
            params (Optional[Dict[str, Any]]): Named parameters to bind to the query

        Returns:
            pd.DataFrame: The query results as a pandas DataFrame
        """
        connection = self.connect()
        try:
            logger.debug(f"Executing query: {' '.join(query.split())[:200]}...")
            return pd.read_sql_query(query, connection, params=params or {})
        except Exception as e:
            logger.error(f"Error executing query: {str(e)}")
            raise

    def execute_statement(self, statement: str, params: Optional[Dict[str, Any]] = None) -> Optional[int]:
        connection = self.connect()
        try:
            with connection:
                cursor = connection.execute(statement, params or {})
            return cursor.lastrowid
        except sqlite3.Error as e:
            logger.error(f"Error executing statement: {str(e)}")
            raise

    def execute_many(self, statements: Iterable[Statement]) -> None:
        connection = self.connect()
        try:
            with connection:
                for statement, params in statements:
                    connection.execute(statement, params or {})
        except sqlite3.Error as e:
            logger.error(f"Error executing transaction: {str(e)}")
            raise
