"""
Database connectors.
"""
from ob_order_tracker.data.connectors.base_connector import BaseConnector
from ob_order_tracker.data.connectors.sqlite_connector import SQLiteConnector
