"""
Database configuration settings for the OB Order Tracker.
"""
import os
from typing import Any, Dict

from ob_order_tracker.config.app_config import DEFAULT_DB_PATH, DEFAULT_WORKING_DAYS, WORKING_DAYS_SETTING
from ob_order_tracker.utils.logging_config import get_logger

logger = get_logger(__name__)


def get_database_config(db_path: str = None) -> Dict[str, Any]:
    """
    Get SQLite configuration from arguments, environment variables or defaults.

    Args:
        db_path (str): Explicit database file path (overrides the environment)

    Returns:
        Dict[str, Any]: SQLite configuration dictionary
    """
    config = {
        "database": db_path or os.environ.get("OB_TRACKER_DB_PATH", DEFAULT_DB_PATH),
        "timeout": float(os.environ.get("OB_TRACKER_DB_TIMEOUT", "5.0"))
    }

    logger.debug(f"Using SQLite database: {config['database']}")

    return config


SCHEMA_STATEMENTS = [
    """
    CREATE TABLE IF NOT EXISTS drafts (
        id TEXT PRIMARY KEY,
        data TEXT,
        updated_at DATETIME DEFAULT CURRENT_TIMESTAMP
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS submitted_orders (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        date TEXT,
        tsm TEXT,
        town TEXT,
        distributor TEXT,
        order_booker TEXT,
        ob_contact TEXT,
        route TEXT,
        total_shops INTEGER DEFAULT 0,
        visited_shops INTEGER DEFAULT 0,
        productive_shops INTEGER DEFAULT 0,
        category_productive_data TEXT,
        order_data TEXT,
        submitted_at DATETIME DEFAULT CURRENT_TIMESTAMP
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS ob_assignments (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        name TEXT,
        contact TEXT UNIQUE,
        town TEXT,
        distributor TEXT,
        tsm TEXT,
        total_shops INTEGER DEFAULT 0,
        routes TEXT
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS brand_targets (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        ob_contact TEXT,
        brand_name TEXT,
        target_ctn REAL DEFAULT 0,
        UNIQUE(ob_contact, brand_name)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS app_config (
        key TEXT PRIMARY KEY,
        value TEXT
    )
    """
]

DEFAULT_SETTINGS = {
    WORKING_DAYS_SETTING: str(DEFAULT_WORKING_DAYS)
}

# Query templates with named placeholders
ORDER_QUERY_TEMPLATE = """
SELECT
    o.id, o.date, o.tsm, o.town, o.distributor, o.order_booker, o.ob_contact,
    o.route, o.total_shops, o.visited_shops, o.productive_shops,
    o.category_productive_data, o.order_data, o.submitted_at
FROM submitted_orders o
WHERE (:seller_id IS NULL OR o.ob_contact = :seller_id)
  AND (:tsm IS NULL OR o.tsm = :tsm
       OR o.ob_contact IN (SELECT a.contact FROM ob_assignments a WHERE a.tsm = :tsm))
ORDER BY o.submitted_at DESC, o.id DESC
"""

ORDER_INSERT = """
INSERT INTO submitted_orders (
    date, tsm, town, distributor, order_booker, ob_contact, route,
    total_shops, visited_shops, productive_shops, category_productive_data, order_data, submitted_at
) VALUES (
    :date, :tsm, :town, :distributor, :order_booker, :ob_contact, :route,
    :total_shops, :visited_shops, :productive_shops, :category_productive_data, :order_data, :submitted_at
)
"""

SELLER_QUERY_TEMPLATE = """
SELECT id, name, contact, town, distributor, tsm, total_shops, routes
FROM ob_assignments
ORDER BY id
"""

SELLER_UPSERT = """
INSERT INTO ob_assignments (name, contact, town, distributor, tsm, total_shops, routes)
VALUES (:name, :contact, :town, :distributor, :tsm, :total_shops, :routes)
ON CONFLICT(contact) DO UPDATE SET
    name = excluded.name,
    town = excluded.town,
    distributor = excluded.distributor,
    tsm = excluded.tsm,
    total_shops = excluded.total_shops,
    routes = excluded.routes
"""

TARGET_QUERY_TEMPLATE = """
SELECT ob_contact, brand_name, target_ctn
FROM brand_targets
WHERE (:seller_id IS NULL OR ob_contact = :seller_id)
ORDER BY id
"""

TARGET_UPSERT = """
INSERT OR REPLACE INTO brand_targets (ob_contact, brand_name, target_ctn)
VALUES (:seller_id, :category, :target_ctn)
"""

DRAFT_QUERY = "SELECT id, data, updated_at FROM drafts WHERE id = :draft_id"

DRAFT_UPSERT = """
INSERT OR REPLACE INTO drafts (id, data, updated_at)
VALUES (:draft_id, :data, CURRENT_TIMESTAMP)
"""
