"""
Application-wide configuration settings for the OB Order Tracker.
"""
import os
from typing import List

# Default settings
DEFAULT_DB_PATH = os.environ.get("OB_TRACKER_DB_PATH", "orders.db")
DEFAULT_WORKING_DAYS = int(os.environ.get("OB_TRACKER_WORKING_DAYS", "25"))
DEFAULT_DRAFT_ID = os.environ.get("OB_TRACKER_DRAFT_ID", "current_draft")

# Settings persisted in the app_config table
WORKING_DAYS_SETTING = "total_working_days"

# Brand categories in display order
CATEGORIES: List[str] = [
    "Kite Glow",
    "Burq Action",
    "Vero",
    "Washing Powder",
    "DWB",
    "Match"
]

# Group names for orders and sellers with missing dimensions
UNKNOWN_ROUTE = "Unknown"
UNASSIGNED_TSM = "Unassigned"

# Roll-up levels
ROLLUP_LEVELS = ["seller", "tsm", "route"]

# Visualization settings
DEFAULT_CHART_HEIGHT = 450
