"""
Utility package for the order tracker.
"""
from ob_order_tracker.utils.exceptions import ValidationError, RecordNotFoundError
from ob_order_tracker.utils.date_helpers import (
    get_today,
    today_window,
    month_to_date_window,
    parse_order_date,
    format_date,
    get_timestamp_str
)
from ob_order_tracker.utils.logging_config import setup_logging, get_logger
