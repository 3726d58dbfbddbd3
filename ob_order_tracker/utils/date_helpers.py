"""
Date helper utilities for order reporting.
"""
from datetime import date, datetime
from typing import Any, Optional, Tuple


def get_today() -> date:
    """
    Get the current local date.

    Returns:
        date: Today's date
    """
    return datetime.now().date()


def today_window(as_of: Optional[date] = None) -> Tuple[date, date]:
    """
    Get the single-day reporting window ending on the given date.

    Args:
        as_of (Optional[date]): Reference date (defaults to today)

    Returns:
        Tuple[date, date]: Inclusive (start, end) window
    """
    as_of = as_of or get_today()
    return as_of, as_of


def month_to_date_window(as_of: Optional[date] = None) -> Tuple[date, date]:
    """
    Get the month-to-date window: day 1 of the month through the given date.

    Args:
        as_of (Optional[date]): Reference date (defaults to today)

    Returns:
        Tuple[date, date]: Inclusive (start, end) window
    """
    as_of = as_of or get_today()
    return as_of.replace(day=1), as_of


def parse_order_date(value: Any) -> Optional[date]:
    """
    Parse an order date leniently.

    Accepts a date, a datetime, or a string starting with YYYY-MM-DD
    (ISO timestamps are truncated to their date part).

    Args:
        value (Any): The raw date value

    Returns:
        Optional[date]: The parsed date, or None if missing or unparsable
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None

    text = value.strip()[:10]
    try:
        return datetime.strptime(text, '%Y-%m-%d').date()
    except ValueError:
        return None


def format_date(value: Optional[date]) -> str:
    """Format a date as YYYY-MM-DD, or an empty string when missing."""
    return value.strftime('%Y-%m-%d') if value else ""


def get_timestamp_str() -> str:
    """
    Get a timestamp string for filenames.

    Returns:
        str: Timestamp string (YYYYMMDD_HHMMSS)
    """
    return datetime.now().strftime("%Y%m%d_%H%M%S")
