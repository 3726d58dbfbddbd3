"""
Filter components for Streamlit UI.
"""
import datetime
from typing import List, Optional, Tuple

import streamlit as st

from ob_order_tracker.utils.date_helpers import month_to_date_window


def create_date_filters(today: datetime.date) -> Tuple[datetime.date, datetime.date, datetime.date, bool]:
    """
    Create the reporting date widgets.

    Args:
        today (datetime.date): Default reporting date

    Returns:
        Tuple: (as-of date, window start, window end, all-time flag)
    """
    as_of = st.sidebar.date_input("As of", value=today)
    default_start, default_end = month_to_date_window(as_of)

    all_time = st.sidebar.checkbox("All orders", value=False, help="Ignore the date window")
    start_date = st.sidebar.date_input("From", value=default_start, disabled=all_time)
    end_date = st.sidebar.date_input("To", value=default_end, disabled=all_time)

    return as_of, start_date, end_date, all_time


def create_tsm_filter(tsms: List[str]) -> Optional[str]:
    """
    Create a TSM filter widget.

    Args:
        tsms (List[str]): Known TSM names

    Returns:
        Optional[str]: Selected TSM, or None for all
    """
    options = ['ALL'] + sorted(tsms)
    selected = st.sidebar.selectbox("TSM", options=options)
    return None if selected == 'ALL' else selected
