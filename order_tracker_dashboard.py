#!/usr/bin/env python3
"""
Streamlit entry point for the OB achievement dashboard.

Run with: streamlit run order_tracker_dashboard.py
"""
import os
import runpy
import sys

if __name__ == "__main__":
    current_dir = os.path.dirname(os.path.abspath(__file__))
    app_path = os.path.join(current_dir, "ob_order_tracker", "ui", "streamlit_app.py")

    if current_dir not in sys.path:
        sys.path.insert(0, current_dir)

    runpy.run_path(app_path, run_name="__main__")
