#!/usr/bin/env python3
"""
CLI entry point for the OB Order Tracker.
"""
import sys
from ob_order_tracker.cli.order_tracker_cli import main

if __name__ == "__main__":
    sys.exit(main())
