"""
OB Order Tracker Package.

This package captures field sales orders from order bookers, normalizes
carton/dozen/piece quantities to equivalent cartons and reports achievement
against monthly brand targets.
"""
from ob_order_tracker.main import run_report

__version__ = "1.0.0"
