"""
Report exporters.
"""
from ob_order_tracker.analysis.exporters.csv_exporter import CSVExporter
