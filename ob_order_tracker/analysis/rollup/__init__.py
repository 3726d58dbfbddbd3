"""
Achievement roll-up analysis package.
"""
from ob_order_tracker.analysis.rollup.seller_analyzer import SellerAnalyzer
from ob_order_tracker.analysis.rollup.tsm_analyzer import TSMAnalyzer
from ob_order_tracker.analysis.rollup.route_analyzer import RouteAnalyzer
