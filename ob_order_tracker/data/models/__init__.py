"""
Typed records for the catalog, orders, sellers, targets and reports.
"""
from ob_order_tracker.data.models.catalog import SKU
from ob_order_tracker.data.models.order import Order, OrderFilter, OrderItem, VisitCounts
from ob_order_tracker.data.models.seller import Seller
from ob_order_tracker.data.models.target import TargetEntry, TargetRegistry
from ob_order_tracker.data.models.report import (
    AchievementReport,
    AchievementSummary,
    CategoryAchievement,
    RouteRollup,
    SellerRollup,
    TSMRollup,
    achievement_percentage
)
