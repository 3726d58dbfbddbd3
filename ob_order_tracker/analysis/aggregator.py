"""
Achievement aggregation: roll-ups and the global summary for the reporting views.
"""
from datetime import date
from typing import Iterable, List, Optional, Sequence

from ob_order_tracker.analysis.achievement import (
    category_targets,
    filter_by_window,
    sum_category_totals,
    target_for_seller
)
from ob_order_tracker.analysis.normalization import catalog_categories
from ob_order_tracker.analysis.rollup import RouteAnalyzer, SellerAnalyzer, TSMAnalyzer
from ob_order_tracker.config.app_config import DEFAULT_WORKING_DAYS
from ob_order_tracker.data.models.catalog import SKU
from ob_order_tracker.data.models.order import Order, VisitCounts
from ob_order_tracker.data.models.report import (
    AchievementSummary,
    CategoryAchievement,
    RouteRollup,
    SellerRollup,
    TSMRollup,
    achievement_percentage
)
from ob_order_tracker.data.models.seller import Seller
from ob_order_tracker.data.models.target import TargetRegistry
from ob_order_tracker.utils.date_helpers import month_to_date_window, today_window

__all__ = [
    'achievement_percentage',
    'filter_by_window',
    'rollup_by_route',
    'rollup_by_seller',
    'rollup_by_tsm',
    'sum_category_totals',
    'summarize',
    'target_for_seller'
]


def rollup_by_seller(
    orders: Iterable[Order],
    catalog: Sequence[SKU],
    sellers: Iterable[Seller],
    registry: TargetRegistry,
    include_idle: bool = False,
    categories: Optional[Sequence[str]] = None
) -> List[SellerRollup]:
    """
    Group orders by seller and total their achievement, target and visits.

    Args:
        orders (Iterable[Order]): Orders in the reporting window
        catalog (Sequence[SKU]): The SKU catalog
        sellers (Iterable[Seller]): The seller directory
        registry (TargetRegistry): Current targets
        include_idle (bool): Also list directory sellers with no orders
        categories (Optional[Sequence[str]]): Categories to report

    Returns:
        List[SellerRollup]: Highest achievement first
    """
    analyzer = SellerAnalyzer(catalog, sellers, registry, categories)
    return analyzer.run(orders, include_idle=include_idle)


def rollup_by_tsm(
    orders: Iterable[Order],
    catalog: Sequence[SKU],
    sellers: Iterable[Seller],
    registry: TargetRegistry,
    categories: Optional[Sequence[str]] = None
) -> List[TSMRollup]:
    """
    Group sellers by TSM and total the achievement and targets of each team.

    Returns:
        List[TSMRollup]: Highest achievement first
    """
    return TSMAnalyzer(catalog, sellers, registry, categories).run(orders)


def rollup_by_route(
    orders: Iterable[Order],
    catalog: Sequence[SKU],
    categories: Optional[Sequence[str]] = None
) -> List[RouteRollup]:
    """Group orders by route name and total achievement and visits."""
    return RouteAnalyzer(catalog, categories=categories).run(orders)


def _category_rows(achieved, targets, categories) -> List[CategoryAchievement]:
    return [
        CategoryAchievement(category=category, achievement=achieved[category], target=targets[category])
        for category in categories
    ]


def summarize(
    orders: Iterable[Order],
    catalog: Sequence[SKU],
    sellers: Iterable[Seller],
    registry: TargetRegistry,
    as_of: date,
    working_days: int = DEFAULT_WORKING_DAYS,
    categories: Optional[Sequence[str]] = None
) -> AchievementSummary:
    """
    Build the global achievement summary for today and month-to-date.

    Targets are monthly and both today and month-to-date rows compare against
    the full target. One working day's share of it is on ``daily_target``.

    Args:
        orders (Iterable[Order]): All orders available to the report
        catalog (Sequence[SKU]): The SKU catalog
        sellers (Iterable[Seller]): The seller directory
        registry (TargetRegistry): Current targets
        as_of (date): The reporting date
        working_days (int): Working days in the month
        categories (Optional[Sequence[str]]): Categories to report

    Returns:
        AchievementSummary: Today and MTD figures per category
    """
    orders = list(orders)
    catalog = list(catalog)
    if categories is None:
        categories = catalog_categories(catalog)

    today_orders = filter_by_window(orders, *today_window(as_of))
    mtd_orders = filter_by_window(orders, *month_to_date_window(as_of))

    seller_ids = [seller.seller_id for seller in sellers] + [order.seller_id for order in mtd_orders]
    targets = category_targets(seller_ids, categories, registry)

    mtd_visits = VisitCounts()
    for order in mtd_orders:
        mtd_visits = mtd_visits + order.visits

    return AchievementSummary(
        as_of=as_of,
        today=_category_rows(sum_category_totals(today_orders, catalog, categories), targets, categories),
        month_to_date=_category_rows(sum_category_totals(mtd_orders, catalog, categories), targets, categories),
        mtd_visits=mtd_visits,
        working_days=working_days,
        days_worked=len({order.order_date for order in mtd_orders})
    )
