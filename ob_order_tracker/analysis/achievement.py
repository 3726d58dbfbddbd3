"""
Achievement computations over sets of orders.
"""
from datetime import date
from typing import Dict, Iterable, List, Optional, Sequence

from ob_order_tracker.analysis.normalization import catalog_categories, category_totals
from ob_order_tracker.data.models.catalog import SKU
from ob_order_tracker.data.models.order import Order
from ob_order_tracker.data.models.target import TargetRegistry


def filter_by_window(
    orders: Iterable[Order],
    start: Optional[date] = None,
    end: Optional[date] = None
) -> List[Order]:
    """
    Select the orders dated within an inclusive window.

    With no bounds every order is returned, undated ones included. With
    either bound set, orders without a usable date are left out.

    Args:
        orders (Iterable[Order]): Orders to filter
        start (Optional[date]): First day of the window
        end (Optional[date]): Last day of the window

    Returns:
        List[Order]: Matching orders in their original order
    """
    if start is None and end is None:
        return list(orders)

    selected = []
    for order in orders:
        if order.order_date is None:
            continue
        if start is not None and order.order_date < start:
            continue
        if end is not None and order.order_date > end:
            continue
        selected.append(order)
    return selected


def sum_category_totals(
    orders: Iterable[Order],
    catalog: Sequence[SKU],
    categories: Optional[Sequence[str]] = None
) -> Dict[str, float]:
    """
    Sum the achievement vectors of several orders.

    Args:
        orders (Iterable[Order]): Orders to sum
        catalog (Sequence[SKU]): The SKU catalog
        categories (Optional[Sequence[str]]): Categories to report (defaults to the catalog's)

    Returns:
        Dict[str, float]: Category name to equivalent cartons (zeros for no orders)
    """
    catalog = list(catalog)
    if categories is None:
        categories = catalog_categories(catalog)
    totals = {category: 0.0 for category in categories}
    for order in orders:
        for category, value in category_totals(order, catalog, categories).items():
            totals[category] += value
    return totals


def target_for_seller(seller_id: str, category: str, registry: TargetRegistry) -> float:
    """
    Look up a seller's target for a category.

    Args:
        seller_id (str): Order booker contact
        category (str): Brand category
        registry (TargetRegistry): Current targets

    Returns:
        float: The target, or 0 when none is set
    """
    value = registry.get(seller_id, category)
    return value if value is not None else 0.0


def seller_target_total(seller_id: str, categories: Iterable[str], registry: TargetRegistry) -> float:
    """Sum a seller's targets over the given categories."""
    return sum((target_for_seller(seller_id, category, registry) for category in categories), 0.0)


def category_targets(
    seller_ids: Iterable[str],
    categories: Sequence[str],
    registry: TargetRegistry
) -> Dict[str, float]:
    """
    Sum the targets of several sellers per category.

    Args:
        seller_ids (Iterable[str]): Order booker contacts (duplicates are counted once)
        categories (Sequence[str]): Brand categories
        registry (TargetRegistry): Current targets

    Returns:
        Dict[str, float]: Category name to combined target
    """
    unique_ids = list(dict.fromkeys(seller_ids))
    return {
        category: sum((target_for_seller(sid, category, registry) for sid in unique_ids), 0.0)
        for category in categories
    }
