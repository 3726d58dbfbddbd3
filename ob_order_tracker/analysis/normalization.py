"""
Unit normalization: converts carton/dozen/piece entries into equivalent cartons.
"""
from typing import Dict, Iterable, List, Optional, Sequence

from ob_order_tracker.data.models.catalog import SKU
from ob_order_tracker.data.models.order import Order, OrderItem


def total_pieces(item: OrderItem, sku: SKU) -> int:
    """
    Count the individual pieces an entry represents.

    Args:
        item (OrderItem): The entered quantities
        sku (SKU): The SKU's catalog entry

    Returns:
        int: cartons * units_per_carton + dozens * units_per_dozen + pieces
    """
    return (
        item.cartons * sku.units_per_carton
        + item.dozens * sku.units_per_dozen
        + item.pieces
    )


def normalized_quantity(item: OrderItem, sku: SKU) -> float:
    """
    Convert an entry into equivalent cartons.

    Args:
        item (OrderItem): The entered quantities
        sku (SKU): The SKU's catalog entry

    Returns:
        float: Pieces divided by units_per_carton, or 0 for a SKU with no carton size
    """
    if sku.units_per_carton == 0:
        return 0.0
    return total_pieces(item, sku) / sku.units_per_carton


def catalog_categories(catalog: Iterable[SKU]) -> List[str]:
    """
    List the brand categories present in a catalog, in first-seen order.

    Args:
        catalog (Iterable[SKU]): The SKU catalog

    Returns:
        List[str]: Unique category names
    """
    categories = []
    for sku in catalog:
        if sku.category not in categories:
            categories.append(sku.category)
    return categories


def category_total(order: Order, category: str, catalog: Iterable[SKU]) -> float:
    """
    Sum the equivalent cartons an order books in one brand category.

    SKUs with no entry in the order count as zero.

    Args:
        order (Order): The order
        category (str): Brand category name
        catalog (Iterable[SKU]): The SKU catalog

    Returns:
        float: Equivalent cartons for the category
    """
    return sum(
        (normalized_quantity(order.item_for(sku.sku_id), sku)
         for sku in catalog if sku.category == category),
        0.0
    )


def category_totals(
    order: Order,
    catalog: Iterable[SKU],
    categories: Optional[Sequence[str]] = None
) -> Dict[str, float]:
    """
    Compute the achievement vector of an order: equivalent cartons per category.

    Args:
        order (Order): The order
        catalog (Iterable[SKU]): The SKU catalog
        categories (Optional[Sequence[str]]): Categories to report (defaults to the catalog's)

    Returns:
        Dict[str, float]: Category name to equivalent cartons
    """
    catalog = list(catalog)
    if categories is None:
        categories = catalog_categories(catalog)
    return {
        category: category_total(order, category, catalog)
        for category in categories
    }
