"""
Validation utilities for order entry and admin input.
"""
from datetime import datetime
from typing import Any, Iterable, List, Optional
import pandas as pd

from ob_order_tracker.analysis.normalization import category_totals
from ob_order_tracker.data.models.catalog import SKU
from ob_order_tracker.data.models.order import Order
from ob_order_tracker.data.models.seller import Seller
from ob_order_tracker.utils.exceptions import ValidationError


def validate_date_format(date_str: str) -> bool:
    """
    Validate that a date string is in YYYY-MM-DD format.

    Args:
        date_str (str): The date string to validate

    Returns:
        bool: True if the date is valid, False otherwise
    """
    try:
        datetime.strptime(date_str, '%Y-%m-%d')
        return True
    except (TypeError, ValueError):
        return False


def validate_target(value: Any) -> float:
    """
    Validate and convert a target value.

    Args:
        value (Any): The entered target

    Returns:
        float: The target as a non-negative number

    Raises:
        ValidationError: If the value is not a number or is negative
    """
    try:
        target = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Target must be a number, got {value!r}", field="target")
    if pd.isna(target) or target < 0:
        raise ValidationError(f"Target must be zero or more, got {value!r}", field="target")
    return target


def validate_category(category: str, categories: Iterable[str]) -> str:
    if category not in list(categories):
        raise ValidationError(f"Unknown brand category: {category}", field="category")
    return category


def validate_order(order: Order, seller: Optional[Seller], catalog: Iterable[SKU]) -> Order:
    """
    Check an order before it is submitted.

    Args:
        order (Order): The order to check
        seller (Optional[Seller]): The directory entry for the order's seller
        catalog (Iterable[SKU]): The SKU catalog

    Returns:
        Order: The same order, when it is valid

    Raises:
        ValidationError: On the first problem found
    """
    catalog = list(catalog)
    skus = {sku.sku_id: sku for sku in catalog}

    if seller is None:
        raise ValidationError(f"Unknown order booker: {order.seller_id}", field="seller_id")
    if not order.route:
        raise ValidationError("Please enter a route name", field="route")
    if seller.routes and not seller.has_route(order.route):
        raise ValidationError(
            f"Route {order.route!r} is not assigned to {seller.seller_id}", field="route"
        )
    if order.order_date is None:
        raise ValidationError(f"Invalid order date: {order.date_text!r}. Use YYYY-MM-DD format.", field="date")

    visits = order.visits
    for name in ("total_shops", "visited_shops", "productive_shops"):
        if getattr(visits, name) < 0:
            raise ValidationError(f"{name} cannot be negative", field=name)
    if visits.productive_shops > visits.visited_shops:
        raise ValidationError("Productive shops cannot exceed visited shops", field="productive_shops")

    for category, count in order.category_productive_shops.items():
        if count < 0:
            raise ValidationError(f"Productive shops for {category} cannot be negative", field=category)

    for sku_id, item in order.items.items():
        sku = skus.get(sku_id)
        if sku is None:
            raise ValidationError(f"Unknown SKU: {sku_id}", field=sku_id)
        for name in ("cartons", "dozens", "pieces"):
            if getattr(item, name) < 0:
                raise ValidationError(f"{sku_id} {name} cannot be negative", field=sku_id)
        if item.dozens and not sku.allows_dozens:
            raise ValidationError(f"{sku.name} cannot be entered in dozens", field=sku_id)

    if sum(category_totals(order, catalog).values()) == 0:
        raise ValidationError("Cannot submit an empty order", field="items")

    return order


def validate_dataframe(df: pd.DataFrame, required_columns: List[str]) -> bool:
    """
    Validate that a DataFrame contains the required columns.

    Args:
        df (pd.DataFrame): The DataFrame to validate
        required_columns (List[str]): List of required column names

    Returns:
        bool: True if all required columns exist, False otherwise
    """
    if df is None or df.empty:
        return False

    missing_columns = [col for col in required_columns if col not in df.columns]
    return len(missing_columns) == 0
