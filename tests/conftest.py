"""
Shared fixtures for the order tracker tests.
"""
import os
import tempfile
from datetime import date

# Keep log files out of the working tree; must run before the package is imported
os.environ.setdefault("OB_TRACKER_LOG_DIR", tempfile.mkdtemp(prefix="ob_tracker_logs_"))

import pytest

from ob_order_tracker.data.models import Order, OrderItem, SKU, Seller, TargetRegistry, VisitCounts
from ob_order_tracker.data.repositories.catalog_repository import CatalogRepository
from ob_order_tracker.main import OrderTrackerApp

AS_OF = date(2024, 5, 20)


@pytest.fixture
def as_of():
    return AS_OF


@pytest.fixture
def catalog():
    """The built-in SKU catalog."""
    return CatalogRepository().get_all()


@pytest.fixture
def small_catalog():
    """Two single-SKU categories where one carton is one piece."""
    return [
        SKU("a-1", "Alpha", "A", units_per_carton=1),
        SKU("b-1", "Beta", "B", units_per_carton=1),
    ]


@pytest.fixture
def sellers():
    return [
        Seller("P-01", "Muhammad Bilal", town="Peshawar", distributor="Peshawar Dist",
               tsm="Muhammad Shoaib", total_shops=45, routes=["Route 1", "Route 2"]),
        Seller("P-02", "Khizar Hayat", town="Peshawar", distributor="Peshawar Dist",
               tsm="Muhammad Shoaib", total_shops=40, routes=["Route 1"]),
        Seller("M-01", "Asad Ali", town="Mardan", distributor="Mardan Dist",
               tsm="Imran Khan", total_shops=50, routes=["Route 1"]),
    ]


@pytest.fixture
def registry():
    registry = TargetRegistry()
    registry.upsert("P-01", "Kite Glow", 10.0)
    registry.upsert("P-01", "Vero", 5.0)
    registry.upsert("P-02", "Kite Glow", 20.0)
    registry.upsert("M-01", "DWB", 8.0)
    return registry


def make_order(seller_id, order_date, items, route="Route 1", visits=None, **kwargs):
    """Build an order from {sku_id: (cartons, dozens, pieces)}."""
    return Order(
        seller_id=seller_id,
        route=route,
        order_date=order_date,
        visits=visits or VisitCounts(total_shops=40, visited_shops=30, productive_shops=20),
        items={
            sku_id: OrderItem(sku_id, cartons=c, dozens=d, pieces=p)
            for sku_id, (c, d, p) in items.items()
        },
        **kwargs
    )


@pytest.fixture
def orders():
    """Orders for May 2024 plus one from April."""
    return [
        make_order("P-01", date(2024, 5, 20), {"kg-10": (2, 3, 6)}, order_id=1),
        make_order("P-01", date(2024, 5, 10), {"v-5kg": (1, 0, 2)}, route="Route 2", order_id=2),
        make_order("P-02", date(2024, 5, 20), {"kg-20": (3, 0, 0), "dwb-reg": (1, 0, 0)}, order_id=3),
        make_order("M-01", date(2024, 5, 15), {"dwb-reg": (0, 2, 0)}, order_id=4),
        make_order("M-01", date(2024, 4, 28), {"dwb-reg": (5, 0, 0)}, order_id=5),
    ]


@pytest.fixture
def app(tmp_path, sellers):
    """An application over a temporary SQLite database with a known directory."""
    app = OrderTrackerApp(db_path=str(tmp_path / "orders.db"), seed=False)
    for seller in sellers:
        app.save_seller(seller)
    yield app
    app.close()


@pytest.fixture
def order_factory():
    return make_order
