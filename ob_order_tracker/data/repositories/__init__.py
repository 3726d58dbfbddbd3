"""
Repositories over the order database and the SKU catalog.
"""
from ob_order_tracker.data.repositories.catalog_repository import CatalogRepository
from ob_order_tracker.data.repositories.draft_repository import DraftRepository
from ob_order_tracker.data.repositories.order_repository import OrderRepository
from ob_order_tracker.data.repositories.seller_repository import SellerRepository
from ob_order_tracker.data.repositories.settings_repository import SettingsRepository
from ob_order_tracker.data.repositories.target_repository import TargetRepository
