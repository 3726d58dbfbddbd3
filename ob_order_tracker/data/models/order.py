"""
Order data models.
"""
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, Optional

from ob_order_tracker.utils.date_helpers import format_date, parse_order_date
from ob_order_tracker.utils.exceptions import ValidationError


def _as_int(value: Any, field_name: str) -> int:
    """Coerce a form value to int; blanks count as zero."""
    if value is None or value == "":
        return 0
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a whole number, got {value!r}", field=field_name)
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a whole number, got {value!r}", field=field_name)
    if not number.is_integer():
        raise ValidationError(f"{field_name} must be a whole number, got {value!r}", field=field_name)
    return int(number)


@dataclass
class OrderItem:
    """
    Quantity entered for one SKU.
    """
    sku_id: str
    cartons: int = 0
    dozens: int = 0
    pieces: int = 0

    @property
    def is_empty(self) -> bool:
        return self.cartons == 0 and self.dozens == 0 and self.pieces == 0

    @classmethod
    def from_dict(cls, sku_id: str, data: Dict[str, Any]) -> "OrderItem":
        # Accept both the long names and the ctn/dzn/pks form field names
        return cls(
            sku_id=str(data.get("sku_id", data.get("skuId", sku_id))),
            cartons=_as_int(data.get("cartons", data.get("ctn")), f"{sku_id}.cartons"),
            dozens=_as_int(data.get("dozens", data.get("dzn")), f"{sku_id}.dozens"),
            pieces=_as_int(data.get("pieces", data.get("pks")), f"{sku_id}.pieces")
        )

    def to_dict(self) -> Dict[str, int]:
        return {"cartons": self.cartons, "dozens": self.dozens, "pieces": self.pieces}


@dataclass
class VisitCounts:
    """
    Shop visit figures for a route day, or an accumulation of them.
    """
    total_shops: int = 0
    visited_shops: int = 0
    productive_shops: int = 0

    def __add__(self, other: "VisitCounts") -> "VisitCounts":
        return VisitCounts(
            total_shops=self.total_shops + other.total_shops,
            visited_shops=self.visited_shops + other.visited_shops,
            productive_shops=self.productive_shops + other.productive_shops
        )

    @property
    def non_productive_shops(self) -> int:
        return max(0, self.visited_shops - self.productive_shops)

    @property
    def productivity_pct(self) -> float:
        """Productive shops as a percentage of visited shops."""
        if self.visited_shops <= 0:
            return 0.0
        return self.productive_shops / self.visited_shops * 100

    @property
    def coverage_pct(self) -> float:
        """Visited shops as a percentage of the route's total shops."""
        if self.total_shops <= 0:
            return 0.0
        return self.visited_shops / self.total_shops * 100


@dataclass
class Order:
    """
    An order booker's submission for one route day.

    ``order_date`` is None when the date was missing or could not be parsed;
    the raw value is kept in ``date_text``.
    """
    seller_id: str
    route: Optional[str] = None
    order_date: Optional[date] = None
    visits: VisitCounts = field(default_factory=VisitCounts)
    category_productive_shops: Dict[str, int] = field(default_factory=dict)
    items: Dict[str, OrderItem] = field(default_factory=dict)
    order_booker: Optional[str] = None
    tsm: Optional[str] = None
    town: Optional[str] = None
    distributor: Optional[str] = None
    date_text: Optional[str] = None
    order_id: Optional[int] = None
    submitted_at: Optional[datetime] = None

    def __post_init__(self):
        if self.date_text is None and self.order_date is not None:
            self.date_text = format_date(self.order_date)

    @property
    def is_submitted(self) -> bool:
        return self.order_id is not None

    def item_for(self, sku_id: str) -> OrderItem:
        """
        Get the item entered for a SKU.

        Args:
            sku_id (str): The SKU identifier

        Returns:
            OrderItem: The entered item, or an all-zero item if nothing was entered
        """
        item = self.items.get(sku_id)
        if item is None:
            return OrderItem(sku_id=sku_id)
        return item

    def set_quantity(self, sku_id: str, cartons: int = 0, dozens: int = 0, pieces: int = 0) -> OrderItem:
        """Set the quantities entered for a SKU, replacing any earlier entry."""
        item = OrderItem(sku_id=sku_id, cartons=cartons, dozens=dozens, pieces=pieces)
        self.items[sku_id] = item
        return item

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Order":
        """
        Build an Order from a deserialized record.

        Field names from both the storage rows (snake_case) and the entry form
        (camelCase, ctn/dzn/pks quantities) are accepted.

        Args:
            data (Dict[str, Any]): The raw order record

        Returns:
            Order: The typed order

        Raises:
            ValidationError: If the seller id is missing or a quantity is not a whole number
        """
        seller_id = data.get("seller_id", data.get("obContact", data.get("ob_contact")))
        if not seller_id:
            raise ValidationError("Order is missing the order booker contact", field="seller_id")

        raw_date = data.get("order_date", data.get("date"))
        raw_items = data.get("items", data.get("order_data")) or {}
        items = {}
        for sku_id, raw_item in raw_items.items():
            items[str(sku_id)] = OrderItem.from_dict(str(sku_id), raw_item or {})

        category_shops = data.get(
            "category_productive_shops",
            data.get("categoryProductiveShops", data.get("category_productive_data"))
        ) or {}

        visits = VisitCounts(
            total_shops=_as_int(data.get("total_shops", data.get("totalShops")), "total_shops"),
            visited_shops=_as_int(data.get("visited_shops", data.get("visitedShops")), "visited_shops"),
            productive_shops=_as_int(data.get("productive_shops", data.get("productiveShops")), "productive_shops")
        )

        submitted_at = data.get("submitted_at")
        if isinstance(submitted_at, str):
            try:
                submitted_at = datetime.fromisoformat(submitted_at)
            except ValueError:
                submitted_at = None

        order_id = data.get("order_id", data.get("id"))

        return cls(
            seller_id=str(seller_id),
            route=data.get("route") or None,
            order_date=parse_order_date(raw_date),
            visits=visits,
            category_productive_shops={
                str(cat): _as_int(count, f"category_productive_shops.{cat}")
                for cat, count in category_shops.items()
            },
            items=items,
            order_booker=data.get("order_booker", data.get("orderBooker")),
            tsm=data.get("tsm") or None,
            town=data.get("town"),
            distributor=data.get("distributor"),
            date_text=str(raw_date) if raw_date is not None and not isinstance(raw_date, date) else None,
            order_id=int(order_id) if order_id is not None else None,
            submitted_at=submitted_at if isinstance(submitted_at, datetime) else None
        )

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize the order to a JSON-compatible record.

        Returns:
            Dict[str, Any]: The order as plain data
        """
        return {
            "order_id": self.order_id,
            "seller_id": self.seller_id,
            "order_booker": self.order_booker,
            "tsm": self.tsm,
            "town": self.town,
            "distributor": self.distributor,
            "route": self.route,
            "date": format_date(self.order_date) if self.order_date else self.date_text,
            "total_shops": self.visits.total_shops,
            "visited_shops": self.visits.visited_shops,
            "productive_shops": self.visits.productive_shops,
            "category_productive_shops": dict(self.category_productive_shops),
            "items": {sku_id: item.to_dict() for sku_id, item in self.items.items()},
            "submitted_at": self.submitted_at.isoformat() if self.submitted_at else None
        }


@dataclass
class OrderFilter:
    """
    Represents filtering criteria for order queries.
    """
    seller_id: Optional[str] = None
    tsm: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
