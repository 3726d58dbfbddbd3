"""
Seller directory data models.
"""
import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class Seller:
    """
    An order booker with the town, distributor, TSM and routes they cover.
    """
    seller_id: str  # Order booker contact, unique (e.g., "P-01")
    name: str
    town: Optional[str] = None
    distributor: Optional[str] = None
    tsm: Optional[str] = None
    total_shops: int = 0  # Default shop count baseline for visit ratios
    routes: List[str] = field(default_factory=list)
    record_id: Optional[int] = None

    def has_route(self, route: str) -> bool:
        return route in self.routes

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Seller":
        routes = data.get("routes") or []
        if isinstance(routes, str):
            routes = json.loads(routes) if routes.startswith("[") else [r.strip() for r in routes.split(",") if r.strip()]
        record_id = data.get("record_id", data.get("id"))
        return cls(
            seller_id=str(data.get("seller_id", data.get("contact"))),
            name=str(data.get("name", "")),
            town=data.get("town"),
            distributor=data.get("distributor"),
            tsm=data.get("tsm") or None,
            total_shops=int(data.get("total_shops", data.get("totalShops")) or 0),
            routes=[str(r) for r in routes],
            record_id=int(record_id) if record_id is not None else None
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "record_id": self.record_id,
            "seller_id": self.seller_id,
            "name": self.name,
            "town": self.town,
            "distributor": self.distributor,
            "tsm": self.tsm,
            "total_shops": self.total_shops,
            "routes": list(self.routes)
        }
