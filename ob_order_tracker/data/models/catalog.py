"""
Product catalog data models.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class SKU:
    """
    Represents a sellable SKU with its packing ratios.
    """
    sku_id: str
    name: str
    category: str  # Brand category (e.g., "Kite Glow")
    units_per_carton: int  # Pieces in one carton
    units_per_dozen: int = 0  # Pieces in one dozen pack; 0 means dozen entry is not allowed
    price_per_carton: Optional[float] = None

    @property
    def allows_dozens(self) -> bool:
        return self.units_per_dozen > 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SKU":
        """
        Build a SKU from a catalog record.

        Args:
            data (Dict[str, Any]): Record with id, name, category and packing ratios

        Returns:
            SKU: The catalog entry
        """
        price = data.get("price_per_carton", data.get("pricePerCarton"))
        return cls(
            sku_id=str(data.get("sku_id", data.get("id"))),
            name=str(data.get("name", "")),
            category=str(data["category"]),
            units_per_carton=int(data.get("units_per_carton", data.get("unitsPerCarton", 0)) or 0),
            units_per_dozen=int(data.get("units_per_dozen", data.get("unitsPerDozen", 0)) or 0),
            price_per_carton=float(price) if price is not None else None
        )
