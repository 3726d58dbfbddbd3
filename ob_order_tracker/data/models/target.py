"""
Brand target data models.
"""
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, Tuple


@dataclass(frozen=True)
class TargetEntry:
    """
    Target carton-equivalents for one seller and brand category.
    """
    seller_id: str
    category: str
    target_cartons: float = 0.0


class TargetRegistry:
    """
    In-memory snapshot of targets keyed by (seller id, category).

    Targets carry no history: percentages are computed against whatever the
    registry holds when a report is built.
    """

    def __init__(self, entries: Optional[Iterable[TargetEntry]] = None):
        self._targets: Dict[Tuple[str, str], float] = {}
        for entry in entries or []:
            self.upsert(entry.seller_id, entry.category, entry.target_cartons)

    def get(self, seller_id: str, category: str) -> Optional[float]:
        """Get the target for a seller and category, or None if none is set."""
        return self._targets.get((seller_id, category))

    def upsert(self, seller_id: str, category: str, target_cartons: float) -> TargetEntry:
        self._targets[(seller_id, category)] = float(target_cartons)
        return TargetEntry(seller_id, category, float(target_cartons))

    def for_seller(self, seller_id: str) -> Dict[str, float]:
        """Get all targets for a seller keyed by category."""
        return {
            category: value
            for (sid, category), value in self._targets.items()
            if sid == seller_id
        }

    def entries(self) -> List[TargetEntry]:
        return [TargetEntry(sid, category, value) for (sid, category), value in self._targets.items()]

    def __iter__(self) -> Iterator[TargetEntry]:
        return iter(self.entries())

    def __len__(self) -> int:
        return len(self._targets)

    def __contains__(self, key: Tuple[str, str]) -> bool:
        return key in self._targets
