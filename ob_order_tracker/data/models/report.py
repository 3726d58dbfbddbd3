"""
Achievement report data models.
"""
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional

from ob_order_tracker.data.models.order import VisitCounts


def achievement_percentage(achievement: float, target: float) -> float:
    """
    Achievement as a percentage of target.

    Args:
        achievement (float): Achieved carton-equivalents
        target (float): Target carton-equivalents

    Returns:
        float: achievement / target * 100, or 0 when there is no positive target
    """
    if target > 0:
        return achievement / target * 100
    return 0.0


@dataclass
class CategoryAchievement:
    """
    Achievement against target for one brand category.
    """
    category: str
    achievement: float = 0.0
    target: float = 0.0

    @property
    def percentage(self) -> float:
        return achievement_percentage(self.achievement, self.target)


@dataclass
class SellerRollup:
    """
    Achievement of one order booker over a window.
    """
    seller_id: str
    name: Optional[str] = None
    tsm: Optional[str] = None
    category_totals: Dict[str, float] = field(default_factory=dict)
    total_achievement: float = 0.0
    total_target: float = 0.0
    visits: VisitCounts = field(default_factory=VisitCounts)
    order_count: int = 0

    @property
    def percentage(self) -> float:
        return achievement_percentage(self.total_achievement, self.total_target)


@dataclass
class TSMRollup:
    """
    Achievement of all order bookers reporting to one TSM.
    """
    tsm_name: str
    ob_count: int = 0
    category_totals: Dict[str, float] = field(default_factory=dict)
    total_achievement: float = 0.0
    total_target: float = 0.0
    visits: VisitCounts = field(default_factory=VisitCounts)

    @property
    def percentage(self) -> float:
        return achievement_percentage(self.total_achievement, self.total_target)


@dataclass
class RouteRollup:
    """
    Achievement and visits on one route name.
    """
    route_name: str
    achievement: float = 0.0
    visits: VisitCounts = field(default_factory=VisitCounts)
    order_count: int = 0


@dataclass
class AchievementSummary:
    """
    Global achievement for today and month-to-date.
    """
    as_of: date
    today: List[CategoryAchievement] = field(default_factory=list)
    month_to_date: List[CategoryAchievement] = field(default_factory=list)
    mtd_visits: VisitCounts = field(default_factory=VisitCounts)
    working_days: int = 0
    days_worked: int = 0

    @property
    def total_target(self) -> float:
        return sum(row.target for row in self.month_to_date)

    @property
    def today_achievement(self) -> float:
        return sum(row.achievement for row in self.today)

    @property
    def mtd_achievement(self) -> float:
        return sum(row.achievement for row in self.month_to_date)

    @property
    def mtd_percentage(self) -> float:
        return achievement_percentage(self.mtd_achievement, self.total_target)

    @property
    def daily_target(self) -> float:
        """One working day's share of the monthly target."""
        if self.working_days <= 0:
            return 0.0
        return self.total_target / self.working_days

    @property
    def daily_percentage(self) -> float:
        return achievement_percentage(self.today_achievement, self.daily_target)

    @property
    def remaining_working_days(self) -> int:
        return max(self.working_days - self.days_worked, 0)

    @property
    def required_daily_rate(self) -> float:
        """Carton-equivalents needed per remaining working day to close the target."""
        remaining = max(self.total_target - self.mtd_achievement, 0.0)
        if self.remaining_working_days <= 0:
            return 0.0
        return remaining / self.remaining_working_days


@dataclass
class AchievementReport:
    """
    Everything shown on the reporting views for one window.
    """
    summary: AchievementSummary
    sellers: List[SellerRollup] = field(default_factory=list)
    tsms: List[TSMRollup] = field(default_factory=list)
    routes: List[RouteRollup] = field(default_factory=list)
    start_date: Optional[date] = None
    end_date: Optional[date] = None
