"""
Route-level achievement analyzer.
"""
from typing import List
import pandas as pd

from ob_order_tracker.analysis.base_analyzer import BaseAnalyzer, TOTAL_COLUMN
from ob_order_tracker.analysis.rollup.seller_analyzer import visits_of
from ob_order_tracker.data.models.report import RouteRollup


class RouteAnalyzer(BaseAnalyzer):
    """
    Analyzer for achievement and shop visits per route name.
    """

    def analyze(self, achievement_data: pd.DataFrame, **kwargs) -> List[RouteRollup]:
        """
        Roll achievement up by route; orders without a route fall under "Unknown".

        Args:
            achievement_data (pd.DataFrame): Frame from prepare_data
            **kwargs: Additional arguments (unused)

        Returns:
            List[RouteRollup]: Roll-ups sorted by achievement, highest first
        """
        result = [
            RouteRollup(
                route_name=route,
                achievement=float(route_group[TOTAL_COLUMN].sum()),
                visits=visits_of(route_group),
                order_count=len(route_group)
            )
            for route, route_group in achievement_data.groupby('route', sort=False)
        ]
        return sorted(result, key=lambda rollup: rollup.achievement, reverse=True)

    def prepare_output_dataframe(self, rollups: List[RouteRollup]) -> pd.DataFrame:
        columns = ['ROUTE', 'ACHIEVEMENT', 'ORDERS', 'TOTAL_SHOPS', 'VISITED', 'PRODUCTIVE', 'PRODUCTIVITY_PCT']
        data = [
            {
                'ROUTE': rollup.route_name,
                'ACHIEVEMENT': round(rollup.achievement, 3),
                'ORDERS': rollup.order_count,
                'TOTAL_SHOPS': rollup.visits.total_shops,
                'VISITED': rollup.visits.visited_shops,
                'PRODUCTIVE': rollup.visits.productive_shops,
                'PRODUCTIVITY_PCT': round(rollup.visits.productivity_pct, 1)
            }
            for rollup in rollups
        ]
        return pd.DataFrame(data, columns=columns)
