"""
Seller-level achievement analyzer.
"""
from typing import List
import pandas as pd

from ob_order_tracker.analysis.achievement import seller_target_total
from ob_order_tracker.analysis.base_analyzer import BaseAnalyzer, TOTAL_COLUMN
from ob_order_tracker.data.models.order import VisitCounts
from ob_order_tracker.data.models.report import SellerRollup
from ob_order_tracker.utils.logging_config import get_logger

logger = get_logger(__name__)


def visits_of(group: pd.DataFrame) -> VisitCounts:
    """Accumulate the visit columns of a group of order rows."""
    return VisitCounts(
        total_shops=int(group['total_shops'].sum()),
        visited_shops=int(group['visited_shops'].sum()),
        productive_shops=int(group['productive_shops'].sum())
    )


class SellerAnalyzer(BaseAnalyzer):
    """
    Analyzer for per-order-booker achievement.
    """

    def analyze(self, achievement_data: pd.DataFrame, **kwargs) -> List[SellerRollup]:
        """
        Roll achievement up by seller.

        Args:
            achievement_data (pd.DataFrame): Frame from prepare_data
            **kwargs: Additional arguments, including:
                include_idle (bool): Also list directory sellers with no orders

        Returns:
            List[SellerRollup]: Roll-ups sorted by total achievement, highest first
        """
        result = []

        for seller_id, seller_group in achievement_data.groupby('seller_id', sort=False):
            seller = self.sellers.get(seller_id)
            result.append(SellerRollup(
                seller_id=seller_id,
                name=seller.name if seller else None,
                tsm=self.tsm_for(seller_id, seller_group['tsm'].iloc[0]),
                category_totals=self.sum_categories(seller_group),
                total_achievement=float(seller_group[TOTAL_COLUMN].sum()),
                total_target=seller_target_total(seller_id, self.categories, self.registry),
                visits=visits_of(seller_group),
                order_count=len(seller_group)
            ))

        if kwargs.get('include_idle'):
            seen = {rollup.seller_id for rollup in result}
            for seller_id, seller in self.sellers.items():
                if seller_id in seen:
                    continue
                result.append(SellerRollup(
                    seller_id=seller_id,
                    name=seller.name,
                    tsm=self.tsm_for(seller_id),
                    category_totals={category: 0.0 for category in self.categories},
                    total_target=seller_target_total(seller_id, self.categories, self.registry)
                ))

        # sorted() is stable with reverse=True, so ties keep input order
        result = sorted(result, key=lambda rollup: rollup.total_achievement, reverse=True)
        logger.debug(f"Generated {len(result)} seller roll-ups.")
        return result

    def prepare_output_dataframe(self, rollups: List[SellerRollup]) -> pd.DataFrame:
        columns = (
            ['SELLER_ID', 'NAME', 'TSM'] + self.categories
            + ['ACHIEVEMENT', 'TARGET', 'PERCENTAGE', 'ORDERS', 'VISITED', 'PRODUCTIVE']
        )
        data = []
        for rollup in rollups:
            row = {'SELLER_ID': rollup.seller_id, 'NAME': rollup.name, 'TSM': rollup.tsm}
            for category in self.categories:
                row[category] = round(rollup.category_totals.get(category, 0.0), 3)
            row.update({
                'ACHIEVEMENT': round(rollup.total_achievement, 3),
                'TARGET': round(rollup.total_target, 2),
                'PERCENTAGE': round(rollup.percentage, 2),
                'ORDERS': rollup.order_count,
                'VISITED': rollup.visits.visited_shops,
                'PRODUCTIVE': rollup.visits.productive_shops
            })
            data.append(row)
        return pd.DataFrame(data, columns=columns)
