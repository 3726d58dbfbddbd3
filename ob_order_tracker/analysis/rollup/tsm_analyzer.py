"""
TSM-level achievement analyzer.
"""
from typing import Dict, List
import pandas as pd

from ob_order_tracker.analysis.achievement import seller_target_total
from ob_order_tracker.analysis.base_analyzer import BaseAnalyzer, TOTAL_COLUMN
from ob_order_tracker.analysis.rollup.seller_analyzer import visits_of
from ob_order_tracker.data.models.order import VisitCounts
from ob_order_tracker.data.models.report import TSMRollup
from ob_order_tracker.utils.logging_config import get_logger

logger = get_logger(__name__)


class TSMAnalyzer(BaseAnalyzer):
    """
    Analyzer for territory sales manager achievement.
    """

    def members(self, achievement_data: pd.DataFrame) -> Dict[str, List[str]]:
        """
        Map each TSM to the distinct sellers reporting to them.

        Directory sellers are members whether or not they booked orders;
        sellers only seen on orders join the TSM recorded for them.
        """
        teams: Dict[str, List[str]] = {}
        for seller_id in self.sellers:
            teams.setdefault(self.tsm_for(seller_id), []).append(seller_id)

        for seller_id, tsm in achievement_data[['seller_id', 'tsm']].drop_duplicates('seller_id').itertuples(index=False):
            team = teams.setdefault(tsm, [])
            if seller_id not in team:
                team.append(seller_id)

        return teams

    def analyze(self, achievement_data: pd.DataFrame, **kwargs) -> List[TSMRollup]:
        """
        Roll achievement up by TSM.

        Args:
            achievement_data (pd.DataFrame): Frame from prepare_data
            **kwargs: Additional arguments (unused)

        Returns:
            List[TSMRollup]: Roll-ups sorted by total achievement, highest first
        """
        result = []
        groups = {tsm: group for tsm, group in achievement_data.groupby('tsm', sort=False)}

        for tsm, seller_ids in self.members(achievement_data).items():
            total_target = sum(
                (seller_target_total(sid, self.categories, self.registry) for sid in seller_ids),
                0.0
            )
            group = groups.get(tsm)
            if group is None:
                result.append(TSMRollup(
                    tsm_name=tsm,
                    ob_count=len(seller_ids),
                    category_totals={category: 0.0 for category in self.categories},
                    total_target=total_target,
                    visits=VisitCounts()
                ))
                continue

            result.append(TSMRollup(
                tsm_name=tsm,
                ob_count=len(seller_ids),
                category_totals=self.sum_categories(group),
                total_achievement=float(group[TOTAL_COLUMN].sum()),
                total_target=total_target,
                visits=visits_of(group)
            ))

        result = sorted(result, key=lambda rollup: rollup.total_achievement, reverse=True)
        logger.debug(f"Generated {len(result)} TSM roll-ups.")
        return result

    def prepare_output_dataframe(self, rollups: List[TSMRollup]) -> pd.DataFrame:
        columns = ['TSM', 'OB_COUNT'] + self.categories + ['ACHIEVEMENT', 'TARGET', 'PERCENTAGE']
        data = []
        for rollup in rollups:
            row = {'TSM': rollup.tsm_name, 'OB_COUNT': rollup.ob_count}
            for category in self.categories:
                row[category] = round(rollup.category_totals.get(category, 0.0), 3)
            row.update({
                'ACHIEVEMENT': round(rollup.total_achievement, 3),
                'TARGET': round(rollup.total_target, 2),
                'PERCENTAGE': round(rollup.percentage, 2)
            })
            data.append(row)
        return pd.DataFrame(data, columns=columns)
