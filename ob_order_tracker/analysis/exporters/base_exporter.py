"""
Base exporter interface for exporting achievement reports.
"""
from abc import ABC, abstractmethod
from typing import List
import pandas as pd

from ob_order_tracker.data.models.report import AchievementReport, AchievementSummary


class BaseExporter(ABC):
    """
    Abstract base class for exporters that write achievement reports.
    """

    @abstractmethod
    def export(self, report: AchievementReport, output_dir: str) -> str:
        """
        Export a report to a specified format.

        Args:
            report (AchievementReport): The report to export
            output_dir (str): Base directory for output files

        Returns:
            str: Path to the exported data
        """
        pass

    def prepare_summary_dataframe(self, summary: AchievementSummary) -> pd.DataFrame:
        """
        Prepare the per-category summary table.

        Args:
            summary (AchievementSummary): The global summary

        Returns:
            pd.DataFrame: One row per category with today and MTD figures
        """
        columns = [
            'CATEGORY', 'TODAY_ACHIEVEMENT', 'TODAY_TARGET', 'TODAY_PERCENTAGE',
            'MTD_ACHIEVEMENT', 'MTD_TARGET', 'MTD_PERCENTAGE'
        ]
        data: List[dict] = []
        for today_row, mtd_row in zip(summary.today, summary.month_to_date):
            data.append({
                'CATEGORY': mtd_row.category,
                'TODAY_ACHIEVEMENT': round(today_row.achievement, 3),
                'TODAY_TARGET': round(today_row.target, 2),
                'TODAY_PERCENTAGE': round(today_row.percentage, 2),
                'MTD_ACHIEVEMENT': round(mtd_row.achievement, 3),
                'MTD_TARGET': round(mtd_row.target, 2),
                'MTD_PERCENTAGE': round(mtd_row.percentage, 2)
            })
        return pd.DataFrame(data, columns=columns)
