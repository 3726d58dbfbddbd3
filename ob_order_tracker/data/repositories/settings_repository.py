"""
Settings repository for runtime configuration stored in the database.
"""
from typing import Dict, List, Optional
import pandas as pd

from ob_order_tracker.config.app_config import DEFAULT_WORKING_DAYS, WORKING_DAYS_SETTING
from ob_order_tracker.data.connectors.base_connector import BaseConnector
from ob_order_tracker.data.repositories.base_repository import BaseRepository


class SettingsRepository(BaseRepository[tuple]):
    """
    Repository for key/value settings such as the month's working days.
    """

    def __init__(self, connector: BaseConnector):
        super().__init__(connector)

    def get_raw_data(self) -> pd.DataFrame:
        return self._execute_query("SELECT key, value FROM app_config ORDER BY key")

    def get_all(self) -> List[tuple]:
        return list(self.get_raw_data().itertuples(index=False, name=None))

    def as_dict(self) -> Dict[str, str]:
        return dict(self.get_all())

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self.as_dict().get(key, default)

    def set(self, key: str, value) -> None:
        self._execute_statement(
            "INSERT OR REPLACE INTO app_config (key, value) VALUES (:key, :value)",
            {"key": key, "value": str(value)}
        )

    def working_days(self) -> int:
        """Get the number of working days in the month, falling back to the default."""
        try:
            return int(self.get(WORKING_DAYS_SETTING, DEFAULT_WORKING_DAYS))
        except (TypeError, ValueError):
            return DEFAULT_WORKING_DAYS
