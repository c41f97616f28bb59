"""CSV file settings repository implementation."""

import logging
from pathlib import Path
from typing import Dict, Optional
import pandas as pd
from ...domain.exceptions import SettingsStoreError
from ...domain.repositories.settings_repository import SettingsRepository

logger = logging.getLogger(__name__)


class CSVSettingsRepository(SettingsRepository):
    """Repository keeping settings in a two-column key,value CSV file."""

    COLUMNS = ["key", "value"]

    def __init__(self, data_file: str):
        """
        Initialize repository.

        Args:
            data_file: Path to the CSV file; it is created on first save
        """
        self.data_file = Path(data_file)

    def _read(self) -> Dict[str, str]:
        if not self.data_file.exists():
            return {}

        try:
            df = pd.read_csv(self.data_file, dtype=str, keep_default_na=False)
        except pd.errors.EmptyDataError:
            return {}
        except Exception as e:
            logger.error(f"Error reading settings file {self.data_file}: {e}")
            raise SettingsStoreError("Error loading settings") from e

        if not set(self.COLUMNS).issubset(df.columns):
            logger.error(f"Settings file {self.data_file} has columns {list(df.columns)}")
            raise SettingsStoreError("Error loading settings")

        return {row["key"]: row["value"] for _, row in df.iterrows() if row["value"] != ""}

    def get(self, key: str) -> Optional[str]:
        """Read one setting from the CSV file."""
        return self._read().get(key)

    def get_all(self) -> Dict[str, str]:
        """Read all settings from the CSV file."""
        values = self._read()
        logger.info(f"Loaded {len(values)} settings from {self.data_file}")
        return values

    def set_many(self, values: Dict[str, str]) -> None:
        """Merge settings into the CSV file."""
        merged = self._read()
        merged.update({key: str(value) for key, value in values.items()})

        logger.info(f"Saving {len(values)} settings to {self.data_file}")
        df = pd.DataFrame(list(merged.items()), columns=self.COLUMNS)
        try:
            self.data_file.parent.mkdir(parents=True, exist_ok=True)
            df.to_csv(self.data_file, index=False)
        except OSError as e:
            logger.error(f"Error writing settings file {self.data_file}: {e}")
            raise SettingsStoreError("Error saving settings") from e
        logger.info("Settings saved successfully")
