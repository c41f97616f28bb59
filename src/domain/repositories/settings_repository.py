"""Settings repository interface."""

from abc import ABC, abstractmethod
from typing import Dict, Optional


class SettingsRepository(ABC):
    """Abstract key/value store for the persisted drill settings."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """
        Read one setting.

        Args:
            key: Setting key (e.g. 'drill_width')

        Returns:
            The stored string, or None if the key is not stored

        Raises:
            SettingsStoreError: If the store cannot be read
        """
        pass

    @abstractmethod
    def get_all(self) -> Dict[str, str]:
        """
        Read every stored setting.

        Raises:
            SettingsStoreError: If the store cannot be read
        """
        pass

    @abstractmethod
    def set_many(self, values: Dict[str, str]) -> None:
        """
        Write several settings at once, keeping any other stored keys.

        Args:
            values: Mapping of key to decimal string

        Raises:
            SettingsStoreError: If the store cannot be written
        """
        pass
