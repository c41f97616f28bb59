"""In-memory settings repository implementation."""

from typing import Dict, Optional
from ...domain.repositories.settings_repository import SettingsRepository


class InMemorySettingsRepository(SettingsRepository):
    """Repository holding settings in a dict; nothing survives the process."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._values: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def get_all(self) -> Dict[str, str]:
        return dict(self._values)

    def set_many(self, values: Dict[str, str]) -> None:
        self._values.update({key: str(value) for key, value in values.items()})
