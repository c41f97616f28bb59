"""Concrete repository implementations."""

from .csv_settings_repository import CSVSettingsRepository
from .memory_settings_repository import InMemorySettingsRepository

__all__ = [
    "CSVSettingsRepository",
    "InMemorySettingsRepository",
]
