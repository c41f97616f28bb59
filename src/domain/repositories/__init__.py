"""Repository interfaces."""

from .settings_repository import SettingsRepository

__all__ = [
    "SettingsRepository",
]
