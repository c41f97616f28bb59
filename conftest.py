"""Shared pytest fixtures."""

import pytest
from src.domain.exceptions import SettingsStoreError
from src.domain.repositories.settings_repository import SettingsRepository
from src.infrastructure.repositories.memory_settings_repository import InMemorySettingsRepository

DRILL_20FT = {"drill_width": "20", "row_spacing": "7.5", "distance_per_turn": "86"}


class FailingSettingsRepository(SettingsRepository):
    """Store that is always unavailable."""

    def get(self, key):
        raise SettingsStoreError("Error loading settings")

    def get_all(self):
        raise SettingsStoreError("Error loading settings")

    def set_many(self, values):
        raise SettingsStoreError("Error saving settings")


@pytest.fixture
def empty_repo():
    return InMemorySettingsRepository()


@pytest.fixture
def saved_repo():
    """Store holding a 20 ft drill at 7.5 in spacing, 86 in per turn."""
    return InMemorySettingsRepository(DRILL_20FT)


@pytest.fixture
def failing_repo():
    return FailingSettingsRepository()
