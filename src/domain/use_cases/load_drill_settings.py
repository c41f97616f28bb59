"""Use case for loading the persisted drill settings."""

import logging
from typing import Optional, Tuple
from ..entities.drill_settings import (
    DISTANCE_PER_TURN_KEY,
    DRILL_WIDTH_KEY,
    ROW_SPACING_KEY,
    DrillSettings,
)
from ..exceptions import ConfigValidationError
from ..repositories.settings_repository import SettingsRepository
from .validate_drill_config import ROW_SPACING_LIMITS, validate_config

logger = logging.getLogger(__name__)


class LoadDrillSettingsUseCase:
    """Use case to read drill settings from the settings store."""

    def __init__(
        self,
        repository: SettingsRepository,
        spacing_limits: Tuple[float, float] = ROW_SPACING_LIMITS,
    ):
        """
        Initialize use case.

        Args:
            repository: Store holding the settings
            spacing_limits: Inclusive (min, max) row spacing in inches
        """
        self.repository = repository
        self.spacing_limits = spacing_limits

    def execute(self) -> Optional[DrillSettings]:
        """
        Execute the use case.

        Returns:
            DrillSettings, or None when settings are missing or unusable

        Raises:
            SettingsStoreError: If the store cannot be read
        """
        stored = self.repository.get_all()
        keys = (DRILL_WIDTH_KEY, ROW_SPACING_KEY, DISTANCE_PER_TURN_KEY)
        missing = [key for key in keys if not stored.get(key)]
        if missing:
            logger.info(f"No stored value for {', '.join(missing)}")
            return None

        try:
            settings = validate_config(
                stored[DRILL_WIDTH_KEY],
                stored[ROW_SPACING_KEY],
                stored[DISTANCE_PER_TURN_KEY],
                spacing_limits=self.spacing_limits,
            )
        except ConfigValidationError as e:
            logger.warning(f"Ignoring stored drill settings: {e.message}")
            return None

        logger.info(f"Loaded drill settings: {settings}")
        return settings
