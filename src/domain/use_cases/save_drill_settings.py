"""Use case for validating and saving drill settings."""

import logging
from typing import Optional, Tuple
from ..entities.drill_settings import DrillSettings
from ..exceptions import SettingsStoreError
from ..repositories.settings_repository import SettingsRepository
from .validate_drill_config import ROW_SPACING_LIMITS, validate_config

logger = logging.getLogger(__name__)


class SaveDrillSettingsUseCase:
    """Use case to validate the configuration form and persist it."""

    def __init__(
        self,
        repository: SettingsRepository,
        spacing_limits: Tuple[float, float] = ROW_SPACING_LIMITS,
    ):
        """
        Initialize use case.

        Args:
            repository: Store to write the settings to
            spacing_limits: Inclusive (min, max) row spacing in inches
        """
        self.repository = repository
        self.spacing_limits = spacing_limits

    def execute(
        self,
        width_text: Optional[str],
        spacing_text: Optional[str],
        distance_text: Optional[str],
    ) -> DrillSettings:
        """
        Execute the use case.

        Args:
            width_text: Drill width in feet, as typed
            spacing_text: Row spacing in inches, as typed
            distance_text: Distance per turn in inches, as typed

        Returns:
            The settings that were saved

        Raises:
            ConfigValidationError: If the input is rejected; nothing is written
            SettingsStoreError: If the store cannot be written
        """
        settings = validate_config(
            width_text, spacing_text, distance_text, spacing_limits=self.spacing_limits
        )

        try:
            self.repository.set_many(settings.to_storage())
        except SettingsStoreError:
            raise
        except OSError as e:
            logger.error(f"Error saving settings: {e}")
            raise SettingsStoreError("Error saving settings") from e

        logger.info(f"Saved drill settings: {settings}")
        return settings
