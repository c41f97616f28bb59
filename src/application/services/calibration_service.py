"""Service holding the state of the drill configuration and calibration forms."""

import logging
from typing import Any, Dict, Iterable, Optional, Tuple, Union

from ...domain.entities.calibration_run import CalibrationRun
from ...domain.entities.drill_config import DrillConfig
from ...domain.entities.drill_settings import (
    DISTANCE_PER_TURN_KEY,
    DRILL_WIDTH_KEY,
    ROW_SPACING_KEY,
    DrillSettings,
)
from ...domain.entities.rate_result import RateResult
from ...domain.exceptions import SettingsStoreError
from ...domain.repositories.settings_repository import SettingsRepository

from ...domain.use_cases.compute_seeding_rate import compute_rate
from ...domain.use_cases.load_drill_settings import LoadDrillSettingsUseCase
from ...domain.use_cases.save_drill_settings import SaveDrillSettingsUseCase
from ...domain.use_cases.validate_calibration_input import (
    DEFAULT_TURN_OPTIONS,
    validate_number_of_turns,
    validate_rows_caught,
    validate_seed_weight,
)
from ...domain.use_cases.validate_drill_config import ROW_SPACING_LIMITS

logger = logging.getLogger(__name__)


class CalibrationService:
    """Explicit state for one user's calibration session.

    Every setter validates its input, stores it, and returns the freshly
    computed RateResult. A rejected input leaves the previous state intact.
    """

    def __init__(
        self,
        settings_repo: SettingsRepository,
        turn_options: Iterable[int] = DEFAULT_TURN_OPTIONS,
        spacing_limits: Tuple[float, float] = ROW_SPACING_LIMITS,
        form_defaults: Optional[Dict[str, str]] = None,
    ):
        self.settings_repo = settings_repo
        self.turn_options = tuple(turn_options)
        if not self.turn_options:
            raise ValueError("At least one turn option is required")

        self.load_settings_uc = LoadDrillSettingsUseCase(settings_repo, spacing_limits)
        self.save_settings_uc = SaveDrillSettingsUseCase(settings_repo, spacing_limits)

        # Configuration form text, kept even when a save fails
        self.config_form: Dict[str, str] = dict(form_defaults or {})

        # Calibration state
        self.settings: Optional[DrillSettings] = None
        self.number_of_turns: int = self.turn_options[0]
        self.rows_caught: Optional[int] = None
        self.seed_weight: Optional[float] = None
        self._result = RateResult.incomplete()

    # ---------- Drill settings ----------
    def load_settings(self) -> Optional[DrillSettings]:
        """Read the stored settings; on failure the current state is kept."""
        try:
            settings = self.load_settings_uc.execute()
        except SettingsStoreError:
            logger.error("Error loading settings", exc_info=True)
            raise

        self.settings = settings
        if settings is not None:
            self.config_form = settings.to_storage()
        self._recompute()
        return settings

    def save_settings(
        self,
        width_text: Optional[str],
        spacing_text: Optional[str],
        distance_text: Optional[str],
    ) -> DrillSettings:
        """Validate and persist the configuration form."""
        self.config_form = {
            DRILL_WIDTH_KEY: width_text or "",
            ROW_SPACING_KEY: spacing_text or "",
            DISTANCE_PER_TURN_KEY: distance_text or "",
        }
        settings = self.save_settings_uc.execute(width_text, spacing_text, distance_text)
        self.settings = settings
        self._recompute()
        return settings

    def apply_settings(self, settings: DrillSettings) -> RateResult:
        """Calculate against settings without persisting them."""
        self.settings = settings
        return self._recompute()

    # ---------- Calibration inputs ----------
    def set_number_of_turns(self, value: Union[int, str]) -> RateResult:
        self.number_of_turns = validate_number_of_turns(value, self.turn_options)
        return self._recompute()

    def set_rows_caught(self, text: Optional[str]) -> RateResult:
        """Raises RowsExceedCapacity without touching the previous value."""
        total_rows = self.settings.total_rows if self.settings else None
        self.rows_caught = validate_rows_caught(text, total_rows)
        return self._recompute()

    def set_seed_weight(self, text: Optional[str]) -> RateResult:
        self.seed_weight = validate_seed_weight(text)
        return self._recompute()

    # ---------- Derived state ----------
    @property
    def drill_config(self) -> Optional[DrillConfig]:
        return self.settings.drill_config if self.settings else None

    @property
    def total_rows(self) -> int:
        return self.settings.total_rows if self.settings else 0

    @property
    def calibration_run(self) -> CalibrationRun:
        return CalibrationRun(
            distance_per_turn_inches=(
                self.settings.distance_per_turn_inches if self.settings else None
            ),
            number_of_turns=self.number_of_turns,
            rows_caught=self.rows_caught,
            seed_weight_pounds=self.seed_weight,
        )

    @property
    def result(self) -> RateResult:
        return self._result

    def _recompute(self) -> RateResult:
        self._result = compute_rate(self.drill_config, self.calibration_run)
        logger.debug(f"Recomputed rate: {self._result} ({self._result.status.value})")
        return self._result

    def settings_summary(self) -> Dict[str, Any]:
        """Values shown in the current settings panel."""
        return {
            "drill_width_feet": self.settings.width_feet if self.settings else None,
            "row_spacing_inches": self.settings.row_spacing_inches if self.settings else None,
            "distance_per_turn_inches": (
                self.settings.distance_per_turn_inches if self.settings else None
            ),
            "total_rows": self.total_rows,
        }
