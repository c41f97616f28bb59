"""Use cases - core business operations."""

from .compute_seeding_rate import SQUARE_FEET_PER_ACRE, compute_rate, round_rate
from .validate_calibration_input import (
    validate_number_of_turns,
    validate_rows_caught,
    validate_seed_weight,
)
from .validate_drill_config import validate_config
from .load_drill_settings import LoadDrillSettingsUseCase
from .save_drill_settings import SaveDrillSettingsUseCase
from .build_rate_table import BuildRateTableUseCase, summarize_rates

__all__ = [
    "SQUARE_FEET_PER_ACRE",
    "compute_rate",
    "round_rate",
    "validate_number_of_turns",
    "validate_rows_caught",
    "validate_seed_weight",
    "validate_config",
    "LoadDrillSettingsUseCase",
    "SaveDrillSettingsUseCase",
    "BuildRateTableUseCase",
    "summarize_rates",
]
