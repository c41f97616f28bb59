"""Domain entities."""

from .drill_config import DrillConfig, total_rows
from .drill_settings import DrillSettings
from .calibration_run import CalibrationRun
from .rate_status import RateStatus
from .rate_result import RateResult

__all__ = [
    "DrillConfig",
    "DrillSettings",
    "CalibrationRun",
    "RateStatus",
    "RateResult",
    "total_rows",
]
