"""Seeding rate calculation."""

import math
from numbers import Real
from typing import Optional

from ..entities.calibration_run import CalibrationRun
from ..entities.drill_config import INCHES_PER_FOOT, DrillConfig, total_rows
from ..entities.rate_result import RateResult
from ..entities.rate_status import RateStatus

SQUARE_FEET_PER_ACRE = 43560


def round_rate(value: float) -> float:
    """Round to one decimal place, halves away from zero."""
    return math.floor(value * 10 + 0.5) / 10


def _is_number(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value)


def compute_rate(config: Optional[DrillConfig], run: Optional[CalibrationRun]) -> RateResult:
    """
    Estimate the seeding rate from a calibration run.

    The seed caught in the tested rows is scaled up to the full drill width
    and divided by the area covered during the run.

    Args:
        config: Drill geometry, or None if not configured yet
        run: Calibration measurements

    Returns:
        RateResult in lbs/acre. Missing or invalid inputs give a zero
        result instead of raising.
    """
    if config is None or run is None:
        return RateResult.incomplete()

    width = config.width_feet
    spacing = config.row_spacing_inches
    distance = run.distance_per_turn_inches
    turns = run.number_of_turns
    rows = run.rows_caught
    weight = run.seed_weight_pounds

    if not all(_is_number(v) for v in (width, spacing, distance, turns, rows, weight)):
        return RateResult.incomplete()
    if width <= 0 or spacing <= 0 or distance <= 0 or turns <= 0:
        return RateResult.incomplete()
    if rows <= 0 or weight <= 0:
        return RateResult.incomplete()
    if rows > total_rows(width, spacing):
        return RateResult.out_of_range()

    distance_feet = distance / INCHES_PER_FOOT
    rows_on_drill = (width * INCHES_PER_FOOT) / spacing  # not floored here
    area_acres = (width * distance_feet * turns) / SQUARE_FEET_PER_ACRE
    pounds_per_acre = (weight * rows_on_drill / rows) / area_acres

    return RateResult(pounds_per_acre=round_rate(pounds_per_acre), status=RateStatus.CALCULATED)
