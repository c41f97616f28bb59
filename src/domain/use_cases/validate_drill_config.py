"""Validation of the drill configuration form."""

import math
from typing import Optional, Tuple

from ..entities.drill_config import INCHES_PER_FOOT
from ..entities.drill_settings import (
    DISTANCE_PER_TURN_KEY,
    DRILL_WIDTH_KEY,
    ROW_SPACING_KEY,
    DrillSettings,
)
from ..exceptions import (
    DistanceNotPositive,
    EmptyField,
    NotANumber,
    SpacingExceedsWidth,
    SpacingOutOfRange,
    WidthNotPositive,
)
from .validate_calibration_input import clean_decimal

# Realistic row spacings, inches (inclusive)
ROW_SPACING_LIMITS = (0.5, 36.0)


def validate_config(
    width_text: Optional[str],
    spacing_text: Optional[str],
    distance_text: Optional[str],
    spacing_limits: Tuple[float, float] = ROW_SPACING_LIMITS,
) -> DrillSettings:
    """
    Validate and normalize the drill settings.

    Args:
        width_text: Drill width in feet, as typed
        spacing_text: Row spacing in inches, as typed
        distance_text: Distance per turn in inches, as typed
        spacing_limits: Inclusive (min, max) row spacing in inches

    Returns:
        DrillSettings ready to be persisted

    Raises:
        ConfigValidationError: The first rule the input breaks
    """
    fields = [
        (DRILL_WIDTH_KEY, clean_decimal(width_text)),
        (ROW_SPACING_KEY, clean_decimal(spacing_text)),
        (DISTANCE_PER_TURN_KEY, clean_decimal(distance_text)),
    ]

    for name, cleaned in fields:
        if not cleaned:
            raise EmptyField(name)

    values = []
    for name, cleaned in fields:
        try:
            value = float(cleaned)
        except ValueError:
            raise NotANumber(name, cleaned)
        if not math.isfinite(value):
            raise NotANumber(name, cleaned)
        values.append(value)
    width, spacing, distance = values

    if width <= 0:
        raise WidthNotPositive()

    minimum, maximum = spacing_limits
    if spacing < minimum or spacing > maximum:
        raise SpacingOutOfRange(minimum, maximum)

    if spacing >= width * INCHES_PER_FOOT:
        raise SpacingExceedsWidth()

    if distance <= 0:
        raise DistanceNotPositive()

    return DrillSettings(
        width_feet=width,
        row_spacing_inches=spacing,
        distance_per_turn_inches=distance,
        width_text=fields[0][1],
        row_spacing_text=fields[1][1],
        distance_per_turn_text=fields[2][1],
    )
