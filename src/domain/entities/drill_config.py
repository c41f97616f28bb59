"""Drill configuration entity."""

import math
from dataclasses import dataclass
from typing import Optional

INCHES_PER_FOOT = 12


def total_rows(width: Optional[float], spacing: Optional[float]) -> int:
    """
    Maximum number of rows a drill can carry.

    Args:
        width: Drill width in feet
        spacing: Row spacing in inches

    Returns:
        floor(width * 12 / spacing), or 0 when either value is missing,
        non-finite or not positive
    """
    if width is None or spacing is None:
        return 0
    if not (math.isfinite(width) and math.isfinite(spacing)):
        return 0
    if width <= 0 or spacing <= 0:
        return 0
    return int(math.floor((width * INCHES_PER_FOOT) / spacing))


@dataclass(frozen=True)
class DrillConfig:
    """Represents the geometry of a seed drill."""

    width_feet: float
    row_spacing_inches: float

    @property
    def width_inches(self) -> float:
        return self.width_feet * INCHES_PER_FOOT

    @property
    def total_rows(self) -> int:
        """Maximum number of rows physically possible on the drill."""
        return total_rows(self.width_feet, self.row_spacing_inches)

    def __str__(self) -> str:
        return f"{self.width_feet:g} ft @ {self.row_spacing_inches:g} in"
