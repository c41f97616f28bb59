"""Persisted drill settings entity."""

from dataclasses import dataclass, field
from typing import Dict, Optional
import numpy as np
from .drill_config import DrillConfig

DRILL_WIDTH_KEY = "drill_width"
ROW_SPACING_KEY = "row_spacing"
DISTANCE_PER_TURN_KEY = "distance_per_turn"


def _format_decimal(value: float) -> str:
    """Plain decimal string, never exponent notation."""
    return np.format_float_positional(value, trim="-")


@dataclass(frozen=True)
class DrillSettings:
    """The three settings saved from the configuration step.

    The *_text fields keep the cleaned strings the values were parsed from,
    so they are stored exactly as entered. They do not take part in equality.
    """

    width_feet: float
    row_spacing_inches: float
    distance_per_turn_inches: float
    width_text: Optional[str] = field(default=None, compare=False)
    row_spacing_text: Optional[str] = field(default=None, compare=False)
    distance_per_turn_text: Optional[str] = field(default=None, compare=False)

    @property
    def drill_config(self) -> DrillConfig:
        return DrillConfig(
            width_feet=self.width_feet, row_spacing_inches=self.row_spacing_inches
        )

    @property
    def total_rows(self) -> int:
        return self.drill_config.total_rows

    def to_storage(self) -> Dict[str, str]:
        """Convert to the key/value strings kept by the settings store."""
        return {
            DRILL_WIDTH_KEY: self.width_text or _format_decimal(self.width_feet),
            ROW_SPACING_KEY: self.row_spacing_text or _format_decimal(self.row_spacing_inches),
            DISTANCE_PER_TURN_KEY: (
                self.distance_per_turn_text or _format_decimal(self.distance_per_turn_inches)
            ),
        }

    def __str__(self) -> str:
        return (
            f"width={self.width_feet:g} ft, spacing={self.row_spacing_inches:g} in, "
            f"distance/turn={self.distance_per_turn_inches:g} in"
        )
