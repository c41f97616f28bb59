"""Calibration run entity."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CalibrationRun:
    """Represents the measurements of a single calibration test pass.

    A field left as None means no value has been entered yet.
    """

    distance_per_turn_inches: Optional[float] = None
    number_of_turns: Optional[int] = None
    rows_caught: Optional[int] = None
    seed_weight_pounds: Optional[float] = None

    @property
    def is_complete(self) -> bool:
        """Whether every measurement has been entered."""
        return None not in (
            self.distance_per_turn_inches,
            self.number_of_turns,
            self.rows_caught,
            self.seed_weight_pounds,
        )

    @property
    def distance_feet(self) -> Optional[float]:
        """Distance covered per turn, in feet."""
        if self.distance_per_turn_inches is None:
            return None
        return self.distance_per_turn_inches / 12
