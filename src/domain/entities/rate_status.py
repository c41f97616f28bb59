"""Rate status enumeration."""

from enum import Enum


class RateStatus(str, Enum):
    """Outcome of a seeding rate calculation."""

    CALCULATED = "calculated"
    INCOMPLETE = "incomplete"
    OUT_OF_RANGE = "out_of_range"

    def describe(self) -> str:
        """Short label for display."""
        mapping = {
            RateStatus.CALCULATED: "Rate calculated",
            RateStatus.INCOMPLETE: "Waiting for all inputs",
            RateStatus.OUT_OF_RANGE: "Rows caught exceed drill capacity",
        }
        return mapping[self]
