"""Rate result entity."""

from dataclasses import dataclass
from .rate_status import RateStatus


@dataclass(frozen=True)
class RateResult:
    """Represents an estimated seeding rate."""

    pounds_per_acre: float = 0.0  # rounded to one decimal
    status: RateStatus = RateStatus.INCOMPLETE

    @classmethod
    def incomplete(cls) -> "RateResult":
        return cls(pounds_per_acre=0.0, status=RateStatus.INCOMPLETE)

    @classmethod
    def out_of_range(cls) -> "RateResult":
        return cls(pounds_per_acre=0.0, status=RateStatus.OUT_OF_RANGE)

    @property
    def is_calculated(self) -> bool:
        return self.status is RateStatus.CALCULATED

    def __str__(self) -> str:
        return f"{self.pounds_per_acre:g} lbs/acre"
