"""Use case for computing seeding rates for a table of calibration runs."""

import logging
from typing import Any, Dict, Optional
import numpy as np
import pandas as pd
from ..entities.calibration_run import CalibrationRun
from ..entities.drill_settings import DrillSettings
from ..entities.rate_status import RateStatus
from .compute_seeding_rate import compute_rate, round_rate

logger = logging.getLogger(__name__)


def _as_whole(value: Any) -> Optional[int]:
    if pd.isna(value) or not np.isfinite(value) or value != int(value):
        return None
    return int(value)


def _as_float(value: Any) -> Optional[float]:
    return None if pd.isna(value) else float(value)


class BuildRateTableUseCase:
    """Use case to compute a seeding rate for every row of a runs table."""

    REQUIRED_COLUMNS = ["number_of_turns", "rows_caught", "seed_weight"]

    def execute(self, settings: Optional[DrillSettings], runs: pd.DataFrame) -> pd.DataFrame:
        """
        Execute the use case.

        Args:
            settings: Drill settings shared by all runs (None if not configured)
            runs: DataFrame with number_of_turns, rows_caught and seed_weight
                columns; blank cells count as not entered

        Returns:
            Copy of runs with total_rows, pounds_per_acre and status columns
        """
        missing = [c for c in self.REQUIRED_COLUMNS if c not in runs.columns]
        if missing:
            raise ValueError(f"Runs table is missing columns: {', '.join(missing)}")

        logger.info(f"Computing seeding rates for {len(runs)} calibration runs")

        config = settings.drill_config if settings else None
        distance = settings.distance_per_turn_inches if settings else None

        table = runs.copy()
        turns = pd.to_numeric(table["number_of_turns"], errors="coerce")
        rows = pd.to_numeric(table["rows_caught"], errors="coerce")
        weights = pd.to_numeric(table["seed_weight"], errors="coerce")

        results = [
            compute_rate(
                config,
                CalibrationRun(
                    distance_per_turn_inches=distance,
                    number_of_turns=_as_whole(t),
                    rows_caught=_as_whole(r),
                    seed_weight_pounds=_as_float(w),
                ),
            )
            for t, r, w in zip(turns, rows, weights)
        ]

        table["total_rows"] = config.total_rows if config else 0
        table["pounds_per_acre"] = [r.pounds_per_acre for r in results]
        table["status"] = [r.status.value for r in results]

        calculated = int((table["status"] == RateStatus.CALCULATED.value).sum())
        logger.info(f"Calculated {calculated} of {len(table)} runs")
        return table


def summarize_rates(table: pd.DataFrame) -> Dict[str, Any]:
    """
    Summary statistics over the calculated rows of a rate table.

    Args:
        table: Output of BuildRateTableUseCase.execute

    Returns:
        Dictionary with count, mean, std, min and max (lbs/acre)
    """
    rates = table.loc[
        table["status"] == RateStatus.CALCULATED.value, "pounds_per_acre"
    ].to_numpy(dtype=float)

    if rates.size == 0:
        return {"count": 0, "mean": None, "std": None, "min": None, "max": None}

    return {
        "count": int(rates.size),
        "mean": round_rate(float(np.mean(rates))),
        "std": round_rate(float(np.std(rates, ddof=1))) if rates.size > 1 else 0.0,
        "min": float(np.min(rates)),
        "max": float(np.max(rates)),
    }
