"""Tests for domain entities."""

import math

import pytest
from src.domain.entities.calibration_run import CalibrationRun
from src.domain.entities.drill_config import DrillConfig, total_rows
from src.domain.entities.drill_settings import DrillSettings
from src.domain.entities.rate_result import RateResult
from src.domain.entities.rate_status import RateStatus


def test_total_rows():
    """Test total rows is floored."""
    assert total_rows(20, 7.5) == 32
    assert total_rows(10, 7) == 17
    assert total_rows(1, 0.5) == 24


@pytest.mark.parametrize(
    "width,spacing",
    [(20, 0), (20, -7.5), (0, 7.5), (None, 7.5), (20, None), (math.nan, 7.5), (20, math.inf)],
)
def test_total_rows_invalid_geometry(width, spacing):
    """Test invalid geometry gives zero rows instead of raising."""
    assert total_rows(width, spacing) == 0


def test_drill_config():
    """Test DrillConfig entity."""
    config = DrillConfig(width_feet=20, row_spacing_inches=7.5)
    assert config.width_inches == 240
    assert config.total_rows == 32
    assert str(config) == "20 ft @ 7.5 in"


def test_drill_config_is_immutable():
    """Test DrillConfig cannot be modified."""
    config = DrillConfig(width_feet=20, row_spacing_inches=7.5)
    with pytest.raises(AttributeError):
        config.width_feet = 30


def test_drill_settings():
    """Test DrillSettings entity."""
    settings = DrillSettings(width_feet=20.0, row_spacing_inches=7.5, distance_per_turn_inches=86.0)
    assert settings.drill_config == DrillConfig(20.0, 7.5)
    assert settings.total_rows == 32
    assert settings.to_storage() == {
        "drill_width": "20",
        "row_spacing": "7.5",
        "distance_per_turn": "86",
    }


def test_drill_settings_storage_keeps_text():
    """Test stored values use the entered text, or plain decimals without it."""
    typed = DrillSettings(20.0, 7.5, 86.0, width_text="20.0", row_spacing_text="7.50")
    assert typed == DrillSettings(20.0, 7.5, 86.0)
    assert typed.to_storage() == {
        "drill_width": "20.0",
        "row_spacing": "7.50",
        "distance_per_turn": "86",
    }

    tiny = DrillSettings(20.0, 7.5, 0.00001)
    assert tiny.to_storage()["distance_per_turn"] == "0.00001"


def test_calibration_run():
    """Test CalibrationRun entity."""
    run = CalibrationRun(
        distance_per_turn_inches=86, number_of_turns=10, rows_caught=4, seed_weight_pounds=2.0
    )
    assert run.is_complete
    assert run.distance_feet == pytest.approx(7.1667, abs=1e-4)
    assert not CalibrationRun(number_of_turns=10).is_complete
    assert CalibrationRun().distance_feet is None


def test_rate_result():
    """Test RateResult entity."""
    result = RateResult(pounds_per_acre=486.3, status=RateStatus.CALCULATED)
    assert result.is_calculated
    assert str(result) == "486.3 lbs/acre"

    empty = RateResult.incomplete()
    assert empty.pounds_per_acre == 0
    assert not empty.is_calculated
    assert RateResult.out_of_range().status == RateStatus.OUT_OF_RANGE


def test_rate_status():
    """Test RateStatus enum."""
    assert RateStatus.CALCULATED.value == "calculated"
    assert RateStatus.OUT_OF_RANGE.describe() == "Rows caught exceed drill capacity"
