"""Tests for drill configuration validation."""

import pytest
from src.domain.entities.drill_settings import DrillSettings
from src.domain.exceptions import (
    ConfigValidationError,
    DistanceNotPositive,
    EmptyField,
    NotANumber,
    SpacingExceedsWidth,
    SpacingOutOfRange,
    WidthNotPositive,
)
from src.domain.use_cases.validate_drill_config import validate_config


def test_validate_config_accepts_defaults():
    """Test the pre-filled configuration is valid."""
    settings = validate_config("20", "7.5", "86")
    assert settings == DrillSettings(20.0, 7.5, 86.0)


def test_validate_config_strips_units():
    """Test non-numeric characters are stripped."""
    assert validate_config("20 ft", "7.5in", " 86 ") == DrillSettings(20.0, 7.5, 86.0)


@pytest.mark.parametrize(
    "texts,field",
    [
        (("", "7.5", "86"), "drill_width"),
        (("20", "", "86"), "row_spacing"),
        (("20", "7.5", None), "distance_per_turn"),
        (("abc", "7.5", "86"), "drill_width"),
    ],
)
def test_validate_config_empty_field(texts, field):
    """Test blank fields are rejected."""
    with pytest.raises(EmptyField) as exc_info:
        validate_config(*texts)
    assert exc_info.value.field == field
    assert exc_info.value.message == "Please fill in all settings with valid numbers"


def test_validate_config_empty_checked_first():
    """Test a blank field wins over other problems."""
    with pytest.raises(EmptyField):
        validate_config("0", "0.1", "")


def test_validate_config_not_a_number():
    """Test a lone decimal point does not parse."""
    with pytest.raises(NotANumber) as exc_info:
        validate_config(".", "7.5", "86")
    assert exc_info.value.field == "drill_width"


def test_validate_config_huge_number():
    """Test a value too large for a float is rejected rather than stored as inf."""
    with pytest.raises(NotANumber) as exc_info:
        validate_config("1" * 400, "7.5", "86")
    assert exc_info.value.field == "drill_width"


def test_validate_config_keeps_cleaned_text():
    """Test the cleaned text travels with the parsed values."""
    settings = validate_config("20 ft", "7.50", "0.00001")
    assert settings.distance_per_turn_inches == 1e-05
    assert settings.to_storage() == {
        "drill_width": "20",
        "row_spacing": "7.50",
        "distance_per_turn": "0.00001",
    }


def test_validate_config_width_not_positive():
    """Test zero width is rejected."""
    with pytest.raises(WidthNotPositive):
        validate_config("0", "7.5", "86")


@pytest.mark.parametrize("spacing", ["0.4", "36.1", "0"])
def test_validate_config_spacing_out_of_range(spacing):
    """Test spacing just outside [0.5, 36] is rejected."""
    with pytest.raises(SpacingOutOfRange) as exc_info:
        validate_config("20", spacing, "86")
    assert exc_info.value.message == "Row spacing must be between 0.5 and 36 inches"


@pytest.mark.parametrize("spacing", ["0.5", "36", "36.0"])
def test_validate_config_spacing_boundaries(spacing):
    """Test spacing bounds are inclusive."""
    settings = validate_config("20", spacing, "86")
    assert settings.row_spacing_inches == float(spacing)


def test_validate_config_spacing_equal_to_width():
    """Test spacing must be strictly less than the drill width."""
    with pytest.raises(SpacingExceedsWidth):
        validate_config("1", "12", "86")
    with pytest.raises(SpacingExceedsWidth):
        validate_config("2", "30", "86")
    assert validate_config("1", "11.9", "86").row_spacing_inches == 11.9


def test_validate_config_distance_not_positive():
    """Test zero distance per turn is rejected."""
    with pytest.raises(DistanceNotPositive) as exc_info:
        validate_config("20", "7.5", "0")
    assert exc_info.value.message == "Distance per turn must be greater than 0 inches"


def test_validate_config_custom_spacing_limits():
    """Test spacing limits can be configured."""
    with pytest.raises(SpacingOutOfRange):
        validate_config("20", "7.5", "86", spacing_limits=(10.0, 30.0))


def test_config_errors_are_value_errors():
    """Test the error hierarchy."""
    with pytest.raises(ValueError):
        validate_config("0", "7.5", "86")
    assert issubclass(WidthNotPositive, ConfigValidationError)
