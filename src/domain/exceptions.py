"""Domain exceptions for calibration input and settings persistence."""

from typing import Optional


class CalibrationError(ValueError):
    """Base class for all calibration errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(CalibrationError):
    """User input was rejected; the user may correct it and retry."""


class RowsExceedCapacity(ValidationError):
    """More rows caught than the drill physically has."""

    def __init__(self, total_rows: int):
        super().__init__(f"Cannot catch more than {total_rows} rows based on current settings")
        self.total_rows = total_rows


class InvalidTurnCount(ValidationError):
    """Number of turns is not one of the offered options."""

    def __init__(self, value, options):
        allowed = ", ".join(str(o) for o in options)
        super().__init__(f"Number of turns must be one of: {allowed}")
        self.value = value
        self.options = tuple(options)


class ConfigValidationError(ValidationError):
    """Drill configuration was rejected."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class EmptyField(ConfigValidationError):
    def __init__(self, field: str):
        super().__init__("Please fill in all settings with valid numbers", field)


class NotANumber(ConfigValidationError):
    def __init__(self, field: str, raw: str):
        super().__init__("Please fill in all settings with valid numbers", field)
        self.raw = raw


class WidthNotPositive(ConfigValidationError):
    def __init__(self):
        super().__init__("Drill width must be greater than 0 feet", "drill_width")


class SpacingOutOfRange(ConfigValidationError):
    def __init__(self, minimum: float, maximum: float):
        super().__init__(
            f"Row spacing must be between {minimum:g} and {maximum:g} inches", "row_spacing"
        )
        self.minimum = minimum
        self.maximum = maximum


class SpacingExceedsWidth(ConfigValidationError):
    def __init__(self):
        super().__init__("Row spacing must be less than the drill width", "row_spacing")


class DistanceNotPositive(ConfigValidationError):
    def __init__(self):
        super().__init__("Distance per turn must be greater than 0 inches", "distance_per_turn")


class SettingsStoreError(CalibrationError):
    """The settings store could not be read or written."""
