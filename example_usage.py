"""Example usage of the seed drill calibration system."""

import logging
from src.application.services.calibration_service import CalibrationService
from src.domain.exceptions import RowsExceedCapacity, ValidationError
from src.infrastructure.repositories.memory_settings_repository import InMemorySettingsRepository
from config.settings import DEFAULT_DRILL_SETTINGS, LOG_FORMAT, ROW_SPACING_LIMITS, TURN_OPTIONS

logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
logger = logging.getLogger(__name__)


def main():
    """Example usage."""
    service = CalibrationService(
        InMemorySettingsRepository(),
        turn_options=TURN_OPTIONS,
        spacing_limits=ROW_SPACING_LIMITS,
        form_defaults=DEFAULT_DRILL_SETTINGS,
    )

    # Example 1: Configure the drill
    print("=" * 60)
    print("Example 1: Configuring the drill")
    print("=" * 60)
    form = service.config_form
    try:
        settings = service.save_settings(
            form["drill_width"], form["row_spacing"], form["distance_per_turn"]
        )
    except ValidationError as e:
        logger.error(f"Configuration rejected: {e.message}")
        return
    print(f"Saved: {settings}")
    print(f"Total rows on drill: {service.total_rows}")

    # Example 2: Enter a calibration run field by field
    print("\n" + "=" * 60)
    print("Example 2: Calibration run")
    print("=" * 60)
    turns = 10 if 10 in TURN_OPTIONS else TURN_OPTIONS[0]
    print(f"  Turns {turns}      -> {service.set_number_of_turns(turns)}")
    print(f"  Rows caught 4 -> {service.set_rows_caught('4')}")
    print(f"  Seed 2.0 lbs  -> {service.set_seed_weight('2.0')}")

    # Example 3: Rows beyond the drill's capacity
    print("\n" + "=" * 60)
    print("Example 3: Too many rows")
    print("=" * 60)
    try:
        service.set_rows_caught("99")
    except RowsExceedCapacity as e:
        print(f"  Rejected: {e.message}")
    print(f"  Result unchanged: {service.result}")


if __name__ == "__main__":
    main()
