"""CLI interface for seed drill calibration."""

import argparse
import logging
import sys
from typing import List, Optional

import pandas as pd

from ...application.services.calibration_service import CalibrationService
from ...domain.exceptions import SettingsStoreError, ValidationError
from ...domain.use_cases.build_rate_table import BuildRateTableUseCase, summarize_rates
from ...infrastructure.repositories.csv_settings_repository import CSVSettingsRepository

from config.settings import (
    DEFAULT_DRILL_SETTINGS,
    LOG_FORMAT,
    LOG_LEVEL,
    ROW_SPACING_LIMITS,
    SETTINGS_FILE,
    TURN_OPTIONS,
)

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Sow Smart seed drill calibration")
    parser.add_argument(
        "--settings-file",
        type=str,
        default=str(SETTINGS_FILE),
        help="CSV file holding the drill settings",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # === configure: validate and save drill settings ===
    configure_parser = subparsers.add_parser("configure", help="Save drill width, row spacing and distance per turn")
    configure_parser.add_argument(
        "--width", type=str, default=DEFAULT_DRILL_SETTINGS["drill_width"], help="Drill width (feet)"
    )
    configure_parser.add_argument(
        "--spacing", type=str, default=DEFAULT_DRILL_SETTINGS["row_spacing"], help="Row spacing (inches)"
    )
    configure_parser.add_argument(
        "--distance",
        type=str,
        default=DEFAULT_DRILL_SETTINGS["distance_per_turn"],
        help="Distance per turn (inches)",
    )

    # === show: print current settings ===
    subparsers.add_parser("show", help="Show the saved drill settings")

    # === calculate: one calibration run ===
    calculate_parser = subparsers.add_parser("calculate", help="Compute lbs/acre for a calibration run")
    calculate_parser.add_argument(
        "--turns", type=int, default=TURN_OPTIONS[0], choices=TURN_OPTIONS, help="Number of turns"
    )
    calculate_parser.add_argument("--rows", type=str, required=True, help="Rows caught")
    calculate_parser.add_argument("--weight", type=str, required=True, help="Seed caught (lbs)")

    # === batch: table of calibration runs ===
    batch_parser = subparsers.add_parser("batch", help="Compute lbs/acre for every run in a CSV file")
    batch_parser.add_argument(
        "--input", type=str, required=True, help="CSV with number_of_turns, rows_caught, seed_weight"
    )
    batch_parser.add_argument("--output", type=str, default=None, help="Where to write the rate table")

    return parser


def print_settings(service: CalibrationService) -> None:
    summary = service.settings_summary()
    print("\n" + "=" * 40)
    print(" CURRENT SETTINGS ")
    print("=" * 40)
    print(f" Width:         {summary['drill_width_feet']:g} feet")
    print(f" Spacing:       {summary['row_spacing_inches']:g} inches")
    print(f" Distance/Turn: {summary['distance_per_turn_inches']:g} inches")
    print(f" Total Rows:    {summary['total_rows']}")
    print("=" * 40)


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(
        level=LOG_LEVEL,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    args = build_parser().parse_args(argv)

    # === Initialize repository and service ===
    repository = CSVSettingsRepository(args.settings_file)
    service = CalibrationService(
        repository,
        turn_options=TURN_OPTIONS,
        spacing_limits=ROW_SPACING_LIMITS,
        form_defaults=DEFAULT_DRILL_SETTINGS,
    )
    try:
        service.load_settings()
    except SettingsStoreError as e:
        print(f"Error: {e.message}")
        return 1

    # === Command: configure ===
    if args.command == "configure":
        try:
            settings = service.save_settings(args.width, args.spacing, args.distance)
        except (ValidationError, SettingsStoreError) as e:
            logger.error(f"Settings rejected: {e.message}")
            print(f"Error: {e.message}")
            return 1
        logger.info(f"Settings saved to {repository.data_file}: {settings}")
        print_settings(service)
        return 0

    if service.settings is None:
        print("No drill settings saved yet.")
        print("Next: sow-smart configure --width 20 --spacing 7.5 --distance 86")
        return 1

    # === Command: show ===
    if args.command == "show":
        print_settings(service)
        return 0

    # === Command: calculate ===
    if args.command == "calculate":
        try:
            service.set_number_of_turns(args.turns)
            service.set_rows_caught(args.rows)
            result = service.set_seed_weight(args.weight)
        except ValidationError as e:
            print(f"Error: {e.message}")
            return 1

        print("\n" + "=" * 40)
        print(" CALIBRATION RESULT ")
        print("=" * 40)
        print(f" Turns:        {service.number_of_turns}")
        print(f" Rows Caught:  {service.rows_caught} of {service.total_rows}")
        print(f" Seed Caught:  {service.seed_weight} lbs")
        print("-" * 40)
        print(f" Result:       {result}")
        if not result.is_calculated:
            print(f" Note:         {result.status.describe()}")
        print("=" * 40)
        return 0

    # === Command: batch ===
    if args.command == "batch":
        try:
            runs = pd.read_csv(args.input)
            table = BuildRateTableUseCase().execute(service.settings, runs)
        except (OSError, ValueError) as e:
            logger.error(f"Batch calculation failed: {e}", exc_info=True)
            print(f"Error: {e}")
            return 1

        if args.output:
            table.to_csv(args.output, index=False)
            print(f"Rate table saved to: {args.output}")
        else:
            print(table.to_string(index=False))

        summary = summarize_rates(table)
        print("-" * 40)
        print(f" Runs calculated: {summary['count']} of {len(table)}")
        if summary["count"]:
            print(f" Mean rate:       {summary['mean']:g} lbs/acre")
            print(f" Std deviation:   {summary['std']:g} lbs/acre")
            print(f" Range:           {summary['min']:g} - {summary['max']:g} lbs/acre")
        return 0

    return 1


if __name__ == "__main__":
    sys.exit(main())
