"""Validation of the raw text typed on the calibration form."""

import re
from typing import Iterable, Optional, Union

from ..exceptions import InvalidTurnCount, RowsExceedCapacity

_NON_DIGITS = re.compile(r"[^0-9]")
_NON_DECIMAL = re.compile(r"[^0-9.]")

# Turn counts offered by the calibration picker, per deployment
TURN_OPTION_PROFILES = {
    "default": (1, 10, 20, 30),
    "extended": (10, 20, 30, 40),
}
DEFAULT_TURN_OPTIONS = TURN_OPTION_PROFILES["default"]


def clean_whole_number(text: Optional[str]) -> str:
    """Strip everything but digits."""
    return _NON_DIGITS.sub("", text or "")


def clean_decimal(text: Optional[str]) -> str:
    """Strip everything but digits and the first decimal point."""
    cleaned = _NON_DECIMAL.sub("", text or "")
    point = cleaned.find(".")
    if point >= 0:
        cleaned = cleaned[: point + 1] + cleaned[point + 1 :].replace(".", "")
    return cleaned


def validate_rows_caught(text: Optional[str], total_rows: Optional[int]) -> Optional[int]:
    """
    Validate the number of rows caught.

    Args:
        text: Raw user text
        total_rows: Rows available on the drill, or None when the drill is
            not configured yet (no capacity check)

    Returns:
        The whole number entered, or None when nothing was entered

    Raises:
        RowsExceedCapacity: If the value is greater than total_rows
    """
    value = clean_whole_number(text)
    if value == "":
        return None

    rows = int(value)
    if total_rows is not None and rows > total_rows:
        raise RowsExceedCapacity(total_rows)
    return rows


def validate_seed_weight(text: Optional[str]) -> Optional[float]:
    """
    Validate the weight of seed caught, in pounds.

    Returns:
        The weight, or None when nothing usable was entered
    """
    value = clean_decimal(text)
    if value in ("", "."):
        return None
    return float(value)


def validate_number_of_turns(value: Union[int, str, None], options: Iterable[int]) -> int:
    """
    Check a turn count against the options offered by the picker.

    Raises:
        InvalidTurnCount: If the value is not one of the options
    """
    options = tuple(options)
    if isinstance(value, int) and not isinstance(value, bool):
        turns = value
    else:
        digits = clean_whole_number(str(value) if value is not None else "")
        if digits == "":
            raise InvalidTurnCount(value, options)
        turns = int(digits)

    if turns not in options:
        raise InvalidTurnCount(value, options)
    return turns
