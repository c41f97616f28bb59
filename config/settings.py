"""Application settings and configuration."""

import os
from pathlib import Path

from src.domain.entities.drill_settings import (
    DISTANCE_PER_TURN_KEY,
    DRILL_WIDTH_KEY,
    ROW_SPACING_KEY,
)
from src.domain.use_cases.validate_calibration_input import TURN_OPTION_PROFILES
from src.domain.use_cases.validate_drill_config import ROW_SPACING_LIMITS

# Base directory
BASE_DIR = Path(__file__).parent.parent

# Data paths
DATA_DIR = BASE_DIR / "data"
SETTINGS_FILE = Path(os.getenv("SOW_SMART_SETTINGS_FILE", str(DATA_DIR / "drill_settings.csv")))

# Keys for persistent storage
STORAGE_KEYS = {
    "drill_width": DRILL_WIDTH_KEY,  # feet
    "row_spacing": ROW_SPACING_KEY,  # inches
    "distance_per_turn": DISTANCE_PER_TURN_KEY,  # inches
}

# Values pre-filled on the configuration form
DEFAULT_DRILL_SETTINGS = {
    DRILL_WIDTH_KEY: "20",  # feet
    ROW_SPACING_KEY: "7.5",  # inches
    DISTANCE_PER_TURN_KEY: "86",  # inches
}

# Turn counts offered by the calibration picker
TURN_PROFILE = os.getenv("SOW_SMART_TURN_PROFILE", "default")
TURN_OPTIONS = TURN_OPTION_PROFILES.get(TURN_PROFILE, TURN_OPTION_PROFILES["default"])

# API settings
API_SETTINGS = {
    "title": "Sow Smart Calibration API",
    "description": "API for seed drill calibration and seeding rate estimation",
    "version": "1.0.0",
}

# Logging settings
LOG_LEVEL = os.getenv("SOW_SMART_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
