"""
Configuration with environment variable support.

Settings can be overridden via environment variables or a .env file at the
project root. Command line flags take precedence over both.
"""

import os
from pathlib import Path
from typing import Literal
from dotenv import load_dotenv

from daylight.core.types import GeoCoordinate

# Load .env file from project root (two levels up from src/daylight/)
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

# Observer location, default 48°21'19.1"N 9°54'21.9"E
DEFAULT_LATITUDE: float = 48.0 + 21.0 / 60.0 + 19.1 / 60.0 ** 2
DEFAULT_LONGITUDE: float = 9.0 + 54.0 / 60.0 + 21.9 / 60.0 ** 2

LATITUDE: float = float(os.getenv("DAYLIGHT_LATITUDE", str(DEFAULT_LATITUDE)))
LONGITUDE: float = float(os.getenv("DAYLIGHT_LONGITUDE", str(DEFAULT_LONGITUDE)))

# Diagnostic stream; WARNING keeps the per-step trace quiet
LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = os.getenv("DAYLIGHT_LOG_LEVEL", "WARNING").upper()


def default_location() -> GeoCoordinate:
    """Validated location from LATITUDE/LONGITUDE."""
    return GeoCoordinate(lat_deg=LATITUDE, lon_deg=LONGITUDE)
