"""daylight public API.

Sunrise/sunset from the Julian-date sunrise equation. Keep this surface small.
"""

from .core.errors import (
    DaylightError,
    InvalidCoordinateError,
    CalendarConversionError,
    PolarDayNightError,
)
from .core.time import (
    now_jdn,
    today_julian,
    julian_to_datetime,
    astronomical_to_civil,
    split_duration,
)
from .core.types import CalendarDate, GeoCoordinate, SolarEvents
from .reference.solar import get_sunrise_sunset, solar_events

__all__ = [
    "DaylightError",
    "InvalidCoordinateError",
    "CalendarConversionError",
    "PolarDayNightError",
    "now_jdn",
    "today_julian",
    "julian_to_datetime",
    "astronomical_to_civil",
    "split_duration",
    "CalendarDate",
    "GeoCoordinate",
    "SolarEvents",
    "get_sunrise_sunset",
    "solar_events",
]
