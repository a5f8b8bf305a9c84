from __future__ import annotations

import argparse
from datetime import datetime, tzinfo
from email.utils import format_datetime
import logging
import sys
from typing import List, Optional


def format_report(rise: datetime, set_: datetime) -> List[str]:
    """The three output lines for a sunrise/sunset pair."""
    from daylight.core.time import split_duration

    h, m, s = split_duration(set_ - rise)
    return [
        f"Sunrise: {format_datetime(rise)}",
        f"Sunset: {format_datetime(set_)}",
        f"Sun length: {h}h, {m}m, {s}s",
    ]


def run(lat: float, lon: float, *, now: Optional[datetime] = None, tz: Optional[tzinfo] = None) -> List[str]:
    """
    Compute today's report for one location.

    Raises DaylightError subclasses; nothing is printed here.
    """
    from daylight.core import time as jt
    from daylight.core.types import GeoCoordinate
    from daylight.reference import solar

    log = logging.getLogger("daylight.cli")

    location = GeoCoordinate(lat_deg=lat, lon_deg=lon)
    today = jt.now_jdn(now)
    log.info("Julian calendar date: %s", jt.jdn_to_calendar(today, "julian"))

    events = solar.solar_events(location, float(today))
    rise = jt.julian_to_datetime(events.rise_jd, tz)
    set_ = jt.julian_to_datetime(events.set_jd, tz)
    return format_report(rise, set_)


def main(argv: list[str] | None = None) -> int:
    from daylight import config
    from daylight.core.errors import DaylightError, PolarDayNightError
    from daylight.logger import setup_logging

    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="daylight", description="Print today's sunrise, sunset and day length.")
    p.add_argument("--lat", type=float, default=config.LATITUDE, help="Observer latitude in degrees")
    p.add_argument("--lon", type=float, default=config.LONGITUDE, help="Observer longitude in degrees (positive East)")
    p.add_argument("-v", "--verbose", action="store_true", help="Log every intermediate value to stderr")
    args = p.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else None)

    try:
        lines = run(args.lat, args.lon)
    except PolarDayNightError as e:
        print(f"No sunrise/sunset today: {e}")
        return 0
    except DaylightError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
