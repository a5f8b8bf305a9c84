# reference/solar.py

from __future__ import annotations

import logging
import math
from typing import Callable, Optional, Tuple

from ..core.errors import PolarDayNightError
from ..core.types import GeoCoordinate, SolarEvents

logger = logging.getLogger("daylight.solar")

J2000 = 2451545.0
OBLIQUITY_DEG = 23.4397
H0_DEG = -0.833  # refraction + solar semi-diameter

Tracer = Callable[[str, float], None]


def log_trace(label: str, value: float) -> None:
    """Default trace hook: one DEBUG line per intermediate value."""
    logger.debug("%s: %s", label, value)


def normalized_date(j_date: float) -> float:
    """Whole days since J2000.0, with the 0.0008 day leap-second/TT correction."""
    return float(math.ceil(j_date - J2000 + 0.0008))


def mean_solar_time(n: float, lon_deg: float) -> float:
    return n - lon_deg / 360.0


def solar_mean_anomaly(j_star: float) -> float:
    return math.fmod(357.5291 + 0.98560028 * j_star, 360.0)


def equation_of_the_center(m_deg: float) -> float:
    m_rad = math.radians(m_deg)
    return 1.9148 * math.sin(m_rad) + 0.02 * math.sin(2.0 * m_rad) + 0.0003 * math.sin(3.0 * m_rad)


def ecliptic_longitude(m_deg: float, c_deg: float) -> float:
    # 102.9372 is the argument of perihelion
    return math.fmod(m_deg + c_deg + 180.0 + 102.9372, 360.0)


def declination_of_the_sun(lambda_deg: float) -> float:
    sin_delta = math.sin(math.radians(lambda_deg)) * math.sin(math.radians(OBLIQUITY_DEG))
    return math.degrees(math.asin(sin_delta))


def cos_hour_angle(lat_deg: float, delta_deg: float) -> float:
    """
    cos H0 = (sin h0 - sin φ sin δ) / (cos φ cos δ)

    Outside [-1, 1] the sun does not cross the horizon that day.
    """
    rlat = math.radians(lat_deg)
    rdel = math.radians(delta_deg)
    return (math.sin(math.radians(H0_DEG)) - math.sin(rlat) * math.sin(rdel)) / (math.cos(rlat) * math.cos(rdel))


def hour_angle(lat_deg: float, delta_deg: float) -> float:
    """
    Sunrise hour angle H0 in degrees.
    Raises PolarDayNightError instead of returning NaN for polar day/night.
    """
    x = cos_hour_angle(lat_deg, delta_deg)
    if not -1.0 <= x <= 1.0:
        raise PolarDayNightError(x, lat_deg, delta_deg)
    return math.degrees(math.acos(x))


def transit(j_star: float, m_deg: float, lambda_deg: float) -> float:
    """Julian date of solar transit (local true noon)."""
    return (
        J2000
        + j_star
        + 0.0053 * math.sin(math.radians(m_deg))
        - 0.0069 * math.sin(math.radians(2.0 * lambda_deg))
    )


def solar_events(location: GeoCoordinate, today: float, trace: Optional[Tracer] = None) -> SolarEvents:
    """
    Sunrise, sunset and transit for the day labelled by the Julian Day Number `today`.

    `trace(label, value)` receives every intermediate value; it defaults to
    DEBUG logging and never influences the result.
    """
    if trace is None:
        trace = log_trace

    trace("Lat", location.lat_deg)
    trace("Long", location.lon_deg)
    trace("Jtoday", today)
    n = normalized_date(today)
    trace("Normalized date", n)
    j_star = mean_solar_time(n, location.lon_deg)
    trace("Mean solar time", j_star)
    m = solar_mean_anomaly(j_star)
    trace("Solar mean anomaly", m)
    c = equation_of_the_center(m)
    trace("Equation of the center", c)
    lam = ecliptic_longitude(m, c)
    trace("Ecliptic longitude", lam)
    delta = declination_of_the_sun(lam)
    trace("Declination of the sun", delta)
    omega_0 = hour_angle(location.lat_deg, delta)
    trace("Hour angle", omega_0)
    j_transit = transit(j_star, m, lam)
    trace("Jtransit", j_transit)

    j_rise = j_transit - omega_0 / 360.0
    j_set = j_transit + omega_0 / 360.0
    trace("Jrise", j_rise)
    trace("Jset", j_set)
    return SolarEvents(rise_jd=j_rise, set_jd=j_set, transit_jd=j_transit, hour_angle_deg=omega_0)


def get_sunrise_sunset(lat: float, long: float, today: float, trace: Optional[Tracer] = None) -> Tuple[float, float]:
    """(j_rise, j_set) as fractional Julian Dates."""
    ev = solar_events(GeoCoordinate(lat_deg=lat, lon_deg=long), today, trace=trace)
    return ev.rise_jd, ev.set_jd
