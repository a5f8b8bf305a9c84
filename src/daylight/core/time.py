from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone, tzinfo
import math
from typing import Optional, Tuple

from .errors import CalendarConversionError
from .types import CalendarDate, CalendarName


# ============================================================
# Calendar date <-> JDN  (Fliegel–Van Flandern)
# ============================================================

def gregorian_to_jdn(year: int, month: int, day: int) -> int:
    """Gregorian date -> JDN (proleptic Gregorian)."""
    a = (14 - month) // 12
    y2 = year + 4800 - a
    m2 = month + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045


def jdn_to_gregorian(jdn: int) -> Tuple[int, int, int]:
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4

    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153

    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return year, month, day


def julian_to_jdn(year: int, month: int, day: int) -> int:
    """Julian calendar date -> JDN. JDN 0 is Julian -4712-01-01 (4713 BC)."""
    a = (14 - month) // 12
    y2 = year + 4800 - a
    m2 = month + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - 32083


def jdn_to_julian(jdn: int) -> Tuple[int, int, int]:
    c = jdn + 32082
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153

    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = d - 4800 + (m // 10)
    return year, month, day


def calendar_to_jdn(d: CalendarDate) -> int:
    if d.calendar == "julian":
        return julian_to_jdn(d.year, d.month, d.day)
    return gregorian_to_jdn(d.year, d.month, d.day)


def jdn_to_calendar(jdn: int, calendar: CalendarName = "gregorian") -> CalendarDate:
    if calendar == "julian":
        y, m, d = jdn_to_julian(jdn)
    elif calendar == "gregorian":
        y, m, d = jdn_to_gregorian(jdn)
    else:
        raise CalendarConversionError(f"Unknown calendar '{calendar}'")
    return CalendarDate(y, m, d, calendar)


# ============================================================
# "Now" sampling
# ============================================================

def _utc_now(now: Optional[datetime]) -> datetime:
    if now is None:
        return datetime.now(timezone.utc)
    if now.tzinfo is None:
        raise CalendarConversionError("datetime must be timezone-aware")
    return now.astimezone(timezone.utc)


def today_julian(now: Optional[datetime] = None) -> CalendarDate:
    """Current UTC civil day expressed in the Julian calendar."""
    d = _utc_now(now).date()
    return jdn_to_calendar(gregorian_to_jdn(d.year, d.month, d.day), "julian")


def now_jdn(now: Optional[datetime] = None) -> int:
    """
    Julian Day Number of the current UTC civil day.

    The clock is read on every call unless `now` is given.
    """
    return calendar_to_jdn(today_julian(now))


# ============================================================
# JD -> civil datetime
# ============================================================

def split_day_fraction(frac: float) -> Tuple[int, int, int]:
    """
    Day fraction -> (hours, minutes, seconds), seconds truncated.
    """
    rem = frac * 24.0
    h = math.floor(rem)
    rem = (rem - h) * 60.0
    m = math.floor(rem)
    rem = (rem - m) * 60.0
    s = math.floor(rem)
    if not (0 <= h < 24 and 0 <= m < 60 and 0 <= s < 60):
        raise CalendarConversionError(f"day fraction {frac!r} gives invalid time {h}:{m}:{s}")
    return int(h), int(m), int(s)


def astronomical_to_civil(dt: datetime) -> datetime:
    """
    Re-base a datetime built from an astronomical day (boundary at noon) onto
    the civil day it belongs to: +12 hours, then -1 calendar day.
    """
    shifted = dt + timedelta(hours=12)
    return shifted - timedelta(days=1)


def julian_to_datetime(j: float, tz: Optional[tzinfo] = None) -> datetime:
    """
    Fractional JD -> aware datetime in `tz` (host local offset when None).

    The integer part is taken as the Gregorian JDN label of the day and the
    fraction as the time of day; astronomical_to_civil() then moves the
    result onto the civil day.
    """
    if not math.isfinite(j):
        raise CalendarConversionError(f"Julian date {j!r} is not finite")
    jdn = math.floor(j)
    h, m, s = split_day_fraction(j - jdn)
    d: date = jdn_to_calendar(jdn, "gregorian").to_date()
    dt = datetime.combine(d, time(h, m, s), tzinfo=timezone.utc)
    try:
        return astronomical_to_civil(dt).astimezone(tz)
    except OverflowError as e:
        raise CalendarConversionError(f"Julian date {j!r} is outside the datetime range") from e


def split_duration(td: timedelta) -> Tuple[int, int, int]:
    """(whole hours, leftover minutes, leftover seconds) of a duration."""
    total_s = int(td.total_seconds())
    total_m = int(total_s / 60)
    hours = int(total_m / 60)
    return hours, total_m - hours * 60, total_s - total_m * 60
