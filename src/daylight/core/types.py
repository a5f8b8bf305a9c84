from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Iterator, Literal

from .errors import CalendarConversionError, InvalidCoordinateError

CalendarName = Literal["julian", "gregorian"]

_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int, calendar: CalendarName) -> bool:
    if calendar == "julian":
        return year % 4 == 0
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(year: int, month: int, calendar: CalendarName) -> int:
    if month == 2 and is_leap_year(year, calendar):
        return 29
    return _MONTH_DAYS[month - 1]


@dataclass(frozen=True)
class GeoCoordinate:
    """Observer position in decimal degrees (longitude positive East)."""
    lat_deg: float
    lon_deg: float

    def __post_init__(self) -> None:
        if not -90.0 <= self.lat_deg <= 90.0:
            raise InvalidCoordinateError(f"latitude {self.lat_deg} outside [-90, 90]")
        if not -180.0 <= self.lon_deg <= 180.0:
            raise InvalidCoordinateError(f"longitude {self.lon_deg} outside [-180, 180]")

    @classmethod
    def from_dms(
        cls,
        lat_d: float, lat_m: float, lat_s: float,
        lon_d: float, lon_m: float, lon_s: float,
    ) -> GeoCoordinate:
        """Build from degrees/minutes/seconds; the sign of the degree part applies to the whole angle."""
        def dms(d: float, m: float, s: float) -> float:
            sign = -1.0 if d < 0 else 1.0
            return sign * (abs(d) + m / 60.0 + s / 60.0 ** 2)
        return cls(lat_deg=dms(lat_d, lat_m, lat_s), lon_deg=dms(lon_d, lon_m, lon_s))


@dataclass(frozen=True)
class CalendarDate:
    year: int
    month: int
    day: int
    calendar: CalendarName = "gregorian"

    def __post_init__(self) -> None:
        if self.calendar not in ("julian", "gregorian"):
            raise CalendarConversionError(f"Unknown calendar '{self.calendar}'")
        if not 1 <= self.month <= 12:
            raise CalendarConversionError(f"month {self.month} outside 1..12")
        last = days_in_month(self.year, self.month, self.calendar)
        if not 1 <= self.day <= last:
            raise CalendarConversionError(
                f"day {self.day} outside 1..{last} for {self.calendar} {self.year}-{self.month:02d}"
            )

    def to_date(self) -> date:
        """Gregorian dates only; datetime.date is proleptic Gregorian."""
        if self.calendar != "gregorian":
            raise CalendarConversionError("only Gregorian dates map onto datetime.date")
        try:
            return date(self.year, self.month, self.day)
        except ValueError as e:
            raise CalendarConversionError(str(e)) from e


@dataclass(frozen=True)
class SolarEvents:
    """Sunrise/sunset as fractional Julian Dates, with the transit they straddle."""
    rise_jd: float
    set_jd: float
    transit_jd: float
    hour_angle_deg: float

    def __iter__(self) -> Iterator[float]:
        return iter((self.rise_jd, self.set_jd))

    @property
    def day_length(self) -> float:
        """Daylight in days."""
        return self.set_jd - self.rise_jd
