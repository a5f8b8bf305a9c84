# tests/test_types.py

import pytest

from daylight.core.errors import InvalidCoordinateError
from daylight.core.types import GeoCoordinate, SolarEvents, days_in_month, is_leap_year


def test_geo_coordinate_from_dms():
    loc = GeoCoordinate.from_dms(48, 21, 19.1, 9, 54, 21.9)
    assert loc.lat_deg == pytest.approx(48.3553055556)
    assert loc.lon_deg == pytest.approx(9.9060833333)

    south_west = GeoCoordinate.from_dms(-33, 52, 0, -70, 30, 0)
    assert south_west.lat_deg == pytest.approx(-33.8666666667)
    assert south_west.lon_deg == pytest.approx(-70.5)


@pytest.mark.parametrize("lat,lon", [(90.5, 0.0), (-91.0, 0.0), (0.0, 180.1), (0.0, -200.0)])
def test_geo_coordinate_range(lat, lon):
    with pytest.raises(InvalidCoordinateError):
        GeoCoordinate(lat, lon)


def test_geo_coordinate_bounds_are_inclusive():
    GeoCoordinate(90.0, 180.0)
    GeoCoordinate(-90.0, -180.0)


def test_leap_rules():
    assert is_leap_year(1900, "julian")
    assert not is_leap_year(1900, "gregorian")
    assert is_leap_year(2000, "gregorian")
    assert days_in_month(2024, 2, "gregorian") == 29
    assert days_in_month(2023, 2, "gregorian") == 28
    assert days_in_month(2024, 12, "julian") == 31


def test_solar_events_unpacks_as_pair():
    ev = SolarEvents(rise_jd=10.25, set_jd=10.75, transit_jd=10.5, hour_angle_deg=90.0)
    rise, sunset = ev
    assert (rise, sunset) == (10.25, 10.75)
    assert ev.day_length == 0.5
