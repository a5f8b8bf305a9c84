class DaylightError(Exception):
    """Base error."""

class InvalidCoordinateError(DaylightError, ValueError):
    """Raised when a latitude or longitude is outside its valid range."""

class CalendarConversionError(DaylightError, ValueError):
    """Raised when a Julian Day Number cannot become a valid calendar date-time."""

class PolarDayNightError(DaylightError, ArithmeticError):
    """
    Raised when the sun does not cross the horizon on the requested day.

    polar_day is True when the sun never sets, False when it never rises.
    """

    def __init__(self, cos_h0: float, lat_deg: float, delta_deg: float):
        self.cos_h0 = cos_h0
        self.lat_deg = lat_deg
        self.delta_deg = delta_deg
        self.polar_day = cos_h0 < -1.0
        kind = "polar day, sun never sets" if self.polar_day else "polar night, sun never rises"
        super().__init__(f"{kind} (cos H0 = {cos_h0:.6f} at lat {lat_deg:.4f}, decl {delta_deg:.4f})")
