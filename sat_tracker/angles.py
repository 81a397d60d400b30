"""Angle conversions, range helpers and the calendar table shared by the solar
position and tracker geometry modules.

All angles in degrees unless otherwise noted.
"""

import math

DEGREES_PER_HOUR = 15.0
MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def deg_to_rad(deg: float) -> float:
    """Convert degrees to radians."""
    return deg * (math.pi / 180.0)


def rad_to_deg(rad: float) -> float:
    """Convert radians to degrees."""
    return rad * (180.0 / math.pi)


def normalize_angle(angle: float) -> float:
    """Normalize angle to 0-360 degree range."""
    return angle % 360.0


def normalize_hours(hours: float) -> float:
    """Normalize a time of day to 0-24 hours."""
    return hours % 24.0


def wrap_pi(angle_rad: float) -> float:
    """Wrap an angle in radians into [-pi, pi].

    A single 2*pi correction is applied, which is enough for the difference of
    two angles that are each already in [0, 2*pi).
    """
    if angle_rad < -math.pi:
        return angle_rad + 2.0 * math.pi
    if angle_rad > math.pi:
        return angle_rad - 2.0 * math.pi
    return angle_rad


def clamp(value: float, low: float, high: float) -> float:
    """Clamp value to the closed interval [low, high]."""
    return max(low, min(high, value))


def clip_unit(value: float) -> float:
    """Clamp an argument for asin/acos to [-1, 1].

    Rounding can push a cosine or sine a hair past +/-1, which would make the
    inverse trig functions raise a math domain error.
    """
    return clamp(value, -1.0, 1.0)


def leap_year(year: int) -> bool:
    """Returns True if year is divisible by 4.

    The century exception is deliberately not applied: 1900 and 2100 count as
    leap years. The solar position algorithm is only valid for 1950-2050,
    where the simple rule agrees with the Gregorian calendar.
    """
    return year % 4 == 0


def days_in_months(year: int) -> list[int]:
    """Returns a list of days per month for the given year."""
    days = list(MONTH_DAYS)
    if leap_year(year):
        days[1] = 29
    return days
