"""Solar position from local standard time and geographic coordinates.

Michalsky, J. J. (1988), "The Astronomical Almanac's algorithm for
approximate solar position (1950-2050)", Solar Energy 40(3), 227-235,
with the solar azimuth replaced by Iqbal's formulation so that southern
latitudes are handled correctly.

For data averaged over an interval pass the midpoint of the interval, or the
midpoint of the daylight part of it when the interval contains sunrise or
sunset.

All angles in degrees unless otherwise noted.
"""

import math

from . import angles
from ._types import SolarPosition, TimeLocation

J2000_JD = 51545.0
REFRACTION_LIMIT = -0.56
EOT_WRAP_HOURS = 0.33


def day_of_year(year: int, month: int, day: int) -> int:
    """Calculate day of year (1-366) from year, month, day.

    Uses the divisible-by-4 leap rule, see angles.leap_year.
    """
    return sum(angles.days_in_months(year)[: month - 1]) + day


def zulu_time(hour: int, minute: int, timezone: int, doy: int) -> tuple[float, int]:
    """Convert local standard time to UTC hours.

    Returns:
        (zulu hours, day of year), the day shifted when the conversion crosses
        midnight.
    """
    zulu = hour + minute / 60.0 - timezone
    if zulu < 0.0:
        zulu += 24.0
        doy -= 1
    elif zulu > 24.0:
        zulu -= 24.0
        doy += 1
    return zulu, doy


def julian_date(year: int, doy: int, zulu: float) -> float:
    """Julian date minus 2400000 for the given UTC day of year and hour."""
    delta = year - 1949
    leap = int(delta / 4)
    return 32916.5 + delta * 365.0 + leap + doy + zulu / 24.0


def days_since_j2000(jd: float) -> float:
    """Days elapsed since 2000-01-01 12:00 UTC."""
    return jd - J2000_JD


def mean_longitude(time: float) -> float:
    """Mean longitude of the sun, 0-360 degrees."""
    return angles.normalize_angle(280.46 + 0.9856474 * time)


def mean_anomaly(time: float) -> float:
    """Mean anomaly of the sun in radians, 0-2pi."""
    return angles.deg_to_rad(angles.normalize_angle(357.528 + 0.9856003 * time))


def ecliptic_longitude(mnlong: float, mnanom: float) -> float:
    """Ecliptic longitude in radians, 0-2pi.

    Input: mean longitude in degrees, mean anomaly in radians.
    """
    eclong = mnlong + 1.915 * math.sin(mnanom) + 0.020 * math.sin(2.0 * mnanom)
    return angles.deg_to_rad(angles.normalize_angle(eclong))


def obliquity(time: float) -> float:
    """Obliquity of the ecliptic in radians."""
    return angles.deg_to_rad(23.439 - 0.0000004 * time)


def right_ascension(oblqec: float, eclong: float) -> float:
    """Right ascension in radians, placed in the quadrant of the ecliptic longitude."""
    num = math.cos(oblqec) * math.sin(eclong)
    den = math.cos(eclong)
    ra = math.atan(num / den)
    if den < 0.0:
        ra += math.pi
    elif num < 0.0:
        ra += 2.0 * math.pi
    return ra


def declination(oblqec: float, eclong: float) -> float:
    """Solar declination in radians."""
    return math.asin(math.sin(oblqec) * math.sin(eclong))


def greenwich_sidereal_time(time: float, zulu: float) -> float:
    """Greenwich mean sidereal time in hours, 0-24."""
    return angles.normalize_hours(6.697375 + 0.0657098242 * time + zulu)


def local_sidereal_time(gmst: float, longitude: float) -> float:
    """Local mean sidereal time in radians."""
    lmst = angles.normalize_hours(gmst + longitude / angles.DEGREES_PER_HOUR)
    return angles.deg_to_rad(lmst * angles.DEGREES_PER_HOUR)


def hour_angle(lmst: float, ra: float) -> float:
    """Hour angle in radians between -pi and pi. Negative before solar noon."""
    return angles.wrap_pi(lmst - ra)


def solar_elevation(dec: float, lat: float, ha: float) -> float:
    """Geometric solar elevation in radians (no refraction)."""
    arg = math.sin(dec) * math.sin(lat) + math.cos(dec) * math.cos(lat) * math.cos(ha)
    return math.asin(angles.clip_unit(arg))


def solar_azimuth(elv: float, dec: float, lat: float, ha: float) -> float:
    """Solar azimuth per Iqbal, degrees east of north in [0, 360).

    All inputs in radians. The azimuth is undefined with the sun straight up
    or down and is reported as due south.
    """
    if abs(elv) == math.pi / 2.0:
        return 180.0
    arg = (math.sin(elv) * math.sin(lat) - math.sin(dec)) / (math.cos(elv) * math.cos(lat))
    azm = math.acos(angles.clip_unit(arg))
    if -math.pi <= ha <= 0.0 or ha >= math.pi:
        azm = math.pi - azm
    else:
        azm = math.pi + azm
    return angles.normalize_angle(angles.rad_to_deg(azm))


def refraction(elevation: float) -> float:
    """Atmospheric refraction correction in degrees for a geometric elevation in degrees."""
    if elevation > REFRACTION_LIMIT:
        return (
            3.51561
            * (0.1594 + 0.0196 * elevation + 0.00002 * elevation**2)
            / (1.0 + 0.505 * elevation + 0.0845 * elevation**2)
        )
    return -REFRACTION_LIMIT


def apparent_elevation(elevation: float) -> float:
    """Refraction-corrected elevation in degrees, never above 90."""
    return min(elevation + refraction(elevation), 90.0)


def equation_of_time(mnlong: float, ra: float) -> float:
    """Equation of time in hours.

    Input: mean longitude in degrees, right ascension in radians.
    Mean longitude and right ascension can sit on opposite sides of 0/360,
    which shows up as a difference near +/-24 hours.
    """
    eot = (mnlong - angles.rad_to_deg(ra)) / angles.DEGREES_PER_HOUR
    if eot < -EOT_WRAP_HOURS:
        eot += 24.0
    elif eot > EOT_WRAP_HOURS:
        eot -= 24.0
    return eot


def sunrise_hour_angle(lat: float, dec: float) -> float:
    """Sunrise hour angle in radians.

    0 during polar night (no sunrise), pi during polar day (no sunset).
    """
    return math.acos(angles.clip_unit(-math.tan(lat) * math.tan(dec)))


def eccentricity_correction(mnanom: float) -> float:
    """Eccentricity correction factor 1/Eo**2, Eo being the Earth-Sun distance in AU."""
    eo = 1.00014 - 0.01671 * math.cos(mnanom) - 0.00014 * math.cos(2.0 * mnanom)
    return 1.0 / (eo * eo)


def solar_position(tl: TimeLocation) -> SolarPosition:
    """Calculate the sun's position for a local standard time and place."""
    doy = day_of_year(tl.year, tl.month, tl.day)
    zulu, doy = zulu_time(tl.hour, tl.minute, tl.timezone, doy)
    time = days_since_j2000(julian_date(tl.year, doy, zulu))

    mnlong = mean_longitude(time)
    mnanom = mean_anomaly(time)
    eclong = ecliptic_longitude(mnlong, mnanom)
    oblqec = obliquity(time)
    ra = right_ascension(oblqec, eclong)
    dec = declination(oblqec, eclong)

    lmst = local_sidereal_time(greenwich_sidereal_time(time, zulu), tl.longitude)
    ha = hour_angle(lmst, ra)
    lat = angles.deg_to_rad(tl.latitude)

    elv = solar_elevation(dec, lat, ha)
    azimuth = solar_azimuth(elv, dec, lat, ha)
    elevation = apparent_elevation(angles.rad_to_deg(elv))

    eot = equation_of_time(mnlong, ra)
    half_day = angles.rad_to_deg(sunrise_hour_angle(lat, dec)) / angles.DEGREES_PER_HOUR
    # offset between local standard time and local mean solar time, hours
    meridian = tl.longitude / angles.DEGREES_PER_HOUR - tl.timezone

    return SolarPosition(
        azimuth=azimuth,
        zenith=90.0 - elevation,
        elevation=elevation,
        declination=angles.rad_to_deg(dec),
        sunrise=12.0 - half_day - meridian - eot,
        sunset=12.0 + half_day - meridian - eot,
        eccentricity=eccentricity_correction(mnanom),
        true_solar_time=tl.hour + tl.minute / 60.0 + meridian + eot,
    )
