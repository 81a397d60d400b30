"""Frozen dataclasses for all structured inputs, configs and return types."""

import dataclasses
from dataclasses import dataclass, field
from pathlib import Path

from .angles import days_in_months
from .errors import InvalidConfigurationError, InvalidInputError


def _check_location(latitude: float, longitude: float) -> None:
    if not -90.0 <= latitude <= 90.0:
        raise InvalidInputError(f"latitude must be within [-90, 90], got {latitude}")
    if not -180.0 <= longitude <= 180.0:
        raise InvalidInputError(f"longitude must be within [-180, 180], got {longitude}")


def _check_timezone(timezone: int) -> None:
    if not -12 <= timezone <= 14:
        raise InvalidInputError(f"timezone must be within [-12, 14] hours, got {timezone}")


@dataclass(frozen=True)
class TimeLocation:
    """An instant in local standard time at a place on Earth.

    timezone is the UTC offset in whole hours, west of Greenwich negative.
    """

    year: int
    month: int
    day: int
    hour: int
    minute: int
    timezone: int
    latitude: float
    longitude: float

    def __post_init__(self):
        if not 1 <= self.month <= 12:
            raise InvalidInputError(f"month must be within 1-12, got {self.month}")
        last_day = days_in_months(self.year)[self.month - 1]
        if not 1 <= self.day <= last_day:
            raise InvalidInputError(
                f"day must be within 1-{last_day} for {self.year}-{self.month:02d}, got {self.day}"
            )
        if not 0 <= self.hour <= 23:
            raise InvalidInputError(f"hour must be within 0-23, got {self.hour}")
        if not 0 <= self.minute <= 59:
            raise InvalidInputError(f"minute must be within 0-59, got {self.minute}")
        _check_timezone(self.timezone)
        _check_location(self.latitude, self.longitude)


@dataclass(frozen=True)
class SolarPosition:
    azimuth: float
    zenith: float
    elevation: float
    declination: float
    sunrise: float
    sunset: float
    eccentricity: float
    true_solar_time: float


@dataclass(frozen=True)
class TrackerConfig:
    """Single-axis tracker orientation and limits.

    yaw, pitch and roll are the tracker's alpha, beta and gamma angles.
    roll is the current rotation; use with_roll() to get the config for a new
    rotation.
    """

    yaw: float = 0.0
    pitch: float = 0.0
    roll: float = 0.0
    gcr: float = 0.35
    night_stow: float = -10.0
    range_of_motion: float = 60.0

    def __post_init__(self):
        if not 0.0 < self.gcr <= 1.0:
            raise InvalidConfigurationError(
                f"ground coverage ratio must be within (0, 1], got {self.gcr}"
            )
        if self.range_of_motion <= 0.0:
            raise InvalidConfigurationError(
                f"range of motion must be positive, got {self.range_of_motion}"
            )

    def with_roll(self, roll: float) -> "TrackerConfig":
        """Return a copy of this config rotated to roll degrees."""
        return dataclasses.replace(self, roll=roll)


@dataclass(frozen=True)
class TrackerState:
    """Tracker angles for one instant."""

    ideal_angle: float
    angle: float
    incidence: float
    tracker: TrackerConfig


@dataclass(frozen=True)
class Location:
    name: str
    latitude: float
    longitude: float
    timezone: int

    def __post_init__(self):
        if not self.name:
            raise InvalidInputError("location name is required")
        _check_timezone(self.timezone)
        _check_location(self.latitude, self.longitude)


@dataclass(frozen=True)
class TrackerRow:
    location: str
    year: int
    month: int
    day: int
    hour: int
    minute: int
    angle: float


@dataclass(frozen=True)
class AngleBin:
    location: str
    angle_bin: float
    count: int
    percent_of_time: float


@dataclass(frozen=True)
class LocationSummary:
    location: str
    bins: list[AngleBin]
    percent_in_zone: float


DEFAULT_LOCATIONS = (
    Location("Seattle", 47.608358, -122.323175, -8),
    Location("San_Francisco", 37.768977, -122.440647, -8),
    Location("Mexico_City", 19.435303, -99.1438270, -6),
    Location("San_Diego", 32.728205, -117.137621, -8),
    Location("Anchorage", 61.160612, -150.014821, -9),
)


@dataclass(frozen=True)
class SimulationConfig:
    year: int = 2017
    tracker: TrackerConfig = field(default_factory=TrackerConfig)
    locations: tuple[Location, ...] = DEFAULT_LOCATIONS
    bin_size: float = 5.0
    zone_limit: float = 5.0
    output_dir: Path = Path(".")

    def __post_init__(self):
        if self.bin_size <= 0.0:
            raise InvalidConfigurationError(f"bin size must be positive, got {self.bin_size}")
        if self.zone_limit <= 0.0:
            raise InvalidConfigurationError(
                f"zone limit must be positive, got {self.zone_limit}"
            )
        if not self.locations:
            raise InvalidConfigurationError("at least one location is required")
        names = [loc.name for loc in self.locations]
        if len(set(names)) != len(names):
            raise InvalidConfigurationError(f"location names must be unique, got {names}")
