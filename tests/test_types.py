"""Input and configuration validation tests."""

import dataclasses

import pytest

from sat_tracker._types import (
    DEFAULT_LOCATIONS,
    Location,
    SimulationConfig,
    TimeLocation,
    TrackerConfig,
)
from sat_tracker.errors import InvalidConfigurationError, InvalidInputError


def seattle_noon(**changes):
    base = dict(
        year=2017,
        month=6,
        day=21,
        hour=12,
        minute=0,
        timezone=-8,
        latitude=47.608358,
        longitude=-122.323175,
    )
    base.update(changes)
    return TimeLocation(**base)


class TestTimeLocation:
    def test_valid(self):
        tl = seattle_noon()
        assert tl.month == 6

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            seattle_noon().hour = 3

    @pytest.mark.parametrize(
        "changes",
        [
            {"month": 0},
            {"month": 13},
            {"day": 0},
            {"day": 31, "month": 6},
            {"day": 29, "month": 2, "year": 2017},
            {"hour": 24},
            {"minute": 60},
            {"minute": -1},
            {"timezone": 15},
            {"latitude": 90.5},
            {"longitude": -181.0},
        ],
    )
    def test_rejects_invalid(self, changes):
        with pytest.raises(InvalidInputError):
            seattle_noon(**changes)

    def test_leap_day_accepted(self):
        assert seattle_noon(year=2016, month=2, day=29).day == 29

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            seattle_noon(month=13)


class TestTrackerConfig:
    def test_defaults(self):
        c = TrackerConfig()
        assert c.yaw == 0.0
        assert c.pitch == 0.0
        assert c.roll == 0.0
        assert c.gcr == 0.35
        assert c.night_stow == -10.0
        assert c.range_of_motion == 60.0

    @pytest.mark.parametrize("gcr", [0.0, -0.2, 1.01])
    def test_rejects_gcr(self, gcr):
        with pytest.raises(InvalidConfigurationError):
            TrackerConfig(gcr=gcr)

    def test_gcr_one_allowed(self):
        assert TrackerConfig(gcr=1.0).gcr == 1.0

    @pytest.mark.parametrize("rom", [0.0, -60.0])
    def test_rejects_range_of_motion(self, rom):
        with pytest.raises(InvalidConfigurationError):
            TrackerConfig(range_of_motion=rom)

    def test_with_roll_copies(self):
        c = TrackerConfig(yaw=5.0)
        rolled = c.with_roll(22.5)
        assert rolled.roll == 22.5
        assert rolled.yaw == 5.0
        assert c.roll == 0.0


class TestLocation:
    def test_default_sites(self):
        names = [loc.name for loc in DEFAULT_LOCATIONS]
        assert names == ["Seattle", "San_Francisco", "Mexico_City", "San_Diego", "Anchorage"]
        assert DEFAULT_LOCATIONS[0].timezone == -8

    def test_rejects_blank_name(self):
        with pytest.raises(InvalidInputError):
            Location("", 10.0, 10.0, 0)

    def test_rejects_latitude(self):
        with pytest.raises(InvalidInputError):
            Location("Nowhere", -91.0, 10.0, 0)


class TestSimulationConfig:
    def test_defaults(self):
        c = SimulationConfig()
        assert c.year == 2017
        assert c.bin_size == 5.0
        assert c.zone_limit == 5.0
        assert c.tracker == TrackerConfig()
        assert c.locations == DEFAULT_LOCATIONS

    def test_rejects_bin_size(self):
        with pytest.raises(InvalidConfigurationError):
            SimulationConfig(bin_size=0.0)

    def test_rejects_empty_locations(self):
        with pytest.raises(InvalidConfigurationError):
            SimulationConfig(locations=())

    def test_rejects_duplicate_names(self):
        loc = Location("Twice", 10.0, 10.0, 0)
        with pytest.raises(InvalidConfigurationError):
            SimulationConfig(locations=(loc, loc))
