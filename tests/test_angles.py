"""Angle conversion, range helper and calendar tests."""

import math

import pytest

from sat_tracker.angles import (
    clamp,
    clip_unit,
    days_in_months,
    deg_to_rad,
    leap_year,
    normalize_angle,
    normalize_hours,
    rad_to_deg,
    wrap_pi,
)


class TestDegRadRoundtrip:
    @pytest.mark.parametrize(
        "deg", [0.0, 45.0, 90.0, 180.0, 270.0, 360.0, -45.0, -180.0, 123.456]
    )
    def test_roundtrip(self, deg):
        assert rad_to_deg(deg_to_rad(deg)) == pytest.approx(deg, abs=1e-10)

    @pytest.mark.parametrize("rad", [0.0, 1e-6, 0.5, math.pi, -2.0, 12.3456, 1e4])
    def test_roundtrip_radians(self, rad):
        assert deg_to_rad(rad_to_deg(rad)) == pytest.approx(rad, abs=1e-9)

    def test_known_conversions(self):
        assert deg_to_rad(180.0) == pytest.approx(math.pi, abs=1e-10)
        assert deg_to_rad(90.0) == pytest.approx(math.pi / 2, abs=1e-10)
        assert deg_to_rad(0.0) == pytest.approx(0.0, abs=1e-10)
        assert rad_to_deg(math.pi) == pytest.approx(180.0, abs=1e-10)


class TestNormalizeAngle:
    @pytest.mark.parametrize(
        "input_angle, expected",
        [
            (0.0, 0.0),
            (45.0, 45.0),
            (360.0, 0.0),
            (361.0, 1.0),
            (-1.0, 359.0),
            (-90.0, 270.0),
            (810.0, 90.0),
            (-450.0, 270.0),
        ],
    )
    def test_basic(self, input_angle, expected):
        assert normalize_angle(input_angle) == pytest.approx(expected, abs=1e-9)

    def test_hours(self):
        assert normalize_hours(25.5) == pytest.approx(1.5)
        assert normalize_hours(-0.5) == pytest.approx(23.5)
        assert normalize_hours(12.0) == pytest.approx(12.0)


class TestWrapPi:
    def test_inside_range_untouched(self):
        assert wrap_pi(0.5) == 0.5
        assert wrap_pi(-math.pi) == -math.pi
        assert wrap_pi(math.pi) == math.pi

    def test_wraps_once(self):
        assert wrap_pi(5.9) == pytest.approx(5.9 - 2 * math.pi)
        assert wrap_pi(-5.9) == pytest.approx(-5.9 + 2 * math.pi)


class TestClip:
    @pytest.mark.parametrize(
        "value, expected",
        [(1.0000000000000002, 1.0), (-1.0000000000000002, -1.0), (0.3, 0.3), (-7.0, -1.0)],
    )
    def test_clip_unit(self, value, expected):
        assert clip_unit(value) == expected

    def test_clip_unit_keeps_acos_in_domain(self):
        assert math.acos(clip_unit(1.0 + 1e-15)) == 0.0

    def test_clamp(self):
        assert clamp(70.0, -60.0, 60.0) == 60.0
        assert clamp(-70.0, -60.0, 60.0) == -60.0
        assert clamp(12.5, -60.0, 60.0) == 12.5


class TestCalendar:
    def test_leap_years(self):
        assert leap_year(2016)
        assert leap_year(2000)
        assert not leap_year(2017)

    def test_century_years_count_as_leap(self):
        # simplified divisible-by-4 rule
        assert leap_year(1900)
        assert leap_year(2100)

    def test_days_in_months(self):
        assert days_in_months(2017) == [31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]
        assert days_in_months(2016)[1] == 29
        assert sum(days_in_months(2017)) == 365
        assert sum(days_in_months(2016)) == 366
