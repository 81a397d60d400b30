"""Single-axis tracker geometry: incidence angle, ideal rotation and backtracking.

The tracker is described by yaw (alpha, rotation of the axis about vertical),
pitch (beta, tilt of the axis) and roll (gamma, rotation about the axis).
Sun direction uses theta = 360 - azimuth and phi = zenith.

All angles in degrees unless otherwise noted.
"""

import math

from . import angles
from ._types import SolarPosition, TrackerConfig, TrackerState


def _sun_angles(pos: SolarPosition) -> tuple[float, float]:
    """Return (theta, phi) in radians for the sun direction."""
    return angles.deg_to_rad(360.0 - pos.azimuth), angles.deg_to_rad(pos.zenith)


def panel_normal(tracker: TrackerConfig) -> tuple[float, float, float]:
    """Unit normal of the panel surface in cartesian coordinates."""
    alpha = angles.deg_to_rad(tracker.yaw)
    beta = angles.deg_to_rad(tracker.pitch)
    gamma = angles.deg_to_rad(tracker.roll)
    return (
        math.cos(gamma) * math.sin(beta) * math.cos(alpha) + math.sin(gamma) * math.sin(alpha),
        math.cos(gamma) * math.sin(beta) * math.sin(alpha) - math.sin(gamma) * math.cos(alpha),
        math.cos(gamma) * math.cos(beta),
    )


def sun_vector(pos: SolarPosition) -> tuple[float, float, float]:
    """Unit vector pointing at the sun in the panel_normal frame."""
    theta, phi = _sun_angles(pos)
    return (
        math.cos(theta) * math.sin(phi),
        math.sin(theta) * math.sin(phi),
        math.cos(phi),
    )


def angle_of_incidence(tracker: TrackerConfig, pos: SolarPosition) -> float:
    """Angle between the sun and the panel normal at the tracker's current roll.

    Returns degrees in [0, 180].
    """
    dot = sum(s * n for s, n in zip(sun_vector(pos), panel_normal(tracker)))
    return angles.rad_to_deg(math.acos(angles.clip_unit(dot)))


def ideal_tracker_angle(
    pos: SolarPosition, tracker: TrackerConfig
) -> tuple[float, TrackerConfig]:
    """Rotation that points the panel as close to the sun as the axis allows.

    No shade avoidance or range of motion is applied.

    Returns:
        (angle, tracker) where tracker is the configuration rotated to angle,
        for use with angle_of_incidence at the same instant. With the sun
        below the horizon the angle is the night stow and the tracker is
        returned unchanged, keeping its previous roll.
    """
    if pos.zenith >= 90.0:
        return tracker.night_stow, tracker

    alpha = angles.deg_to_rad(tracker.yaw)
    beta = angles.deg_to_rad(tracker.pitch)
    theta, phi = _sun_angles(pos)

    sun_x = math.sin(phi) * math.cos(theta)
    sun_y = math.sin(phi) * math.sin(theta)
    a = math.cos(alpha) * sun_y - math.sin(alpha) * sun_x
    b = (
        math.sin(alpha) * math.sin(beta) * sun_y
        + math.cos(alpha) * math.sin(beta) * sun_x
        + math.cos(beta) * math.cos(phi)
    )
    ratio = a / b if b != 0.0 else math.copysign(math.inf, a)
    calculated = -math.atan(ratio)

    # sun behind the plane of the axis: flip to the other side
    q = math.atan2(a, b)
    if q > math.pi / 2.0 or q < -math.pi / 2.0:
        calculated = -calculated

    angle = angles.rad_to_deg(calculated)
    return angle, tracker.with_roll(angle)


def direct_cutoff(gcr: float) -> float:
    """Largest rotation magnitude at which neighbouring rows do not shade each other."""
    return angles.rad_to_deg(math.acos(gcr))


def shade_avoidance_angle(tracker_angle: float, tracker: TrackerConfig) -> float:
    """Backtracked rotation that avoids row-to-row shading, within the range of motion.

    Returns tracker_angle unchanged (apart from clamping) when no shading
    would occur.
    """
    if abs(tracker_angle) <= direct_cutoff(tracker.gcr):
        angle_sa = tracker_angle
    else:
        gamma = angles.deg_to_rad(90.0 - tracker_angle)
        shadow = math.asin(angles.clip_unit(math.sin(gamma) / tracker.gcr))
        if tracker_angle < 0:
            angle_sa = math.pi - shadow - gamma
        else:
            angle_sa = math.pi - (math.pi - shadow) - gamma
        angle_sa = angles.rad_to_deg(angle_sa)

    return angles.clamp(angle_sa, -tracker.range_of_motion, tracker.range_of_motion)


def track(pos: SolarPosition, tracker: TrackerConfig) -> TrackerState:
    """Ideal and backtracked angles for one instant, plus the incidence at the ideal roll."""
    ideal, rotated = ideal_tracker_angle(pos, tracker)
    return TrackerState(
        ideal_angle=ideal,
        angle=shade_avoidance_angle(ideal, rotated),
        incidence=angle_of_incidence(rotated, pos),
        tracker=rotated,
    )
