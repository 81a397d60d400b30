"""Demonstrate solar position and tracker angles for Seattle at noon on the June solstice."""

from sat_tracker._types import TimeLocation, TrackerConfig
from sat_tracker.solarpos import solar_position
from sat_tracker.tracking import direct_cutoff, track


def main():
    latitude = 47.608358
    longitude = -122.323175

    tl = TimeLocation(2017, 6, 21, 12, 0, -8, latitude, longitude)
    tracker = TrackerConfig(gcr=0.35, range_of_motion=60.0, night_stow=-10.0)

    pos = solar_position(tl)
    state = track(pos, tracker)

    print("=== Solar Position Calculation Example ===")
    print(f"Location: Seattle, WA ({latitude:.3f}°N, {-longitude:.3f}°W)")
    print(f"Date/Time: {tl.year}-{tl.month:02d}-{tl.day:02d} {tl.hour:02d}:{tl.minute:02d} (UTC{tl.timezone:+d})")
    print()
    print("--- Solar Position ---")
    print(f"Declination: {pos.declination:.2f}°")
    print(f"Zenith Angle: {pos.zenith:.2f}°")
    print(f"Elevation: {pos.elevation:.2f}°")
    print(f"Azimuth: {pos.azimuth:.2f}° (0°=N, 90°=E, 180°=S)")
    print(f"Sunrise: {pos.sunrise:.2f} h, Sunset: {pos.sunset:.2f} h")
    print(f"True Solar Time: {pos.true_solar_time:.2f} h")
    print(f"Eccentricity correction: {pos.eccentricity:.4f}")
    print()
    print("--- Tracker ---")
    print(f"Backtracking starts beyond: ±{direct_cutoff(tracker.gcr):.1f}°")
    print(f"Ideal rotation: {state.ideal_angle:.2f}°")
    print(f"Backtracked rotation: {state.angle:.2f}°")
    print(f"Angle of incidence at ideal rotation: {state.incidence:.2f}°")


if __name__ == "__main__":
    main()
