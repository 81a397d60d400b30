"""Command-line entrypoint: python -m sat_tracker."""

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path

from ._types import DEFAULT_LOCATIONS, Location, SimulationConfig, TrackerConfig
from .simulation import format_zone_report, run_simulation


def _parse_location(value: str) -> Location:
    """Parse NAME,LAT,LON,TZ into a Location."""
    parts = value.split(",")
    if len(parts) != 4:
        raise argparse.ArgumentTypeError(f"expected NAME,LAT,LON,TZ, got {value!r}")
    name, lat, lon, tz = parts
    try:
        return Location(name.strip(), float(lat), float(lon), int(tz))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid location {value!r}: {exc}") from exc


def build_parser() -> argparse.ArgumentParser:
    """Create and return the top-level CLI parser."""
    defaults = TrackerConfig()
    parser = argparse.ArgumentParser(
        prog="sat_tracker",
        description=(
            "Simulate a single-axis tracker minute by minute over a year and "
            "write angle time series and histogram summaries as CSV."
        ),
    )
    parser.add_argument("--year", type=int, default=2017)
    parser.add_argument("--output-dir", type=Path, default=Path("."))
    parser.add_argument("--gcr", type=float, default=defaults.gcr, help="ground coverage ratio")
    parser.add_argument(
        "--rom", type=float, default=defaults.range_of_motion, help="range of motion, degrees"
    )
    parser.add_argument("--night-stow", type=float, default=defaults.night_stow)
    parser.add_argument("--yaw", type=float, default=defaults.yaw)
    parser.add_argument("--pitch", type=float, default=defaults.pitch)
    parser.add_argument("--bin-size", type=float, default=5.0)
    parser.add_argument(
        "--location",
        type=_parse_location,
        action="append",
        dest="locations",
        metavar="NAME,LAT,LON,TZ",
        help="site to simulate; repeatable (default: five built-in sites)",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the simulation and print the percent-in-zone report."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = SimulationConfig(
            year=args.year,
            tracker=TrackerConfig(
                yaw=args.yaw,
                pitch=args.pitch,
                gcr=args.gcr,
                night_stow=args.night_stow,
                range_of_motion=args.rom,
            ),
            locations=tuple(args.locations) if args.locations else DEFAULT_LOCATIONS,
            bin_size=args.bin_size,
            output_dir=args.output_dir,
        )
    except ValueError as exc:
        parser.error(str(exc))

    summaries = run_simulation(config)
    print()
    print(format_zone_report(summaries))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
