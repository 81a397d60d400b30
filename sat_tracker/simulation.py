"""Year-long, minute-by-minute tracker simulation over a set of locations.

For every location the backtracked tracker angle is computed for each minute
of a 365-day year and written to TrackerAngle_<name>.csv. A histogram of the
absolute angle is written to AngleSummary_<name>.csv and, for all locations
together, to AngleSummary_All.csv.
"""

import csv
import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from .angles import MONTH_DAYS
from ._types import (
    AngleBin,
    Location,
    LocationSummary,
    SimulationConfig,
    TimeLocation,
    TrackerRow,
)
from .solarpos import solar_position
from .tracking import ideal_tracker_angle, shade_avoidance_angle

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = SimulationConfig()
MINUTES_PER_YEAR = 365 * 24 * 60

TIMESERIES_HEADER = ("LOCATION", "YEAR", "MONTH", "DAY", "HOUR", "MINUTE", "ANGLE")
SUMMARY_HEADER = ("LOCATION", "ANGLE_BIN", "COUNT", "PERCENT_OF_TIME")


def iter_minutes() -> Iterator[tuple[int, int, int, int]]:
    """Yield (month, day, hour, minute) for every minute of a 365-day year."""
    for month, days in enumerate(MONTH_DAYS, 1):
        for day in range(1, days + 1):
            for hour in range(24):
                for minute in range(60):
                    yield month, day, hour, minute


def simulate_location(location: Location, config: SimulationConfig) -> Iterator[TrackerRow]:
    """Yield the backtracked tracker angle for every minute of the year."""
    tracker = config.tracker
    for month, day, hour, minute in iter_minutes():
        pos = solar_position(
            TimeLocation(
                year=config.year,
                month=month,
                day=day,
                hour=hour,
                minute=minute,
                timezone=location.timezone,
                latitude=location.latitude,
                longitude=location.longitude,
            )
        )
        ideal, tracker = ideal_tracker_angle(pos, tracker)
        yield TrackerRow(
            location=location.name,
            year=config.year,
            month=month,
            day=day,
            hour=hour,
            minute=minute,
            angle=shade_avoidance_angle(ideal, tracker),
        )


class AngleHistogram:
    """Counts of |angle| in fixed-width bins from 0 up to the range of motion."""

    def __init__(self, range_of_motion: float, bin_size: float):
        self.bin_size = bin_size
        self.counts = [0] * (int(range_of_motion / bin_size) + 1)

    def add(self, angle: float) -> None:
        self.counts[int(abs(angle) / self.bin_size)] += 1

    def bins(self, location: str) -> list[AngleBin]:
        return [
            AngleBin(
                location=location,
                angle_bin=i * self.bin_size,
                count=count,
                percent_of_time=percent_of_year(count),
            )
            for i, count in enumerate(self.counts)
        ]

    def percent_in_zone(self, limit: float) -> float:
        """Percent of the year spent in the bins whose lower edge is below limit."""
        in_zone = sum(
            count for i, count in enumerate(self.counts) if i * self.bin_size < limit
        )
        return percent_of_year(in_zone)


def percent_of_year(count: int) -> float:
    return 100.0 * count / MINUTES_PER_YEAR


def timeseries_path(output_dir: Path, name: str) -> Path:
    return output_dir / f"TrackerAngle_{name}.csv"


def summary_path(output_dir: Path, name: str) -> Path:
    return output_dir / f"AngleSummary_{name}.csv"


def _bin_row(b: AngleBin) -> list[str]:
    return [b.location, f"{b.angle_bin:.1f}", str(b.count), f"{b.percent_of_time:.3f}"]


def write_timeseries(
    path: Path, rows: Iterable[TrackerRow], histogram: AngleHistogram | None = None
) -> int:
    """Write tracker rows to path, optionally counting them into histogram.

    Returns the number of rows written.
    """
    written = 0
    with open(path, "w", newline="") as f:
        writer = csv.writer(f, lineterminator="\n")
        writer.writerow(TIMESERIES_HEADER)
        for row in rows:
            writer.writerow(
                [
                    row.location,
                    f"{row.year:02d}",
                    f"{row.month:02d}",
                    f"{row.day:02d}",
                    f"{row.hour:02d}",
                    f"{row.minute:02d}",
                    f"{row.angle:.1f}",
                ]
            )
            if histogram is not None:
                histogram.add(row.angle)
            written += 1
    logger.debug("Wrote %d rows to %s", written, path)
    return written


def write_summary(path: Path, bins: Iterable[AngleBin]) -> None:
    with open(path, "w", newline="") as f:
        writer = csv.writer(f, lineterminator="\n")
        writer.writerow(SUMMARY_HEADER)
        writer.writerows(_bin_row(b) for b in bins)
    logger.debug("Wrote summary %s", path)


def summarize_location(location: Location, config: SimulationConfig) -> LocationSummary:
    """Simulate one location, write its time series and summary files."""
    logger.info("Calculating data for %s", location.name)
    histogram = AngleHistogram(config.tracker.range_of_motion, config.bin_size)
    write_timeseries(
        timeseries_path(config.output_dir, location.name),
        simulate_location(location, config),
        histogram,
    )
    bins = histogram.bins(location.name)
    write_summary(summary_path(config.output_dir, location.name), bins)
    return LocationSummary(
        location=location.name,
        bins=bins,
        percent_in_zone=histogram.percent_in_zone(config.zone_limit),
    )


def run_simulation(config: SimulationConfig = DEFAULT_CONFIG) -> list[LocationSummary]:
    """Simulate every configured location and write the combined summary file."""
    config.output_dir.mkdir(parents=True, exist_ok=True)
    summaries = [summarize_location(loc, config) for loc in config.locations]
    write_summary(
        summary_path(config.output_dir, "All"),
        (b for s in summaries for b in s.bins),
    )
    return summaries


def format_zone_report(summaries: Iterable[LocationSummary]) -> str:
    """Table of the percent of time each location's tracker spends near flat."""
    lines = ["Location           % in Zone"]
    lines.extend(f"{s.location:<18} {s.percent_in_zone:.2f}" for s in summaries)
    return "\n".join(lines)
