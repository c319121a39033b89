# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Command-line interface for planet-time timelines.

Usage:
    # All planets for today at a location (system time zone)
    planet-time --lat 52.23 --lon 21.01

    # One planet, explicit day and civil-day time zone
    planet-time --lat 52.23 --lon 21.01 --date 2024-06-21 --planet mars --tz Europe/Warsaw

    # Export to CSV or JSON
    planet-time --lat 52.23 --lon 21.01 --export-csv times.csv
    planet-time --lat 52.23 --lon 21.01 --export-json times.json
"""
import argparse
import logging
import sys
from datetime import date, datetime, timezone, tzinfo
from typing import NoReturn
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from planet_time.domain.observer import GeoCoordinate
from planet_time.domain.planets import PLANETS
from planet_time.domain.planet_time import (
    PlanetTimeline,
    format_duration_long,
    next_planet_time,
    planet_timeline,
    seconds_until,
)
from planet_time.domain.solar import format_time
from planet_time.adapters.csv_exporter import CsvTimelineExporter
from planet_time.adapters.json_exporter import JsonTimelineExporter

logger = logging.getLogger(__name__)

PLANET_KEYS = [p.key for p in PLANETS if p.key != "earth"]


def _fail(message: str) -> NoReturn:
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(1)


def _parse_date(value: str | None) -> date:
    if value is None:
        return datetime.now().date()
    return date.fromisoformat(value)


def _parse_tz(value: str | None) -> tzinfo | None:
    if value is None:
        return None
    return ZoneInfo(value)


def run(
    coord: GeoCoordinate,
    day: date,
    planet_keys: list[str],
    tz: tzinfo | None = None,
) -> list[PlanetTimeline]:
    """Compute the timeline of each requested planet for one day."""
    timelines = [
        planet_timeline(key, day, coord.lat_deg, coord.lon_deg, tz=tz)
        for key in planet_keys
    ]
    logger.info(
        "Computed %d timeline(s) for %s at (%.4f, %.4f)",
        len(timelines), day.isoformat(), coord.lat_deg, coord.lon_deg,
    )
    return timelines


def _print_report(
    timelines: list[PlanetTimeline],
    coord: GeoCoordinate,
    day: date,
    now: datetime,
    tz: tzinfo | None,
) -> None:
    print(f"Location: {coord.lat_deg:.4f}, {coord.lon_deg:.4f}  Date: {day.isoformat()}")
    if timelines:
        sun = timelines[0].day_times
        if sun.always_up:
            print("Sun: above the horizon all day")
        elif sun.always_down:
            print("Sun: below the horizon all day")
        else:
            print(
                f"Sunrise {format_time(sun.sunrise, tz)}  "
                f"Noon {format_time(sun.solar_noon, tz)}  "
                f"Sunset {format_time(sun.sunset, tz)}  "
                f"Daylight {sun.daylight_hours:.2f} h"
            )
    print()
    for t in timelines:
        nxt = next_planet_time(t.planet.key, day, coord.lat_deg, coord.lon_deg, now, tz=tz)
        print(
            f"{t.planet.name:<8} target {t.target_altitude_deg:7.2f}°  "
            f"morning {format_time(t.morning, tz)}  "
            f"evening {format_time(t.evening, tz)}  "
            f"next in {format_duration_long(seconds_until(nxt, now))}"
        )


def main():
    parser = argparse.ArgumentParser(
        description="Times when daylight matches noon on another planet"
    )
    parser.add_argument('--lat', type=float, required=True, help="Latitude (degrees, north positive)")
    parser.add_argument('--lon', type=float, required=True, help="Longitude (degrees, east positive)")
    parser.add_argument('--date', help="Civil day as YYYY-MM-DD (default: today)")
    parser.add_argument(
        '--planet', action='append', choices=PLANET_KEYS,
        help="Planet key, repeatable (default: all except Earth)",
    )
    parser.add_argument(
        '--tz',
        help="IANA time zone defining the civil day (default: system time zone)",
    )
    parser.add_argument('--verbose', '-v', action='store_true', default=False,
                        help="Log progress at INFO level")

    export_group = parser.add_argument_group('export')
    export_group.add_argument('--export-csv', help="Export timelines to CSV")
    export_group.add_argument('--export-json', help="Export timelines to JSON")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        coord = GeoCoordinate(lat_deg=args.lat, lon_deg=args.lon)
    except ValueError as e:
        _fail(str(e))
    try:
        day = _parse_date(args.date)
    except ValueError:
        _fail(f"Invalid date {args.date!r}, expected YYYY-MM-DD")
    try:
        tz = _parse_tz(args.tz)
    except (ZoneInfoNotFoundError, ValueError):
        _fail(f"Unknown time zone {args.tz!r}")

    planet_keys = args.planet or PLANET_KEYS
    timelines = run(coord, day, planet_keys, tz=tz)
    _print_report(timelines, coord, day, datetime.now(tz=timezone.utc), tz)

    if args.export_csv:
        count = CsvTimelineExporter().export(timelines, args.export_csv, tz=tz)
        print(f"Exported {count} timelines to {args.export_csv}")

    if args.export_json:
        exporter = JsonTimelineExporter(lat_deg=coord.lat_deg, lon_deg=coord.lon_deg)
        count = exporter.export(timelines, args.export_json, tz=tz)
        print(f"Exported {count} timelines to {args.export_json}")


if __name__ == '__main__':
    main()
