# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Threshold crossing search over a civil day.

Samples a target-relative value every minute from local midnight to the
following midnight (1441 samples), detecting sign changes and refining
each bracket by bisection. Brute force on purpose: the apparent-altitude
curve with refraction has no clean analytic inverse.
"""
import logging
import math
from datetime import date, datetime, timezone, tzinfo
from typing import Callable

from planet_time.domain.illuminance import earth_illuminance_lux
from planet_time.domain.observer import civil_day_start
from planet_time.domain.solar import apparent_altitude_deg, solar_position

logger = logging.getLogger(__name__)

MINUTES_PER_DAY: int = 24 * 60
MAX_CROSSINGS: int = 2


def _at(timestamp: float) -> datetime:
    return datetime.fromtimestamp(timestamp, tz=timezone.utc)


def _bisect(
    value_fn: Callable[[datetime], float],
    lo: float,
    hi: float,
    iterations: int,
) -> datetime:
    """Narrow a sign-change bracket [lo, hi] (POSIX seconds) and return its midpoint."""
    for _ in range(iterations):
        mid = (lo + hi) / 2.0
        mid_positive = value_fn(_at(mid)) > 0
        lo_positive = value_fn(_at(lo)) > 0
        if mid_positive == lo_positive:
            lo = mid
        else:
            hi = mid
    return _at((lo + hi) / 2.0)


def find_crossings(
    day: date,
    value_fn: Callable[[datetime], float],
    tz: tzinfo | None = None,
    iterations: int = 20,
) -> list[datetime]:
    """
    Find where a target-relative value crosses zero during a civil day.

    A sample that is exactly zero counts as a direct hit. Otherwise a flip
    between ``> 0`` and ``not > 0`` on consecutive minutes is bisected over
    the one-minute bracket.

    Args:
        day: Calendar day to search.
        value_fn: Maps a UTC instant to (value - target).
        tz: Zone of the civil day; None means the system local zone.
        iterations: Bisection steps per bracket (60 s / 2**iterations resolution).

    Returns:
        Up to two UTC datetimes in chronological order; empty if the
        target is never met.
    """
    if iterations < 0:
        raise ValueError(f"iterations must be non-negative, got {iterations}")

    start = civil_day_start(day, tz).timestamp()
    result: list[datetime] = []
    prev_diff: float | None = None
    prev_t = start

    for minute in range(MINUTES_PER_DAY + 1):
        t = start + minute * 60.0
        diff = value_fn(_at(t))
        if prev_diff is not None:
            if diff == 0:
                result.append(_at(t))
            elif (diff > 0) != (prev_diff > 0):
                result.append(_bisect(value_fn, prev_t, t, iterations))
            if len(result) >= MAX_CROSSINGS:
                break
        prev_diff = diff
        prev_t = t

    logger.debug("Found %d crossing(s) on %s", len(result), day.isoformat())
    return result


def find_apparent_altitude_crossings(
    day: date,
    lat_deg: float,
    lon_deg: float,
    target_deg: float,
    tz: tzinfo | None = None,
) -> list[datetime]:
    """
    Times when the apparent (refracted) solar altitude equals target_deg.

    Returns:
        Up to two UTC datetimes (morning, evening); may be empty.
    """
    if not math.isfinite(target_deg):
        return []

    def altitude_above_target(instant: datetime) -> float:
        return apparent_altitude_deg(instant, lat_deg, lon_deg) - target_deg

    return find_crossings(day, altitude_above_target, tz=tz, iterations=20)


def find_elevation_crossings(
    day: date,
    lat_deg: float,
    lon_deg: float,
    target_deg: float,
    tz: tzinfo | None = None,
) -> list[datetime]:
    """Times when the geometric (airless) solar altitude equals target_deg."""
    target_rad = math.radians(target_deg)

    def altitude_above_target(instant: datetime) -> float:
        return solar_position(instant, lat_deg, lon_deg).altitude_rad - target_rad

    return find_crossings(day, altitude_above_target, tz=tz, iterations=14)


def find_illuminance_crossings(
    day: date,
    lat_deg: float,
    lon_deg: float,
    target_lux: float,
    tz: tzinfo | None = None,
) -> list[datetime]:
    """
    Times when modelled Earth illuminance equals target_lux.

    The model jumps at the horizon (0 → 400 lux), so a target inside that
    gap produces a crossing at the seam rather than a true equality.
    """
    def lux_above_target(instant: datetime) -> float:
        altitude = solar_position(instant, lat_deg, lon_deg).altitude_rad
        return earth_illuminance_lux(altitude) - target_lux

    return find_crossings(day, lux_above_target, tz=tz, iterations=14)
