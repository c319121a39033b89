# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Planet-time timeline and next-occurrence search.

Combines the brightness target, the crossing search and sunrise/sunset
into what a display shows for one planet: the morning and evening
planet times of a day, and the next planet time after "now".
"""
import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta, tzinfo

from planet_time.domain.crossings import find_apparent_altitude_crossings
from planet_time.domain.illuminance import planet_time_altitude_deg
from planet_time.domain.observer import local_instant
from planet_time.domain.planets import Planet, get_planet
from planet_time.domain.solar import DayTimes, sun_times

logger = logging.getLogger(__name__)

SEARCH_DAYS: int = 3


@dataclass(frozen=True)
class PlanetTimeline:
    """Planet times and sun times for one planet, day and location."""
    planet: Planet
    day: date
    target_altitude_deg: float | None
    morning: datetime | None
    evening: datetime | None
    day_times: DayTimes


def planet_timeline(
    planet_key: str,
    day: date,
    lat_deg: float,
    lon_deg: float,
    tz: tzinfo | None = None,
) -> PlanetTimeline:
    """
    Morning/evening planet times plus sunrise, noon and sunset for a day.

    The target is evaluated with orbital positions at local noon. Earth
    has no target and no crossings.

    Raises:
        ValueError: If planet_key is not in the catalog.
    """
    planet = get_planet(planet_key)
    target = planet_time_altitude_deg(planet.key, local_instant(day, 12, tz))
    crossings = (
        [] if target is None
        else find_apparent_altitude_crossings(day, lat_deg, lon_deg, target, tz=tz)
    )
    return PlanetTimeline(
        planet=planet,
        day=day,
        target_altitude_deg=target,
        morning=crossings[0] if len(crossings) > 0 else None,
        evening=crossings[1] if len(crossings) > 1 else None,
        day_times=sun_times(day, lat_deg, lon_deg, tz=tz),
    )


def next_planet_time(
    planet_key: str,
    day: date,
    lat_deg: float,
    lon_deg: float,
    now: datetime,
    tz: tzinfo | None = None,
) -> datetime | None:
    """
    Next planet time at or after the given day, relative to ``now``.

    Searches up to three civil days. For twilight targets (<= 0°) the
    first day offers its morning, then its evening, if still ahead of
    now; later days offer their morning. Daytime targets take the first
    crossing after now. Without any crossing, solar noon (the brightest
    moment) stands in: today's if ahead of now, else tomorrow's.

    Args:
        planet_key: Catalog key.
        day: First civil day to search.
        lat_deg: Observer latitude (degrees).
        lon_deg: Observer longitude, east positive (degrees).
        now: Current instant (timezone-aware).
        tz: Zone of the civil day; None means the system local zone.

    Returns:
        UTC datetime, or None for Earth and when neither a crossing nor
        a solar noon exists (polar conditions).
    """
    planet = get_planet(planet_key)
    for offset in range(SEARCH_DAYS):
        current = day + timedelta(days=offset)
        target = planet_time_altitude_deg(planet.key, local_instant(current, 12, tz))
        if target is None:
            return None
        candidates = find_apparent_altitude_crossings(current, lat_deg, lon_deg, target, tz=tz)
        if not candidates:
            continue

        if target <= 0:
            morning = candidates[0]
            evening = candidates[1] if len(candidates) > 1 else None
            if offset == 0:
                if morning > now:
                    return morning
                if evening is not None and evening > now:
                    return evening
                continue
            return morning

        if offset == 0:
            upcoming = next((t for t in candidates if t > now), None)
            if upcoming is not None:
                return upcoming
            continue
        return candidates[0]

    logger.info(
        "No %s time crossing within %d days of %s, falling back to solar noon",
        planet.name, SEARCH_DAYS, day.isoformat(),
    )
    noon_today = sun_times(day, lat_deg, lon_deg, tz=tz).solar_noon
    if noon_today is not None and noon_today > now:
        return noon_today
    return sun_times(day + timedelta(days=1), lat_deg, lon_deg, tz=tz).solar_noon


def format_duration(seconds: float | None) -> str:
    """Compact duration, e.g. '45 mins', '2 hrs', '2 hrs 5 mins'."""
    if seconds is None:
        return "--"
    total_min = round(seconds / 60.0)
    hours, minutes = divmod(total_min, 60)
    if hours <= 0:
        return f"{minutes} mins"
    if minutes == 0:
        return f"{hours} hrs"
    return f"{hours} hrs {minutes} mins"


def format_duration_long(seconds: float | None) -> str:
    """Spelled-out duration, e.g. '1 hour 1 minute', '3 hours', '0 minutes'."""
    if seconds is None:
        return "--"
    total_min = max(0, round(seconds / 60.0))
    hours, minutes = divmod(total_min, 60)
    hour_part = f"{hours} {'hour' if hours == 1 else 'hours'}" if hours > 0 else ""
    minute_part = f"{minutes} {'minute' if minutes == 1 else 'minutes'}" if minutes > 0 else ""
    if not hour_part and not minute_part:
        return "0 minutes"
    return " ".join(part for part in (hour_part, minute_part) if part)


def seconds_until(instant: datetime | None, now: datetime) -> float | None:
    """Non-negative seconds from now to instant; None passes through."""
    if instant is None:
        return None
    return max(0.0, (instant - now).total_seconds())
