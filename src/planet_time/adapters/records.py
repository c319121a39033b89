# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Flat export records for planet timelines.

Shared by the CSV and JSON exporters so both write the same fields.
"""
from datetime import datetime, timezone, tzinfo
from typing import Any

from planet_time.domain.planet_time import PlanetTimeline

FIELDS = [
    'planet', 'date', 'target_altitude_deg',
    'morning', 'evening',
    'sunrise', 'solar_noon', 'sunset',
    'daylight_hours', 'always_up', 'always_down',
]


def _iso(instant: datetime | None, tz: tzinfo) -> str | None:
    if instant is None:
        return None
    return instant.astimezone(tz).isoformat(timespec='seconds')


def timeline_record(timeline: PlanetTimeline, tz: tzinfo | None = None) -> dict[str, Any]:
    """Flatten a PlanetTimeline into a dict keyed by FIELDS."""
    out_tz = tz or timezone.utc
    sun = timeline.day_times
    target = timeline.target_altitude_deg
    return {
        'planet': timeline.planet.key,
        'date': timeline.day.isoformat(),
        'target_altitude_deg': round(target, 4) if target is not None else None,
        'morning': _iso(timeline.morning, out_tz),
        'evening': _iso(timeline.evening, out_tz),
        'sunrise': _iso(sun.sunrise, out_tz),
        'solar_noon': _iso(sun.solar_noon, out_tz),
        'sunset': _iso(sun.sunset, out_tz),
        'daylight_hours': round(sun.daylight_hours, 4),
        'always_up': sun.always_up,
        'always_down': sun.always_down,
    }
