# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Observer location and civil-day framing.

The civil day is taken in the querying system's time zone unless an
explicit tzinfo is given, not in the observed location's own zone.
"""
import math
from dataclasses import dataclass
from datetime import date, datetime, timezone, tzinfo


@dataclass(frozen=True)
class GeoCoordinate:
    """Observer position, longitude positive east."""
    lat_deg: float
    lon_deg: float

    def __post_init__(self) -> None:
        if not math.isfinite(self.lat_deg) or not -90.0 <= self.lat_deg <= 90.0:
            raise ValueError(f"lat_deg must be in [-90, 90], got {self.lat_deg}")
        if not math.isfinite(self.lon_deg) or not -180.0 <= self.lon_deg <= 180.0:
            raise ValueError(f"lon_deg must be in [-180, 180], got {self.lon_deg}")


def local_instant(day: date, hour: int = 0, tz: tzinfo | None = None) -> datetime:
    """
    UTC instant of a wall-clock hour on a calendar day.

    Args:
        day: Calendar day (only year/month/day are used).
        hour: Local wall-clock hour, 0-23.
        tz: Zone of the civil day; None means the system local zone.

    Returns:
        Timezone-aware UTC datetime.
    """
    naive = datetime(day.year, day.month, day.day, hour)
    local = naive.replace(tzinfo=tz) if tz is not None else naive.astimezone()
    return local.astimezone(timezone.utc)


def civil_day_start(day: date, tz: tzinfo | None = None) -> datetime:
    """UTC instant of local midnight starting the civil day."""
    return local_instant(day, 0, tz)
