# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interface for planet timeline export.

Adapters implement this to write daily planet timelines in various
formats (CSV, JSON, etc.).
"""
from datetime import tzinfo
from typing import Protocol, runtime_checkable

from planet_time.domain.planet_time import PlanetTimeline


@runtime_checkable
class TimelineExporter(Protocol):
    """Port for exporting planet timelines to file."""

    def export(
        self,
        timelines: list[PlanetTimeline],
        path: str,
        tz: tzinfo | None = None,
    ) -> int:
        """
        Export planet timelines to a file.

        Instants are written as ISO-8601 in tz, or UTC when tz is None.
        Missing instants (unreachable targets, polar day/night) are
        written as empty values.

        Args:
            timelines: PlanetTimeline domain objects, one per planet/day.
            path: Output file path.
            tz: Zone for the written timestamps.

        Returns:
            Number of timelines exported.
        """
        ...
