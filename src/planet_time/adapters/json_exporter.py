# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
JSON planet timeline exporter.

Writes a document with the observer location and one record per
timeline. Missing instants are written as null.
"""
import json
import logging
from datetime import tzinfo

logger = logging.getLogger(__name__)

from planet_time.ports.export import TimelineExporter
from planet_time.domain.planet_time import PlanetTimeline
from planet_time.adapters.records import timeline_record


class JsonTimelineExporter(TimelineExporter):
    """Exports planet timelines as a JSON document."""

    def __init__(self, lat_deg: float | None = None, lon_deg: float | None = None) -> None:
        self._lat_deg = lat_deg
        self._lon_deg = lon_deg

    def export(
        self,
        timelines: list[PlanetTimeline],
        path: str,
        tz: tzinfo | None = None,
    ) -> int:
        if tz is None and timelines:
            logger.warning("No time zone provided, writing timestamps in UTC")

        doc = {
            'observer': {'lat_deg': self._lat_deg, 'lon_deg': self._lon_deg},
            'timelines': [timeline_record(t, tz) for t in timelines],
        }
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(doc, f, indent=2, ensure_ascii=False)

        return len(timelines)
