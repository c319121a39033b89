# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
CSV planet timeline exporter.

One row per planet and day. External dependencies (csv, file I/O) are
confined to this adapter.
"""
import csv
import logging
from datetime import tzinfo

logger = logging.getLogger(__name__)

from planet_time.ports.export import TimelineExporter
from planet_time.domain.planet_time import PlanetTimeline
from planet_time.adapters.records import FIELDS, timeline_record


class CsvTimelineExporter(TimelineExporter):
    """Exports planet timelines to CSV."""

    def export(
        self,
        timelines: list[PlanetTimeline],
        path: str,
        tz: tzinfo | None = None,
    ) -> int:
        if tz is None and timelines:
            logger.warning("No time zone provided, writing timestamps in UTC")

        with open(path, 'w', newline='', encoding='utf-8') as f:
            writer = csv.DictWriter(f, fieldnames=FIELDS)
            writer.writeheader()
            for timeline in timelines:
                record = timeline_record(timeline, tz)
                writer.writerow({k: ('' if v is None else v) for k, v in record.items()})

        return len(timelines)
