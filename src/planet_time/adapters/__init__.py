# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Adapters for planet timeline export.

External dependencies (json, csv, file I/O) are confined to this layer.
"""
from planet_time.adapters.csv_exporter import CsvTimelineExporter
from planet_time.adapters.json_exporter import JsonTimelineExporter
from planet_time.adapters.records import FIELDS, timeline_record

__all__ = [
    "CsvTimelineExporter",
    "JsonTimelineExporter",
    "FIELDS",
    "timeline_record",
]
