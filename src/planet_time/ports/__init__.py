# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interfaces for planet-time output.

Adapters implement these to write timelines in different file formats.
"""
from planet_time.ports.export import TimelineExporter

__all__ = ["TimelineExporter"]
