"""Incremental detection and persistence of floor updates."""
from __future__ import annotations

from .clock import Clock, SyntheticClock, SystemClock
from .floor_updates import FloorUpdatesPipeline, PipelineEvent, RunOptions
from .merge import known_events, new_updates
from .records import build_record

__all__ = [
    "Clock",
    "FloorUpdatesPipeline",
    "PipelineEvent",
    "RunOptions",
    "SyntheticClock",
    "SystemClock",
    "build_record",
    "known_events",
    "new_updates",
]
