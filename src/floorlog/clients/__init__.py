"""HTTP clients used by the floor log scraper."""
from __future__ import annotations

from .floor_log import DEFAULT_URL, FloorLogClient, FloorLogClientError

__all__ = ["DEFAULT_URL", "FloorLogClient", "FloorLogClientError"]
