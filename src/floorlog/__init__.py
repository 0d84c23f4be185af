"""Incremental scraper for the Senate floor activity log."""
from __future__ import annotations

from .clients import FloorLogClient, FloorLogClientError
from .config import AppConfig, RunConfig, SourceConfig, StorageConfig, load_config
from .core import BlockRole, Document, RunSummary, TextBlock, UpdateRecord
from .database import Storage, StorageError, create_storage
from .parsing import clean_text, extract_bills, parse_document, segment_updates
from .pipeline import FloorUpdatesPipeline, RunOptions, SyntheticClock, SystemClock, new_updates
from .reporting import Reporter

__all__ = [
    "AppConfig",
    "BlockRole",
    "Document",
    "FloorLogClient",
    "FloorLogClientError",
    "FloorUpdatesPipeline",
    "Reporter",
    "RunConfig",
    "RunOptions",
    "RunSummary",
    "SourceConfig",
    "Storage",
    "StorageConfig",
    "StorageError",
    "SyntheticClock",
    "SystemClock",
    "TextBlock",
    "UpdateRecord",
    "clean_text",
    "create_storage",
    "extract_bills",
    "load_config",
    "new_updates",
    "parse_document",
    "segment_updates",
]
