"""Parsing of the floor log into dated, normalized update texts."""
from __future__ import annotations

from .document import parse_document
from .identifiers import bill_code, extract_bills, extract_legislators, extract_rolls
from .segmenter import find_title_block, parse_legislative_day, segment_blocks, segment_updates
from .text import clean_text

__all__ = [
    "bill_code",
    "clean_text",
    "extract_bills",
    "extract_legislators",
    "extract_rolls",
    "find_title_block",
    "parse_document",
    "parse_legislative_day",
    "segment_blocks",
    "segment_updates",
]
