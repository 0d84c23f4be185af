"""Segmentation of the floor log into dated update texts."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional
import logging

from dateutil import parser as dateparser

from ..core.types import BlockRole, Document, Segmentation, TextBlock
from .text import clean_text

LOGGER = logging.getLogger(__name__)

TITLE_LABELS = ("SENATE FLOOR PROCEEDINGS", "TODAY'S SENATE FLOOR LOG")
# Page decorations; a lone non-breaking space normalizes to "".
IGNORED_TEXTS = frozenset(label.lower() for label in TITLE_LABELS) | {""}


@dataclass(slots=True)
class _SegmentState:
    """Accumulator threaded through the segmentation pass."""

    current_date: Optional[str] = None
    groups: Dict[str, List[str]] = field(default_factory=dict)
    anomalies: List[str] = field(default_factory=list)


def parse_legislative_day(text: str) -> Optional[str]:
    """Return ``text`` as a ``YYYY-MM-DD`` string, or ``None`` if it is not a date."""

    try:
        parsed = dateparser.parse(text, ignoretz=True)
    except (ValueError, OverflowError):
        return None
    return parsed.date().isoformat() if parsed else None


def find_title_block(document: Document) -> Optional[TextBlock]:
    """Return the first block carrying one of the known title labels."""

    for block in document:
        if clean_text(block.text).upper() in TITLE_LABELS:
            return block
    return None


def scoped_blocks(document: Document, title: TextBlock) -> List[TextBlock]:
    """Return the blocks sharing the structural scope of ``title``."""

    if not title.scopes:
        return list(document.blocks)
    scope = title.scopes[0]
    return [block for block in document if scope in block.scopes]


def _step(state: _SegmentState, block: TextBlock) -> _SegmentState:
    text = clean_text(block.text)
    if text.lower() in IGNORED_TEXTS:
        return state

    if block.role is BlockRole.CENTERED:
        legislative_day = parse_legislative_day(text)
        if legislative_day is None:
            state.anomalies.append(f"Unexpected HTML, could not parse a date from header {text!r}, skipping")
            state.current_date = None
            return state
        state.current_date = legislative_day
        state.groups.setdefault(legislative_day, [])
    elif block.role is BlockRole.LEFT:
        if state.current_date is None:
            state.anomalies.append("Unexpected HTML, got to a update without a date, skipping")
            return state
        state.groups[state.current_date].append(text)
    else:
        state.anomalies.append("Unexpected HTML, a p tag without alignment - may be worth checking")
    return state


def segment_blocks(blocks: Iterable[TextBlock]) -> Segmentation:
    """Group update bodies under the most recently seen date header."""

    state = _SegmentState()
    for block in blocks:
        state = _step(state, block)
    for anomaly in state.anomalies:
        LOGGER.debug(anomaly)
    return Segmentation(groups=state.groups, anomalies=state.anomalies)


def segment_updates(document: Document, title: TextBlock) -> Segmentation:
    """Segment the blocks scoped by ``title`` into legislative days."""

    return segment_blocks(scoped_blocks(document, title))


__all__ = [
    "IGNORED_TEXTS",
    "TITLE_LABELS",
    "find_title_block",
    "parse_legislative_day",
    "scoped_blocks",
    "segment_blocks",
    "segment_updates",
]
