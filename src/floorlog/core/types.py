"""Typed domain objects for the floor log scraper."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


class BlockRole(str, Enum):
    """Layout role of a text block, taken from its alignment marker."""

    CENTERED = "centered"
    LEFT = "left"
    OTHER = "other"


@dataclass(frozen=True, slots=True)
class TextBlock:
    """A paragraph-like block of the floor log.

    ``scopes`` holds the identities of the enclosing elements, innermost
    first. Two blocks share a structural scope when one's innermost scope
    appears anywhere in the other's chain.
    """

    text: str
    role: BlockRole = BlockRole.OTHER
    scopes: Tuple[int, ...] = ()


@dataclass(frozen=True, slots=True)
class Document:
    """Ordered sequence of text blocks for a single run."""

    blocks: Tuple[TextBlock, ...] = ()

    def __iter__(self):
        return iter(self.blocks)

    def __len__(self) -> int:
        return len(self.blocks)


@dataclass(slots=True)
class Segmentation:
    """Result of segmenting a document into legislative days."""

    groups: Dict[str, List[str]] = field(default_factory=dict)
    anomalies: List[str] = field(default_factory=list)


@dataclass(slots=True)
class UpdateRecord:
    """A single floor update as persisted in the store."""

    chamber: str
    legislative_day: str
    timestamp: datetime
    events: List[str]
    bill_ids: List[str] = field(default_factory=list)
    roll_ids: List[str] = field(default_factory=list)
    bioguide_ids: List[str] = field(default_factory=list)
    identifier: Optional[int] = None

    def attributes(self) -> Dict[str, Any]:
        """Return a JSON friendly copy of the record's attributes."""

        return {
            "chamber": self.chamber,
            "legislative_day": self.legislative_day,
            "timestamp": self.timestamp.isoformat(),
            "events": list(self.events),
            "bill_ids": list(self.bill_ids),
            "roll_ids": list(self.roll_ids),
            "bioguide_ids": list(self.bioguide_ids),
        }


@dataclass(slots=True)
class RunSummary:
    """Outcome of one pipeline run."""

    saved: int = 0
    duplicates: int = 0
    anomalies: List[str] = field(default_factory=list)
    failures: List[Dict[str, Any]] = field(default_factory=list)
    aborted: Optional[str] = None

    @property
    def completed(self) -> bool:
        return self.aborted is None


__all__ = [
    "BlockRole",
    "Document",
    "RunSummary",
    "Segmentation",
    "TextBlock",
    "UpdateRecord",
]
