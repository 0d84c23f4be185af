"""Core domain entities used across the scraper."""
from __future__ import annotations

from .session import resolve_session, session_for
from .types import BlockRole, Document, RunSummary, Segmentation, TextBlock, UpdateRecord

__all__ = [
    "BlockRole",
    "Document",
    "RunSummary",
    "Segmentation",
    "TextBlock",
    "UpdateRecord",
    "resolve_session",
    "session_for",
]
