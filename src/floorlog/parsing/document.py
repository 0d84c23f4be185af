"""Conversion of the floor log HTML into a :class:`Document`."""
from __future__ import annotations

from typing import Dict, List, Tuple
import logging

from bs4 import BeautifulSoup, FeatureNotFound
from bs4.element import Tag

from ..core.types import BlockRole, Document, TextBlock

LOGGER = logging.getLogger(__name__)

_ROLES = {
    "center": BlockRole.CENTERED,
    "left": BlockRole.LEFT,
}


def soupify(html: str) -> BeautifulSoup:
    """Use lxml if available; otherwise fall back to the stdlib parser."""
    try:
        return BeautifulSoup(html, "lxml")
    except FeatureNotFound:
        return BeautifulSoup(html, "html.parser")


def _role_for(tag: Tag) -> BlockRole:
    align = tag.get("align")
    if isinstance(align, list):
        align = " ".join(align)
    if not align:
        return BlockRole.OTHER
    return _ROLES.get(align.strip().lower(), BlockRole.OTHER)


def parse_document(html: str) -> Document:
    """Return every ``<p>`` element of ``html`` as a role tagged block."""

    soup = soupify(html)
    element_ids: Dict[int, int] = {}

    def _scope_id(element: Tag) -> int:
        return element_ids.setdefault(id(element), len(element_ids))

    blocks: List[TextBlock] = []
    for paragraph in soup.find_all("p"):
        scopes: Tuple[int, ...] = tuple(_scope_id(parent) for parent in paragraph.parents)
        blocks.append(TextBlock(text=paragraph.get_text(), role=_role_for(paragraph), scopes=scopes))
    LOGGER.debug("Parsed %s paragraph blocks", len(blocks))
    return Document(blocks=tuple(blocks))


__all__ = ["parse_document", "soupify"]
