"""Extraction of structured references from floor update text."""
from __future__ import annotations

from typing import List
import re

_BILL_PATTERN = re.compile(
    r"(?:S\.|H\.)(?:\s?J\.|\s?R\.|\s?Con\.| ?)(?:\s?Res\.)*\s?\d+",
    re.IGNORECASE,
)
_SEPARATORS = re.compile(r"[\s.]+")


def bill_code(citation: str, session: str) -> str:
    """Return the canonical bill id for a matched citation, e.g. ``sconres5-118``."""

    # "Con." stays whole: concurrent resolutions are sconres/hconres, not scres/hcres.
    return f"{_SEPARATORS.sub('', citation).lower()}-{session}"


def extract_bills(text: str, session: str) -> List[str]:
    """Return the unique bill ids cited in ``text``, in order of appearance."""

    codes: List[str] = []
    for match in _BILL_PATTERN.finditer(text):
        code = bill_code(match.group(0), session)
        if code not in codes:
            codes.append(code)
    return codes


def extract_rolls(text: str) -> List[str]:
    return []


def extract_legislators(text: str) -> List[str]:
    return []


__all__ = ["bill_code", "extract_bills", "extract_legislators", "extract_rolls"]
