"""Canonicalization of text extracted from the floor log."""
from __future__ import annotations

import re

# Mojibake forms (UTF-8 bytes decoded as cp1252 or latin-1) are listed before
# the characters they were meant to be.
_REPLACEMENTS = (
    ("\u00e2\u20ac\u2122", "'"),
    ("\u00e2\u20ac\u0153", '"'),
    ("\u00e2\u20ac\u009d", '"'),
    ("\u00e2\u0080\u0099", "'"),
    ("\u00e2\u0080\u009c", '"'),
    ("\u00e2\u0080\u009d", '"'),
    ("\u00c2\u00a0", " "),
    ("\u2019", "'"),
    ("\u00a0", " "),
    ("\u201c", '"'),
    ("\u201d", '"'),
)
_WHITESPACE = re.compile(r"\s+")


def clean_text(text: str) -> str:
    """Return ``text`` with normalized punctuation and collapsed whitespace."""

    for raw, replacement in _REPLACEMENTS:
        text = text.replace(raw, replacement)
    return _WHITESPACE.sub(" ", text).strip()


__all__ = ["clean_text"]
