"""Helpers for the numbered legislative session (Congress)."""
from __future__ import annotations

from datetime import date
from typing import Optional


def session_for(day: date) -> int:
    """Return the Congress number in session on ``day``.

    A Congress starts in January of odd years, so 2023 and 2024 both map to
    the 118th Congress.
    """

    return (day.year + 1) // 2 - 894


def resolve_session(configured: Optional[int], today: date) -> str:
    if configured is not None:
        return str(configured)
    return str(session_for(today))


__all__ = ["resolve_session", "session_for"]
