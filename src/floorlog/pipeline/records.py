"""Construction of :class:`UpdateRecord` objects for new floor updates."""
from __future__ import annotations

from datetime import datetime

from ..core.types import UpdateRecord
from ..parsing.identifiers import extract_bills, extract_legislators, extract_rolls


def build_record(
    legislative_day: str,
    text: str,
    timestamp: datetime,
    *,
    session: str,
    chamber: str = "senate",
) -> UpdateRecord:
    return UpdateRecord(
        chamber=chamber,
        legislative_day=legislative_day,
        timestamp=timestamp,
        events=[text],
        bill_ids=extract_bills(text, session),
        roll_ids=extract_rolls(text),
        bioguide_ids=extract_legislators(text),
    )


__all__ = ["build_record"]
