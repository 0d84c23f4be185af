"""Detection of floor updates that are not yet in the store."""
from __future__ import annotations

from typing import AbstractSet, Iterable, List, Sequence

from ..core.types import UpdateRecord


def known_events(records: Iterable[UpdateRecord]) -> frozenset[str]:
    """Flatten the event lists of stored records into a set of texts."""

    return frozenset(event for record in records for event in record.events)


def new_updates(known: AbstractSet[str], items: Sequence[str]) -> List[str]:
    """Return the texts of ``items`` absent from ``known``, in their original order.

    Neither argument is modified. A text repeated within ``items`` is kept each
    time it occurs, matching how the store would receive it.
    """

    return [item for item in items if item not in known]


__all__ = ["known_events", "new_updates"]
