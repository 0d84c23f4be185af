"""High level orchestration of a floor log scraping run."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Literal, Optional, Protocol
import logging

from ..clients import FloorLogClientError
from ..core.session import resolve_session
from ..core.types import RunSummary, UpdateRecord
from ..database import StorageError
from ..parsing import find_title_block, parse_document, segment_updates
from ..reporting import Reporter
from .clock import Clock, SystemClock
from .merge import known_events, new_updates
from .records import build_record

LOGGER = logging.getLogger(__name__)

SOURCE = "FloorUpdatesLiveSenate"

PipelineEventKind = Literal[
    "start",
    "fetched",
    "segmented",
    "duplicate",
    "saved",
    "failed",
    "aborted",
    "finished",
    "error",
]


@dataclass(slots=True)
class PipelineEvent:
    """Fine grained progress notification emitted by :class:`FloorUpdatesPipeline`."""

    kind: PipelineEventKind
    saved: int
    legislative_day: str | None = None
    message: str | None = None


ProgressCallback = Callable[[PipelineEvent], None]


class DocumentSource(Protocol):
    def fetch(self) -> str:
        ...


class UpdateStore(Protocol):
    def updates_for_day(self, legislative_day: str, *, chamber: str = "senate") -> List[UpdateRecord]:
        ...

    def add_update(self, record: UpdateRecord) -> UpdateRecord:
        ...


@dataclass(slots=True)
class RunOptions:
    chamber: str = "senate"
    session: Optional[int] = None
    debug: bool = False


class FloorUpdatesPipeline:
    """Fetch the floor log, detect new updates and persist them."""

    def __init__(
        self,
        *,
        source: DocumentSource,
        storage: UpdateStore,
        reporter: Optional[Reporter] = None,
        clock: Optional[Clock] = None,
        options: Optional[RunOptions] = None,
    ) -> None:
        self._source = source
        self._storage = storage
        self._reporter = reporter or Reporter()
        self._clock = clock or SystemClock()
        self._options = options or RunOptions()

    @property
    def reporter(self) -> Reporter:
        return self._reporter

    def run(self, *, progress_callback: Optional[ProgressCallback] = None) -> RunSummary:
        """Run once. Fetch, structural and persistence problems end up in reports, not exceptions."""

        summary = RunSummary()
        self._notify(progress_callback, PipelineEvent(kind="start", saved=0, message="Run started"))
        try:
            try:
                html = self._source.fetch()
            except FloorLogClientError as exc:
                LOGGER.debug("Fetch failed: %s", exc)
                return self._abort(summary, progress_callback, "Network error on fetching the floor log, can't go on.")
            self._notify(progress_callback, PipelineEvent(kind="fetched", saved=0, message="Fetched floor log"))

            document = parse_document(html)
            title = find_title_block(document)
            if title is None:
                return self._abort(summary, progress_callback, "Can't locate title of the floor log, can't go on.")

            segmentation = segment_updates(document, title)
            for anomaly in segmentation.anomalies:
                self._reporter.warning(SOURCE, anomaly)
            summary.anomalies.extend(segmentation.anomalies)
            self._notify(
                progress_callback,
                PipelineEvent(
                    kind="segmented",
                    saved=0,
                    message=f"Found {len(segmentation.groups)} legislative days",
                ),
            )

            session = resolve_session(self._options.session, self._clock.now().date())
            for legislative_day in sorted(segmentation.groups):
                try:
                    self._process_day(
                        legislative_day,
                        segmentation.groups[legislative_day],
                        session,
                        summary,
                        progress_callback,
                    )
                except StorageError as exc:
                    LOGGER.debug("Reading stored updates failed: %s", exc)
                    return self._abort(
                        summary,
                        progress_callback,
                        f"Can't read stored floor updates for leg. day {legislative_day}, can't go on.",
                    )
        except Exception as exc:  # pragma: no cover - re-raised for visibility
            LOGGER.exception("Floor update run failed: %s", exc)
            self._notify(progress_callback, PipelineEvent(kind="error", saved=summary.saved, message=str(exc)))
            raise

        if summary.failures:
            self._reporter.failure(
                SOURCE,
                f"Failed to save {len(summary.failures)} floor updates, attributes attached",
                failures=summary.failures,
            )
        self._reporter.success(SOURCE, f"Saved {summary.saved} new floor updates")
        self._notify(
            progress_callback,
            PipelineEvent(kind="finished", saved=summary.saved, message="Run finished"),
        )
        return summary

    def _process_day(
        self,
        legislative_day: str,
        items: List[str],
        session: str,
        summary: RunSummary,
        progress_callback: Optional[ProgressCallback],
    ) -> None:
        known = known_events(self._storage.updates_for_day(legislative_day, chamber=self._options.chamber))
        fresh = new_updates(known, items)
        duplicates = len(items) - len(fresh)
        summary.duplicates += duplicates
        if duplicates:
            self._debug("Found %s dupes on leg. day %s, ignoring", duplicates, legislative_day)
            self._notify(
                progress_callback,
                PipelineEvent(kind="duplicate", saved=summary.saved, legislative_day=legislative_day),
            )

        for text in fresh:
            record = build_record(
                legislative_day,
                text,
                self._clock.now(),
                session=session,
                chamber=self._options.chamber,
            )
            try:
                self._storage.add_update(record)
            except StorageError as exc:
                LOGGER.warning("Failed to save floor update, will file report: %s", exc)
                summary.failures.append(record.attributes())
                self._notify(
                    progress_callback,
                    PipelineEvent(kind="failed", saved=summary.saved, legislative_day=legislative_day, message=str(exc)),
                )
                continue
            summary.saved += 1
            self._debug(
                "[%s] New floor update on leg. day %s",
                record.timestamp.strftime("%Y-%m-%d %H:%M:%S"),
                legislative_day,
            )
            self._notify(
                progress_callback,
                PipelineEvent(kind="saved", saved=summary.saved, legislative_day=legislative_day, message=text),
            )
            self._clock.pause()

    def _abort(
        self,
        summary: RunSummary,
        progress_callback: Optional[ProgressCallback],
        message: str,
    ) -> RunSummary:
        summary.aborted = message
        attached = {"failures": summary.failures} if summary.failures else {}
        self._reporter.warning(SOURCE, message, **attached)
        self._notify(progress_callback, PipelineEvent(kind="aborted", saved=summary.saved, message=message))
        return summary

    def _debug(self, message: str, *args: object) -> None:
        LOGGER.log(logging.INFO if self._options.debug else logging.DEBUG, message, *args)

    @staticmethod
    def _notify(callback: Optional[ProgressCallback], event: PipelineEvent) -> None:
        if callback:
            callback(event)


__all__ = [
    "DocumentSource",
    "FloorUpdatesPipeline",
    "PipelineEvent",
    "RunOptions",
    "UpdateStore",
]
