"""Diagnostic reports emitted at the end of (or instead of) a run."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal, Optional, Protocol
import logging

LOGGER = logging.getLogger(__name__)

ReportStatus = Literal["success", "warning", "failure"]

_LEVELS = {
    "success": logging.INFO,
    "warning": logging.WARNING,
    "failure": logging.ERROR,
}


class ReportSink(Protocol):
    def record_report(
        self, status: str, source: str, message: str, attached: Optional[Dict[str, Any]] = None
    ) -> None:
        ...


@dataclass(slots=True)
class Report:
    status: ReportStatus
    source: str
    message: str
    attached: Dict[str, Any] = field(default_factory=dict)


class Reporter:
    """Collects reports, logs them and forwards them to an optional sink."""

    def __init__(self, sink: Optional[ReportSink] = None) -> None:
        self._sink = sink
        self.reports: List[Report] = []

    def success(self, source: str, message: str, **attached: Any) -> Report:
        return self._file("success", source, message, attached)

    def warning(self, source: str, message: str, **attached: Any) -> Report:
        return self._file("warning", source, message, attached)

    def failure(self, source: str, message: str, **attached: Any) -> Report:
        return self._file("failure", source, message, attached)

    def by_status(self, status: ReportStatus) -> List[Report]:
        return [report for report in self.reports if report.status == status]

    def _file(self, status: ReportStatus, source: str, message: str, attached: Dict[str, Any]) -> Report:
        report = Report(status=status, source=source, message=message, attached=attached)
        self.reports.append(report)
        LOGGER.log(_LEVELS[status], "[%s] %s: %s", status, source, message)
        if self._sink is not None:
            try:
                self._sink.record_report(status, source, message, attached or None)
            except Exception:
                LOGGER.exception("Could not persist %s report from %s", status, source)
        return report


__all__ = ["Report", "ReportSink", "ReportStatus", "Reporter"]
