"""Diagnostic reporting channel."""
from __future__ import annotations

from .reports import Report, ReportSink, ReportStatus, Reporter

__all__ = ["Report", "ReportSink", "ReportStatus", "Reporter"]
