"""SQLAlchemy models for the floor log scraper."""
from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy import JSON, DateTime, Integer, String, Text, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Declarative SQLAlchemy base class."""


class FloorUpdateModel(Base):
    """Database representation of a floor update."""

    __tablename__ = "floor_updates"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    chamber: Mapped[str] = mapped_column(String(16), index=True)
    legislative_day: Mapped[str] = mapped_column(String(10), index=True)
    timestamp: Mapped[datetime] = mapped_column(DateTime(timezone=True), index=True)
    events: Mapped[List[str]] = mapped_column(JSON, default=list)
    bill_ids: Mapped[List[str]] = mapped_column(JSON, default=list)
    roll_ids: Mapped[List[str]] = mapped_column(JSON, default=list)
    bioguide_ids: Mapped[List[str]] = mapped_column(JSON, default=list)
    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())


class ReportModel(Base):
    """Diagnostic report emitted by a run."""

    __tablename__ = "reports"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    status: Mapped[str] = mapped_column(String(16), index=True)
    source: Mapped[str] = mapped_column(String(128))
    message: Mapped[str] = mapped_column(Text)
    attached: Mapped[Optional[Dict[str, Any]]] = mapped_column(JSON, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())


__all__ = ["Base", "FloorUpdateModel", "ReportModel"]
