"""Persistence helpers built on SQLAlchemy."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional

from sqlalchemy import create_engine, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from ..core.types import UpdateRecord
from .models import Base, FloorUpdateModel, ReportModel


class StorageError(RuntimeError):
    """Raised when the store rejects a write."""


def _to_record(model: FloorUpdateModel) -> UpdateRecord:
    return UpdateRecord(
        chamber=model.chamber,
        legislative_day=model.legislative_day,
        timestamp=model.timestamp,
        events=list(model.events or []),
        bill_ids=list(model.bill_ids or []),
        roll_ids=list(model.roll_ids or []),
        bioguide_ids=list(model.bioguide_ids or []),
        identifier=model.id,
    )


class Storage:
    """Wrapper around SQLAlchemy to store floor updates and reports."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine
        self._session_factory = sessionmaker(bind=engine, expire_on_commit=False)

    @contextmanager
    def session(self) -> Iterator[Session]:
        session = self._session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def ensure_schema(self) -> None:
        Base.metadata.create_all(self._engine)

    def updates_for_day(self, legislative_day: str, *, chamber: str = "senate") -> list[UpdateRecord]:
        """Return every stored update for ``legislative_day`` in discovery order."""

        try:
            with self.session() as session:
                stmt = (
                    select(FloorUpdateModel)
                    .where(
                        FloorUpdateModel.legislative_day == legislative_day,
                        FloorUpdateModel.chamber == chamber,
                    )
                    .order_by(FloorUpdateModel.timestamp, FloorUpdateModel.id)
                )
                return [_to_record(model) for model in session.scalars(stmt)]
        except SQLAlchemyError as exc:
            raise StorageError(f"Failed to read floor updates for {legislative_day}") from exc

    def add_update(self, record: UpdateRecord) -> UpdateRecord:
        """Persist ``record`` and return it with its assigned identifier."""

        try:
            with self.session() as session:
                model = FloorUpdateModel(
                    chamber=record.chamber,
                    legislative_day=record.legislative_day,
                    timestamp=record.timestamp,
                    events=list(record.events),
                    bill_ids=list(record.bill_ids),
                    roll_ids=list(record.roll_ids),
                    bioguide_ids=list(record.bioguide_ids),
                )
                session.add(model)
                session.flush()
                record.identifier = model.id
        except SQLAlchemyError as exc:
            raise StorageError(f"Failed to save floor update for {record.legislative_day}") from exc
        return record

    def record_report(self, status: str, source: str, message: str, attached: Optional[Dict[str, Any]] = None) -> None:
        with self.session() as session:
            session.add(ReportModel(status=status, source=source, message=message, attached=attached or None))

    def list_updates(self, limit: int = 25) -> list[UpdateRecord]:
        """Return the most recently discovered updates, newest first."""

        with self.session() as session:
            stmt = (
                select(FloorUpdateModel)
                .order_by(
                    FloorUpdateModel.legislative_day.desc(),
                    FloorUpdateModel.timestamp.desc(),
                    FloorUpdateModel.id.desc(),
                )
                .limit(limit)
            )
            return [_to_record(model) for model in session.scalars(stmt)]

    def dispose(self) -> None:
        """Dispose the underlying SQLAlchemy engine."""

        self._engine.dispose()


def create_storage(database_url: str, *, echo: bool = False) -> Storage:
    engine = create_engine(database_url, echo=echo, future=True)
    storage = Storage(engine)
    storage.ensure_schema()
    return storage


__all__ = ["Storage", "StorageError", "create_storage"]
