"""Application level helpers for assembling pipeline dependencies."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from .clients import FloorLogClient
from .config import AppConfig
from .database import Storage, create_storage
from .pipeline import FloorUpdatesPipeline, RunOptions, SyntheticClock, SystemClock
from .pipeline.clock import Clock
from .reporting import Reporter


@dataclass(slots=True)
class PipelineResources:
    """Container bundling the objects needed to run the pipeline."""

    pipeline: FloorUpdatesPipeline
    client: FloorLogClient
    storage: Storage
    reporter: Reporter
    owns_client: bool = True
    owns_storage: bool = True

    def close(self) -> None:
        if self.owns_client:
            self.client.close()
        if self.owns_storage:
            self.storage.dispose()


def create_clock(config: AppConfig) -> Clock:
    # Batch runs keep timestamps strictly increasing without waiting.
    if config.run.no_pause:
        return SyntheticClock(step=timedelta(milliseconds=1))
    return SystemClock(pause_seconds=config.run.pause_seconds)


def create_pipeline(
    config: AppConfig,
    *,
    storage: Storage | None = None,
    client: FloorLogClient | None = None,
) -> PipelineResources:
    owns_client = client is None
    owns_storage = storage is None
    client_instance = client or FloorLogClient(
        config.source.url,
        timeout=config.source.timeout,
        break_cache=config.source.break_cache,
        user_agent=config.source.user_agent,
    )
    storage_instance = storage or create_storage(config.storage.database_url, echo=config.storage.echo_sql)
    reporter = Reporter(sink=storage_instance)
    pipeline = FloorUpdatesPipeline(
        source=client_instance,
        storage=storage_instance,
        reporter=reporter,
        clock=create_clock(config),
        options=RunOptions(chamber=config.run.chamber, session=config.run.session, debug=config.run.debug),
    )
    return PipelineResources(
        pipeline=pipeline,
        client=client_instance,
        storage=storage_instance,
        reporter=reporter,
        owns_client=owns_client,
        owns_storage=owns_storage,
    )


__all__ = ["PipelineResources", "create_clock", "create_pipeline"]
