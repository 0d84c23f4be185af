"""Command line interface for the floor log scraper."""
from __future__ import annotations

import argparse
import logging
import time
from pathlib import Path
from typing import Callable, Optional

from .config import AppConfig, load_config, save_config
from .database import create_storage
from .runtime import create_pipeline

LOGGER = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Scrape the Senate floor log for new floor updates")
    parser.add_argument(
        "command",
        choices=["run", "watch", "list", "config"],
        help="Run once, keep running on an interval, list stored updates or write the configuration file",
    )
    parser.add_argument("--config", type=Path, help="Path to an explicit configuration file")
    parser.add_argument("--debug", action="store_true", default=None, help="Print duplicates and new saves")
    parser.add_argument(
        "--no-pause",
        dest="no_pause",
        action="store_true",
        default=None,
        help="Do not wait between saves; timestamps are spaced synthetically",
    )
    parser.add_argument("--session", type=int, help="Legislative session (Congress) used for bill ids")
    parser.add_argument("--interval", type=float, help="Seconds between runs (only used with 'watch')")
    parser.add_argument("--limit", type=int, default=25, help="Number of updates to show (only used with 'list')")
    return parser


def _apply_overrides(config: AppConfig, args: argparse.Namespace) -> AppConfig:
    if args.debug is not None:
        config.run.debug = args.debug
    if args.no_pause is not None:
        config.run.no_pause = args.no_pause
    if args.session is not None:
        config.run.session = args.session
    if args.interval is not None:
        config.run.interval = args.interval
    return config


def _run_once(config: AppConfig) -> int:
    resources = create_pipeline(config)
    try:
        summary = resources.pipeline.run()
    finally:
        resources.close()
    if not summary.completed:
        return 1
    LOGGER.info("Saved %s new floor updates (%s already known)", summary.saved, summary.duplicates)
    return 0


def watch(config: AppConfig, *, sleep: Callable[[float], None] = time.sleep, max_runs: Optional[int] = None) -> int:
    """Run the scraper every ``config.run.interval`` seconds until interrupted."""

    runs = 0
    try:
        while max_runs is None or runs < max_runs:
            try:
                _run_once(config)
            except Exception:
                LOGGER.exception("Floor log run %s failed, trying again next interval", runs + 1)
            runs += 1
            if max_runs is not None and runs >= max_runs:
                break
            LOGGER.debug("Sleeping %.0f seconds until the next run", config.run.interval)
            sleep(config.run.interval)
    except KeyboardInterrupt:
        LOGGER.info("Stopping after %s runs", runs)
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    config = _apply_overrides(load_config(args.config), args)
    logging.basicConfig(
        level=logging.DEBUG if config.run.debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if args.command == "run":
        return _run_once(config)
    if args.command == "watch":
        return watch(config)
    if args.command == "list":
        storage = create_storage(config.storage.database_url, echo=config.storage.echo_sql)
        try:
            for record in storage.list_updates(limit=args.limit):
                bills = ", ".join(record.bill_ids) or "-"
                print(f"{record.legislative_day}  {record.timestamp:%H:%M:%S}  [{bills}]  {' '.join(record.events)}")
        finally:
            storage.dispose()
        return 0
    if args.command == "config":
        target = save_config(config, args.config)
        LOGGER.info("Wrote configuration to %s", target)
        return 0
    parser.error(f"Unknown command {args.command}")
    return 2


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main())
