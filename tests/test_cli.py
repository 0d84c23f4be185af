import json
import logging

import floorlog.cli as cli
import floorlog.config.settings as config_settings
from floorlog.config import load_config
from floorlog.core import UpdateRecord
from floorlog.database import Storage, StorageError, create_storage
from floorlog.pipeline import SyntheticClock


class DummyClient:
    def __init__(self, html):
        self.html = html
        self.closed = False

    def fetch(self):
        return self.html

    def close(self):
        self.closed = True


def _config(tmp_path, monkeypatch):
    monkeypatch.setattr(config_settings, "_DEFAULT_CONFIG_LOCATIONS", (tmp_path / "none.json", tmp_path / "none.json"))
    monkeypatch.setenv("FLOORLOG_STORAGE_DATABASE_URL", f"sqlite:///{(tmp_path / 'cli.db').as_posix()}")
    monkeypatch.setenv("FLOORLOG_RUN_SESSION", "118")


def test_run_command_saves_updates(tmp_path, monkeypatch):
    _config(tmp_path, monkeypatch)
    html = (
        '<div><p align="center">SENATE FLOOR PROCEEDINGS</p>'
        '<p align="center">March 3, 2024</p><p align="left">Passed S. 4.</p></div>'
    )
    original = cli.create_pipeline
    monkeypatch.setattr(cli, "create_pipeline", lambda config: original(config, client=DummyClient(html)))

    assert cli.main(["run", "--no-pause"]) == 0

    storage = create_storage(load_config().storage.database_url)
    records = storage.updates_for_day("2024-03-03")
    assert [r.bill_ids for r in records] == [["s4-118"]]


def test_run_command_fails_when_title_is_missing(tmp_path, monkeypatch):
    _config(tmp_path, monkeypatch)
    original = cli.create_pipeline
    monkeypatch.setattr(cli, "create_pipeline", lambda config: original(config, client=DummyClient("<p>nothing</p>")))

    assert cli.main(["run", "--no-pause"]) == 1


def test_watch_repeats_runs(tmp_path, monkeypatch):
    _config(tmp_path, monkeypatch)
    runs = []
    monkeypatch.setattr(cli, "_run_once", lambda config: runs.append(config) or 0)
    slept = []

    config = load_config()
    config.run.interval = 42
    cli.watch(config, sleep=slept.append, max_runs=3)

    assert len(runs) == 3
    assert slept == [42, 42]


def test_list_command_prints_updates(tmp_path, monkeypatch, capsys):
    _config(tmp_path, monkeypatch)
    storage = create_storage(load_config().storage.database_url)
    clock = SyntheticClock()
    storage.add_update(
        UpdateRecord(
            chamber="senate",
            legislative_day="2024-03-03",
            timestamp=clock.now(),
            events=["Passed S. 4."],
            bill_ids=["s4-118"],
        )
    )

    assert cli.main(["list", "--limit", "5"]) == 0

    output = capsys.readouterr().out
    assert "2024-03-03" in output
    assert "[s4-118]" in output
    assert "Passed S. 4." in output


def test_config_command_writes_file(tmp_path, monkeypatch):
    _config(tmp_path, monkeypatch)
    target = tmp_path / "written.json"

    assert cli.main(["config", "--config", str(target), "--session", "119"]) == 0

    data = json.loads(target.read_text(encoding="utf8"))
    assert data["run"]["session"] == 119


def test_watch_keeps_running_after_a_failed_run(tmp_path, monkeypatch, caplog):
    _config(tmp_path, monkeypatch)
    calls = []

    def flaky_run(config):
        calls.append(config)
        if len(calls) == 1:
            raise RuntimeError("database is locked")
        return 0

    monkeypatch.setattr(cli, "_run_once", flaky_run)
    slept = []

    with caplog.at_level(logging.ERROR, logger="floorlog.cli"):
        assert cli.watch(load_config(), sleep=slept.append, max_runs=3) == 0

    assert len(calls) == 3
    assert len(slept) == 2
    assert any("failed" in record.getMessage() and record.exc_info for record in caplog.records)


def test_watch_survives_store_read_errors(tmp_path, monkeypatch):
    _config(tmp_path, monkeypatch)
    html = (
        '<div><p align="center">SENATE FLOOR PROCEEDINGS</p>'
        '<p align="center">March 3, 2024</p><p align="left">Passed S. 4.</p></div>'
    )
    original = cli.create_pipeline
    monkeypatch.setattr(cli, "create_pipeline", lambda config: original(config, client=DummyClient(html)))
    reads = []
    real_read = Storage.updates_for_day

    def locked_once(self, legislative_day, *, chamber="senate"):
        reads.append(legislative_day)
        if len(reads) == 1:
            raise StorageError("database is locked")
        return real_read(self, legislative_day, chamber=chamber)

    monkeypatch.setattr(Storage, "updates_for_day", locked_once)
    config = load_config()
    config.run.no_pause = True

    cli.watch(config, sleep=lambda seconds: None, max_runs=3)

    assert reads == ["2024-03-03"] * 3
    storage = create_storage(config.storage.database_url)
    assert [r.events for r in real_read(storage, "2024-03-03")] == [["Passed S. 4."]]
