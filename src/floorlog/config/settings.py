"""Application configuration helpers for the floor log scraper."""

from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass, fields
from pathlib import Path
import types
from typing import Any, Dict, Optional, Type, TypeVar, Union, get_args, get_origin, get_type_hints

from ..clients.floor_log import DEFAULT_URL


_DEFAULT_CONFIG_LOCATIONS = (
    Path("floorlog.json"),
    Path.home() / ".config" / "floorlog" / "config.json",
)


@dataclass(slots=True)
class SourceConfig:
    """Where and how to fetch the floor log."""

    url: str = DEFAULT_URL
    timeout: float = 30.0
    break_cache: bool = True
    user_agent: Optional[str] = None


@dataclass(slots=True)
class StorageConfig:
    """Configuration for the update database."""

    database_url: str = "sqlite:///floorlog.db"
    echo_sql: bool = False


@dataclass(slots=True)
class RunConfig:
    """Options for a single run and for watch mode."""

    chamber: str = "senate"
    session: Optional[int] = None
    debug: bool = False
    no_pause: bool = False
    pause_seconds: float = 1.0
    interval: float = 300.0


@dataclass(slots=True)
class AppConfig:
    """High level application configuration."""

    source: SourceConfig
    storage: StorageConfig
    run: RunConfig


def _load_from_env(prefix: str) -> Dict[str, Any]:
    """Load configuration entries for ``prefix`` from the environment."""

    data: Dict[str, Any] = {}
    for key, value in os.environ.items():
        if key.startswith(prefix):
            normalized_key = key.removeprefix(prefix)
            data[normalized_key.lower()] = value
    return data


def _merge_dict(target: Dict[str, Any], updates: Dict[str, Any]) -> Dict[str, Any]:
    merged = target.copy()
    merged.update({k: v for k, v in updates.items() if v is not None})
    return merged


def _load_config_file(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    with path.open("r", encoding="utf8") as fh:
        return json.load(fh)


T = TypeVar("T")


_TRUE = {"true", "1", "yes", "y", "on"}
_FALSE = {"false", "0", "no", "n", "off"}


def _to_bool(value: Any) -> bool:
    if isinstance(value, (bool, int, float)):
        return bool(value)
    normalized = str(value).strip().lower()
    if normalized in _TRUE:
        return True
    if normalized in _FALSE:
        return False
    raise ValueError(f"Cannot convert {value!r} to bool")


def _to_int(value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError(f"Cannot convert {value!r} to int")
    return int(float(value))


_CONVERTERS = {bool: _to_bool, int: _to_int, float: float, str: str}


def _coerce_value(value: Any, annotation: Any) -> Any:
    """Convert a file or environment value to the field's annotated type.

    ``Optional[X]`` accepts ``None`` and the empty string as "unset".
    """

    if value is None:
        return None
    if get_origin(annotation) in (Union, types.UnionType):
        if isinstance(value, str) and not value.strip():
            return None
        (annotation,) = [arg for arg in get_args(annotation) if arg is not type(None)]  # noqa: E721
    converter = _CONVERTERS.get(annotation)
    return converter(value) if converter else value


def _dataclass_from_dict(cls: Type[T], data: Dict[str, Any]) -> T:
    """Create dataclass ``cls`` while coercing ``data`` to the proper types."""

    kwargs: Dict[str, Any] = {}
    type_hints = get_type_hints(cls)
    for field in fields(cls):
        if field.name not in data:
            continue
        try:
            annotation = type_hints.get(field.name, field.type)
            kwargs[field.name] = _coerce_value(data[field.name], annotation)
        except (TypeError, ValueError) as exc:
            raise ValueError(
                f"Invalid value for {cls.__name__}.{field.name}: {data[field.name]!r}"
            ) from exc
    return cls(**kwargs)


def resolve_config_path(explicit_path: Optional[Path] = None) -> Path:
    """Return the effective configuration file path.

    If ``explicit_path`` is provided it is returned verbatim. Otherwise the
    first existing default location wins; if none exists the XDG-style path
    (``~/.config/floorlog/config.json``) is returned.
    """

    if explicit_path:
        return explicit_path

    for candidate in _DEFAULT_CONFIG_LOCATIONS:
        if candidate.exists():
            return candidate

    return _DEFAULT_CONFIG_LOCATIONS[-1]


def load_config(explicit_path: Optional[Path] = None) -> AppConfig:
    """Create the application configuration.

    Defaults, an optional JSON file and ``FLOORLOG_*`` environment variables
    are layered in that order. Environment variable names use the format
    ``FLOORLOG_SECTION_FIELD`` (e.g. ``FLOORLOG_RUN_SESSION``).
    """

    base = {
        "source": asdict(SourceConfig()),
        "storage": asdict(StorageConfig()),
        "run": asdict(RunConfig()),
    }

    file_data: Dict[str, Any] = {}
    if explicit_path:
        file_data = _load_config_file(explicit_path)
    else:
        for candidate in _DEFAULT_CONFIG_LOCATIONS:
            file_data = _load_config_file(candidate)
            if file_data:
                break

    source_data = _merge_dict(_merge_dict(base["source"], file_data.get("source", {})), _load_from_env("FLOORLOG_SOURCE_"))
    storage_data = _merge_dict(
        _merge_dict(base["storage"], file_data.get("storage", {})), _load_from_env("FLOORLOG_STORAGE_")
    )
    run_data = _merge_dict(_merge_dict(base["run"], file_data.get("run", {})), _load_from_env("FLOORLOG_RUN_"))

    return AppConfig(
        source=_dataclass_from_dict(SourceConfig, source_data),
        storage=_dataclass_from_dict(StorageConfig, storage_data),
        run=_dataclass_from_dict(RunConfig, run_data),
    )


def save_config(config: AppConfig, path: Optional[Path] = None) -> Path:
    """Persist ``config`` as JSON and return the target path."""

    target = resolve_config_path(path)
    target.parent.mkdir(parents=True, exist_ok=True)

    data = {
        "source": asdict(config.source),
        "storage": asdict(config.storage),
        "run": asdict(config.run),
    }
    with target.open("w", encoding="utf8") as fh:
        json.dump(data, fh, ensure_ascii=False, indent=2, sort_keys=True)
        fh.write("\n")
    return target


__all__ = [
    "AppConfig",
    "RunConfig",
    "SourceConfig",
    "StorageConfig",
    "load_config",
    "resolve_config_path",
    "save_config",
]
