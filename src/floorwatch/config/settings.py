"""Application configuration helpers for floorwatch."""

from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
import types
from typing import Any, Dict, Optional, Type, TypeVar, Union, get_args, get_origin, get_type_hints


_DEFAULT_CONFIG_LOCATIONS = (
    Path("floorwatch.json"),
    Path.home() / ".config" / "floorwatch" / "config.json",
)
_ENV_PREFIX = "FLOORWATCH_"


@dataclass(slots=True)
class GovInfoConfig:
    """Configuration for the GovInfo API (an api.data.gov key is required)."""

    base_url: str = "https://api.govinfo.gov"
    content_url: str = "https://www.govinfo.gov/content/pkg"
    api_key: Optional[str] = None
    timeout: float = 30.0
    max_retries: int = 3
    page_size: int = 100


@dataclass(slots=True)
class ParserConfig:
    """Post-processing options applied to parsed transcripts."""

    group_segments: bool = True
    congress: int = 119


@dataclass(slots=True)
class AppConfig:
    """High level application configuration."""

    govinfo: GovInfoConfig = field(default_factory=GovInfoConfig)
    parser: ParserConfig = field(default_factory=ParserConfig)


_SECTIONS: Dict[str, Type[Any]] = {
    "govinfo": GovInfoConfig,
    "parser": ParserConfig,
}


def _load_from_env(prefix: str) -> Dict[str, Any]:
    """Load configuration entries for ``prefix`` from the environment."""

    data: Dict[str, Any] = {}
    for key, value in os.environ.items():
        if key.startswith(prefix):
            data[key.removeprefix(prefix).lower()] = value
    return data


def _merge_dict(target: Dict[str, Any], updates: Dict[str, Any]) -> Dict[str, Any]:
    merged = target.copy()
    merged.update({k: v for k, v in updates.items() if v is not None})
    return merged


def _load_config_file(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    with path.open("r", encoding="utf8") as fh:
        data = json.load(fh)
    if not isinstance(data, dict):
        raise ValueError(f"Configuration file {path} must contain a JSON object")
    return data


T = TypeVar("T")


def _coerce_value(value: Any, annotation: Any) -> Any:
    """Convert ``value`` (often a string from the environment) to ``annotation``."""

    if value is None:
        return None

    origin = get_origin(annotation)
    if origin in (Union, types.UnionType):
        args = [arg for arg in get_args(annotation) if arg is not type(None)]  # noqa: E721 - allow Optional
        if not args:
            return None
        last_error: Exception | None = None
        for candidate in args:
            try:
                return _coerce_value(value, candidate)
            except (TypeError, ValueError) as exc:
                last_error = exc
        raise ValueError(f"Cannot convert {value!r} to {annotation}") from last_error

    target_type = origin or annotation

    if target_type is bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            normalized = value.strip().lower()
            if normalized in {"true", "1", "yes", "y", "on"}:
                return True
            if normalized in {"false", "0", "no", "n", "off"}:
                return False
        if isinstance(value, (int, float)):
            return bool(value)
        raise ValueError(f"Cannot convert {value!r} to bool")

    if target_type is int:
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        if isinstance(value, (float, str)):
            return int(float(value))
        raise ValueError(f"Cannot convert {value!r} to int")

    if target_type is float:
        if isinstance(value, (int, float, str)) and not isinstance(value, bool):
            return float(value)
        raise ValueError(f"Cannot convert {value!r} to float")

    if target_type is str:
        return value if isinstance(value, str) else str(value)

    return value


def _dataclass_from_dict(cls: Type[T], data: Dict[str, Any]) -> T:
    """Create dataclass ``cls`` while coercing ``data`` to the proper types."""

    kwargs: Dict[str, Any] = {}
    type_hints = get_type_hints(cls)
    for entry in fields(cls):
        if entry.name not in data:
            continue
        try:
            kwargs[entry.name] = _coerce_value(data[entry.name], type_hints.get(entry.name, entry.type))
        except (TypeError, ValueError) as exc:
            raise ValueError(
                f"Invalid value for {cls.__name__}.{entry.name}: {data[entry.name]!r}"
            ) from exc
    return cls(**kwargs)


def resolve_config_path(explicit_path: Optional[Path] = None) -> Path:
    """Return the effective configuration file path.

    An explicit path wins. Otherwise the first existing default location is
    used, falling back to ``~/.config/floorwatch/config.json``.
    """

    if explicit_path:
        return explicit_path

    for candidate in _DEFAULT_CONFIG_LOCATIONS:
        if candidate.exists():
            return candidate

    return _DEFAULT_CONFIG_LOCATIONS[-1]


def load_config(explicit_path: Optional[Path] = None) -> AppConfig:
    """Create the application configuration.

    Defaults, an optional JSON file and ``FLOORWATCH_SECTION_FIELD``
    environment variables (e.g. ``FLOORWATCH_GOVINFO_API_KEY``) are merged in
    that order.
    """

    file_data: Dict[str, Any] = {}
    if explicit_path:
        file_data = _load_config_file(explicit_path)
    else:
        for candidate in _DEFAULT_CONFIG_LOCATIONS:
            file_data = _load_config_file(candidate)
            if file_data:
                break

    sections: Dict[str, Any] = {}
    for name, cls in _SECTIONS.items():
        data = _merge_dict(asdict(cls()), file_data.get(name) or {})
        data = _merge_dict(data, _load_from_env(f"{_ENV_PREFIX}{name.upper()}_"))
        sections[name] = _dataclass_from_dict(cls, data)
    return AppConfig(**sections)


def save_config(config: AppConfig, path: Optional[Path] = None) -> Path:
    """Persist ``config`` as JSON and return the target path."""

    target = resolve_config_path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    with target.open("w", encoding="utf8") as fh:
        json.dump(asdict(config), fh, ensure_ascii=False, indent=2, sort_keys=True)
        fh.write("\n")
    return target


__all__ = [
    "AppConfig",
    "GovInfoConfig",
    "ParserConfig",
    "load_config",
    "resolve_config_path",
    "save_config",
]
