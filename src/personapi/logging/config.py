"""Persisted logging settings.

The CLI stores the chosen log level in a small JSON document so that later
processes (the API server, other CLI invocations) pick it up on startup.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

LEVEL_KEY = "log_level"


def _default_config_path() -> Path:
    """Return ``PERSONAPI_LOG_CONFIG`` or ``<config dir>/logging.json``."""

    raw = os.environ.get("PERSONAPI_LOG_CONFIG")
    if raw and raw.strip():
        return Path(raw).expanduser()

    config_dir = os.environ.get("PERSONAPI_CONFIG_DIR")
    if config_dir and config_dir.strip():
        return Path(config_dir).expanduser() / "logging.json"
    return Path.home() / ".personapi" / "logging.json"


def config_path(config_file: Optional[os.PathLike[str] | str] = None) -> Path:
    if config_file is not None:
        return Path(config_file)
    return _default_config_path()


def load_config(config_file: Optional[os.PathLike[str] | str] = None) -> Dict[str, Any]:
    """Load the logging configuration.

    Missing or unreadable files yield an empty mapping so that a broken config
    never prevents the service from starting.
    """

    path = config_path(config_file)
    try:
        with path.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
    except (OSError, json.JSONDecodeError):
        return {}

    return data if isinstance(data, dict) else {}


def save_config(
    config: Dict[str, Any],
    config_file: Optional[os.PathLike[str] | str] = None,
) -> Path:
    path = config_path(config_file)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        json.dump(config, handle, indent=2, sort_keys=True)
        handle.write("\n")
    return path


def level_name(level: str | int) -> str:
    """Return the canonical name for ``level``.

    Raises
    ------
    ValueError
        If ``level`` is not a known logging level.
    """

    if isinstance(level, int):
        name = logging.getLevelName(level)
        if isinstance(name, str) and not name.startswith("Level "):
            return name
        raise ValueError(f"Unknown logging level: {level!r}")

    name = str(level).strip().upper()
    if isinstance(logging.getLevelName(name), int):
        return name
    raise ValueError(f"Unknown logging level: {level!r}")


def load_log_level(
    config_file: Optional[os.PathLike[str] | str] = None,
) -> Optional[int]:
    """Return the persisted numeric log level, or ``None`` when unset."""

    value = load_config(config_file).get(LEVEL_KEY)
    if value is None:
        return None
    if isinstance(value, int):
        return value

    numeric = logging.getLevelName(str(value).upper())
    return numeric if isinstance(numeric, int) else None


def save_log_level(
    level: str | int,
    config_file: Optional[os.PathLike[str] | str] = None,
) -> Path:
    """Persist ``level`` and return the path of the config file."""

    config = load_config(config_file)
    config[LEVEL_KEY] = level_name(level)
    return save_config(config, config_file)


__all__ = [
    "config_path",
    "load_config",
    "save_config",
    "level_name",
    "load_log_level",
    "save_log_level",
]
