# src/color_scale_generator/generation/general/utils/load_config.py

"""Load JSON object tables from the package <data/> directory with caching and validation.

Every table is a JSON object; `load_config` checks that, caches it by mtime and
hands it to an optional validator that returns the typed value callers use.

Used by the scale step table, the variable search patterns and the default seed
palette. Tests point the loader elsewhere with DATA_DIR or `base_dir`.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from collections.abc import Callable
from pathlib import Path
from typing import Any

# ── Public surface ────────────────────────────────────────────────────────────
DATA_DIR_ENV_VARS = ("DATA_DIR", "COLOR_SCALE_DATA_DIR")
__all__ = [
    "DATA_DIR_ENV_VARS",
    "load_config",
    "clear_config_cache",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """Raise when no 'data' directory is found while walking upwards."""


class ConfigFileNotFound(FileNotFoundError):
    """Raise when the requested config file cannot be read or resolved."""


class ConfigParseError(ValueError):
    """Raise when JSON parsing/validation fails for a config file."""


class ConfigTypeError(TypeError):
    """Raise when the parsed JSON doesn't match the expected structure."""


# ── Logging & cache ──────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
_CACHE_LOCK = threading.RLock()
# key: (path, mtime)
_CONFIG_CACHE: dict[tuple[Path, float], dict[str, Any]] = {}


def clear_config_cache() -> None:
    """Empty the in-memory config cache (pytest / hot reload)."""
    with _CACHE_LOCK:
        _CONFIG_CACHE.clear()
    log.debug("Config cache cleared.")


def _candidate_data_dirs(start: Path | None = None) -> list[Path]:
    """Compute candidate 'data' directories walking up from start."""
    start = (start or Path(__file__)).resolve()
    return [(p / "data").resolve() for p in [start, *start.parents]]


def _default_data_dir(start: Path | None = None) -> Path:
    """Return the first existing candidate directory or raise."""
    candidates = _candidate_data_dirs(start)
    for cand in candidates:
        if cand.is_dir():
            return cand
    raise DataDirNotFound(
        "No 'data' directory found.\nTried:\n  " + "\n  ".join(str(p) for p in candidates)
    )


def _env_data_dir() -> Path | None:
    """Resolve data dir from env if set."""
    for var in DATA_DIR_ENV_VARS:
        v = os.environ.get(var)
        if v:
            return Path(os.path.expanduser(v)).resolve()
    return None


def _resolve_path(file: str | os.PathLike[str], base_dir: Path | None) -> Path:
    data_dir = (base_dir or _env_data_dir() or _default_data_dir()).resolve()
    file_str = os.fspath(file)
    file_name = file_str if file_str.endswith(".json") else f"{file_str}.json"
    path = (data_dir / file_name).resolve()
    try:
        path.relative_to(data_dir)
    except ValueError as e:
        raise ConfigFileNotFound(
            f"Refusing to access file outside data dir: {path} (base={data_dir})"
        ) from e
    if not path.is_file():
        raise ConfigFileNotFound(f"Config file not found: {path}")
    return path


def _read_json(path: Path, encoding: str) -> Any:
    try:
        with path.open("r", encoding=encoding, errors="strict", newline="") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e


def _ensure_table(path: Path, data: Any) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise ConfigTypeError(f"{path.name}: expected a JSON object, got {type(data).__name__}")
    return data


def load_config(
    file: str | os.PathLike[str],
    *,
    base_dir: Path | None = None,
    encoding: str = "utf-8",
    validator: Callable[[dict[str, Any]], Any] | None = None,
) -> Any:
    """Load <data>/<file>.json, check it is an object, validate, and cache the table.

    The cache holds the parsed (pre-validator) table keyed by mtime, so an edit
    to the file invalidates it; the validator runs on every call.
    """
    path = _resolve_path(file, base_dir)

    try:
        mtime = path.stat().st_mtime
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot stat {path}: {e}") from e
    cache_key = (path, mtime)

    with _CACHE_LOCK:
        cached = _CONFIG_CACHE.get(cache_key)
    if cached is not None:
        log.debug("Config cache HIT: %s", path.name)
        result = cached
    else:
        result = _ensure_table(path, _read_json(path, encoding))
        with _CACHE_LOCK:
            _CONFIG_CACHE[cache_key] = result
        log.debug("Config cache MISS → STORED: %s", path.name)

    if validator is None:
        return result
    try:
        return validator(result)
    except (ConfigParseError, ConfigTypeError):
        raise
    except (ValueError, TypeError, KeyError) as e:
        raise ConfigParseError(f"{path.name}: validator failed: {e}") from e
