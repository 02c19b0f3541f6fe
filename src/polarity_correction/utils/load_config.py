# src/polarity_correction/utils/load_config.py

"""Load JSON configs from the package <data/> directory with caching.

Modes:
- "raw"             -> return parsed JSON as-is
- "validated_dict"  -> return dict[str, Any] after an optional validator

Used by the classifier defaults (thresholds, zero-shot candidates) and by
tests that point the loader at a temporary directory.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from collections.abc import Callable
from pathlib import Path
from types import TracebackType
from typing import Any, Literal

Mode = Literal["raw", "validated_dict"]
__all__ = [
    "Mode",
    "load_config",
    "clear_config_cache",
    "temp_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]

DATA_DIR_ENV = "POLARITY_DATA_DIR"


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """Raise when the configured data directory does not exist."""


class ConfigFileNotFound(FileNotFoundError):
    """Raise when the requested config file cannot be read or resolved."""


class ConfigParseError(ValueError):
    """Raise when JSON parsing/validation fails for a config file."""


class ConfigTypeError(TypeError):
    """Raise when the parsed JSON doesn't match the expected structure."""


# ── Logging & cache ──────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
_CACHE_LOCK = threading.RLock()
# key: path, mtime, mode, encoding
_CONFIG_CACHE: dict[tuple[Path, float, str, str], Any] = {}


def clear_config_cache() -> None:
    """Empty the in-memory config cache."""
    with _CACHE_LOCK:
        _CONFIG_CACHE.clear()
    log.debug("Config cache cleared.")


def _packaged_data_dir() -> Path:
    return (Path(__file__).resolve().parent.parent / "data").resolve()


def _resolve_data_dir(base_dir: Path | None) -> Path:
    """Explicit base_dir > POLARITY_DATA_DIR > packaged data/."""
    if base_dir is None:
        env = os.environ.get(DATA_DIR_ENV)
        base_dir = Path(os.path.expanduser(env)) if env else _packaged_data_dir()
    data_dir = base_dir.resolve()
    if not data_dir.is_dir():
        raise DataDirNotFound(f"Data directory not found: {data_dir}")
    return data_dir


def load_config(
    file: str | os.PathLike[str],
    mode: Mode = "raw",
    *,
    base_dir: Path | None = None,
    encoding: str = "utf-8",
    validator: Callable[[dict[str, Any]], dict[str, Any]] | None = None,
) -> Any:
    """Load <data>/<file>.json, parse, coerce by mode, and cache results.

    Results produced with a validator are never cached, since the validator may
    reshape the data.
    """
    data_dir = _resolve_data_dir(base_dir)

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

    try:
        mtime = path.stat().st_mtime
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot stat {path}: {e}") from e

    cache_key = (path, mtime, mode, encoding)
    if validator is None:
        with _CACHE_LOCK:
            if cache_key in _CONFIG_CACHE:
                log.debug("Config cache HIT: %s (mode=%s)", path.name, mode)
                return _CONFIG_CACHE[cache_key]

    try:
        with path.open("r", encoding=encoding) as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e

    if mode == "raw":
        result: Any = data
    elif mode == "validated_dict":
        if not isinstance(data, dict):
            raise ConfigTypeError(
                f"{path.name}: expected dict for mode 'validated_dict', got {type(data).__name__}"
            )
        if validator is not None:
            try:
                data = validator(data)
            except Exception as e:
                raise ConfigParseError(f"{path.name}: validator failed: {e}") from e
        result = data
    else:
        raise ValueError(f"Unknown mode '{mode}'")

    if validator is None:
        with _CACHE_LOCK:
            _CONFIG_CACHE[cache_key] = result
        log.debug("Config cache MISS → STORED: %s (mode=%s)", path.name, mode)
    return result


class temp_data_dir:
    """Temporarily point POLARITY_DATA_DIR at `path` for the block."""

    def __init__(self, path: os.PathLike[str] | str):
        self._new = str(path)
        self._old: str | None = None

    def __enter__(self) -> temp_data_dir:
        self._old = os.environ.get(DATA_DIR_ENV)
        os.environ[DATA_DIR_ENV] = self._new
        clear_config_cache()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._old is None:
            os.environ.pop(DATA_DIR_ENV, None)
        else:
            os.environ[DATA_DIR_ENV] = self._old
        clear_config_cache()
