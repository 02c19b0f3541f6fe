# polarity_correction/utils/__init__.py
"""
Does: Provide config loading and topic-gated debug tracing for the correction stack.
Returns: Public API via load_config/clear_config_cache and debug/reload_topics.
Used by: Classifiers, the consistency filter, the CLI, and tests.
"""

from __future__ import annotations

from .load_config import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    DataDirNotFound,
    clear_config_cache,
    load_config,
    temp_data_dir,
)
from .log import (
    debug,
    is_enabled,
    reload_topics,
)

__all__ = [
    # Config loading
    "load_config",
    "clear_config_cache",
    "temp_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
    # Logging helpers
    "debug",
    "is_enabled",
    "reload_topics",
]
