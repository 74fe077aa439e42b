# color_scale_generator/generation/general/utils/__init__.py
"""

Does: Provide config loading and lightweight debug logging utilities for the generation stack.
Returns: Public API via load_config/clear_config_cache and debug/reload_topics.
Used by: Color constants, the variable reconciler, the demo CLI and tests.
"""

from __future__ import annotations

from .load_config import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    DataDirNotFound,
    clear_config_cache,
    load_config,
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
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
    # Logging helpers
    "debug",
    "is_enabled",
    "reload_topics",
]
