# topmark:header:start
#
#   project      : PrettyVal
#   file         : __init__.py
#   file_relpath : src/prettyval/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration for PrettyVal: render settings, TOML loading and logging.

Public modules:
    - prettyval.config.model
    - prettyval.config.io
    - prettyval.config.logging
"""

from __future__ import annotations

from prettyval.config.io import discover_config, load_config, resolve_config
from prettyval.config.model import ConfigError, MutableRenderConfig, RenderConfig

__all__ = [
    "ConfigError",
    "MutableRenderConfig",
    "RenderConfig",
    "discover_config",
    "load_config",
    "resolve_config",
]
