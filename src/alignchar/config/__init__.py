# topmark:header:start
#
#   project      : AlignChar
#   file         : __init__.py
#   file_relpath : src/alignchar/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The AlignChar Authors
#
# topmark:header:end

"""Configuration handling for AlignChar.

Re-exports the configuration model (`AlignConfig`, `MutableAlignConfig`) and
the TOML-backed resolution helper (`resolve_config`). Logging setup lives in
`alignchar.config.logging`.
"""

from __future__ import annotations

from alignchar.config.io import resolve_config
from alignchar.config.model import AlignConfig, MutableAlignConfig

__all__ = [
    "AlignConfig",
    "MutableAlignConfig",
    "resolve_config",
]
