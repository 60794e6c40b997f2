# topmark:header:start
#
#   project      : AlignChar
#   file         : keys.py
#   file_relpath : src/alignchar/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 The AlignChar Authors
#
# topmark:header:end

"""Canonical TOML key names for AlignChar configuration.

These keys are the external configuration API as it appears in
``alignchar.toml`` and in ``[tool.alignchar]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change. CLI option names are kept
separate (see `alignchar.cli.options`).
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by AlignChar configuration."""

    # [tool.alignchar] in pyproject.toml
    SECTION_TOOL: Final[str] = "tool"
    SECTION_ALIGNCHAR: Final[str] = "alignchar"

    KEY_CHAR: Final[str] = "char"
    KEY_POSITION: Final[str] = "position"
    KEY_FILL: Final[str] = "fill"
    KEY_TAB_WIDTH: Final[str] = "tab_width"
    KEY_BUFFER_CAPACITY: Final[str] = "buffer_capacity"

    ALLOWED_KEYS: Final[frozenset[str]] = frozenset(
        {
            KEY_CHAR,
            KEY_POSITION,
            KEY_FILL,
            KEY_TAB_WIDTH,
            KEY_BUFFER_CAPACITY,
        }
    )
