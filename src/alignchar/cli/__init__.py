# topmark:header:start
#
#   project      : AlignChar
#   file         : __init__.py
#   file_relpath : src/alignchar/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The AlignChar Authors
#
# topmark:header:end

"""AlignChar CLI package.

This package groups the Click command definition and its supporting utilities
(options, console, errors, exit codes).

Typical usage:
    The console script entry point is defined in ``pyproject.toml`` as::

        [project.scripts]
        alignchar = "alignchar.cli.main:cli"
"""

from __future__ import annotations

__all__: list[str] = []
# Do NOT import .main at module import time
