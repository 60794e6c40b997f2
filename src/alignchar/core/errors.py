# topmark:header:start
#
#   project      : AlignChar
#   file         : errors.py
#   file_relpath : src/alignchar/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 The AlignChar Authors
#
# topmark:header:end

"""Exceptions raised by the AlignChar library.

These are plain Python exceptions with no dependency on the CLI. The CLI layer
translates them into Click exceptions carrying an exit code
(see `alignchar.cli.errors`).

Taxonomy:
    - `AlignConfigError`: invalid configuration; raised before any byte is processed.
    - `AlignUsageError`: invalid use of the file-level API (output selection).
    - `AlignIOError`: a read or write on one of the streams failed. Fatal; output
      already written is not rolled back.

A line that is too long for the line buffer is *not* an error; it is copied
through unchanged.
"""

from __future__ import annotations


class AlignCharError(Exception):
    """Base class for all AlignChar errors."""


class AlignConfigError(AlignCharError, ValueError):
    """Invalid configuration (bad target column, zero-capacity buffer, malformed TOML)."""


class AlignUsageError(AlignCharError, ValueError):
    """Invalid combination of inputs/outputs passed to the file-level API."""


class AlignIOError(AlignCharError, OSError):
    """A read from the input or a write to the output failed."""
