# topmark:header:start
#
#   project      : AlignChar
#   file         : __init__.py
#   file_relpath : src/alignchar/io/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The AlignChar Authors
#
# topmark:header:end

"""File-level orchestration around the alignment engine (open, close, in-place rewrite)."""

from __future__ import annotations
