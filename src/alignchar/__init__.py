# topmark:header:start
#
#   project      : AlignChar
#   file         : __init__.py
#   file_relpath : src/alignchar/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The AlignChar Authors
#
# topmark:header:end

"""AlignChar package.

AlignChar aligns a trailing character (by default a backslash, as in C macro
continuation lines) to a fixed column by padding each line that ends with it.
Lines that do not end with the character, lines that are too long for the line
buffer, and lines that already reach the column are left byte-for-byte
unchanged. It exposes both a CLI and a small typed API (`alignchar.api`).
"""

from __future__ import annotations
