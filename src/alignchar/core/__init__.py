# topmark:header:start
#
#   project      : AlignChar
#   file         : __init__.py
#   file_relpath : src/alignchar/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The AlignChar Authors
#
# topmark:header:end

"""Core alignment engine, free of CLI and UI concerns.

Included modules:

- ``reader``
  Bounded line reader over a binary stream (fixed-capacity buffer).

- ``width``
  Column width of a line with tab expansion.

- ``transformer``
  Per-line alignment decision and emission.

- ``engine``
  The driver loop (`process`) including the overflow passthrough for lines
  that do not fit in the buffer.

- ``streams`` / ``errors``
  Checked byte I/O and the library exception types.
"""

from __future__ import annotations
