# topmark:header:start
#
#   project      : AlignChar
#   file         : width.py
#   file_relpath : src/alignchar/core/width.py
#   license      : MIT
#   copyright    : (c) 2025 The AlignChar Authors
#
# topmark:header:end

"""Column width of a line with tabs expanded to a fixed width."""

from __future__ import annotations

_TAB: int = 0x09
_NEWLINE: int = 0x0A


def line_width(line: bytes | bytearray | memoryview, tab_width: int) -> int:
    """Return the width of ``line`` in columns if tabs are ``tab_width`` wide.

    Counting stops at the first ``\\n``, so the terminator is never included.
    Every other byte counts as one column: there is no multi-byte or
    grapheme awareness, and a ``\\r`` before the ``\\n`` counts like any other byte.

    Args:
        line (bytes | bytearray | memoryview): Raw line content.
        tab_width (int): Columns contributed by each tab byte.

    Returns:
        int: The column width.
    """
    width = 0
    for b in bytes(line):
        if b == _NEWLINE:
            break
        width += tab_width if b == _TAB else 1
    return width
