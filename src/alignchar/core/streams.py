# topmark:header:start
#
#   project      : AlignChar
#   file         : streams.py
#   file_relpath : src/alignchar/core/streams.py
#   license      : MIT
#   copyright    : (c) 2025 The AlignChar Authors
#
# topmark:header:end

"""Checked byte-level access to the input and output streams.

The engine only ever reads single bytes and writes byte ranges. Both go
through these helpers so any `OSError` (or a short write) surfaces as a single
`AlignIOError` that callers can catch at the top level.
"""

from __future__ import annotations

from typing import BinaryIO

from alignchar.core.errors import AlignIOError

ByteData = bytes | bytearray | memoryview


def try_read_byte(stream: BinaryIO) -> bytes | None:
    """Read a single byte from ``stream``.

    Args:
        stream (BinaryIO): Binary input stream.

    Returns:
        bytes | None: A one-byte ``bytes`` object, or None at end of stream.

    Raises:
        AlignIOError: If the underlying read fails.
    """
    try:
        b = stream.read(1)
    except OSError as exc:
        raise AlignIOError(f"read error: {exc}") from exc
    if not b:
        return None
    return b


def write_all(stream: BinaryIO, data: ByteData) -> int:
    """Write all of ``data`` to ``stream``.

    Args:
        stream (BinaryIO): Binary output stream.
        data (ByteData): Bytes to write (``bytes``, ``bytearray`` or ``memoryview``).

    Returns:
        int: Number of bytes written.

    Raises:
        AlignIOError: If the write fails or writes fewer bytes than requested.
    """
    expected = len(memoryview(data))
    if expected == 0:
        return 0
    try:
        written = stream.write(data)
    except OSError as exc:
        raise AlignIOError(f"write error: {exc}") from exc
    # Unbuffered raw streams may report a short write; buffered ones return None or the full count.
    if written is not None and written != expected:
        raise AlignIOError(f"short write: expected {expected} bytes, wrote {written}")
    return expected
