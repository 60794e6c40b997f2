# topmark:header:start
#
#   project      : AlignChar
#   file         : reader.py
#   file_relpath : src/alignchar/core/reader.py
#   license      : MIT
#   copyright    : (c) 2025 The AlignChar Authors
#
# topmark:header:end

r"""Bounded line reader.

Reads one line at a time from a binary stream into a fixed-capacity buffer
that is allocated once and never grown. Each call reports one of three
outcomes:

  * ``FOUND``: a ``\n`` terminator was read; it is included in the content.
  * ``END_OF_STREAM``: the stream ended before a terminator (content may be empty).
  * ``OVERFLOW``: ``capacity - 1`` bytes were read without meeting a terminator.
    The byte following them has not been consumed.

One slot of the buffer is always kept in reserve, which is why an overflowing
line carries ``capacity - 1`` bytes and why a capacity of 1 overflows
immediately.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from alignchar.config.logging import get_logger
from alignchar.constants import NEWLINE
from alignchar.core.errors import AlignConfigError
from alignchar.core.streams import try_read_byte

if TYPE_CHECKING:
    from typing import BinaryIO

    from alignchar.config.logging import AlignCharLogger

logger: AlignCharLogger = get_logger(__name__)


class ReadStatus(str, Enum):
    """Outcome of a single `LineReader.read_line` call."""

    FOUND = "found"
    END_OF_STREAM = "end_of_stream"
    OVERFLOW = "overflow"


@dataclass(frozen=True, slots=True)
class ReadOutcome:
    """Tagged result of one reader invocation.

    Attributes:
        status (ReadStatus): Which case occurred.
        content (bytes): Bytes captured for this line (terminator included for ``FOUND``).
        length (int): ``len(content)``; never exceeds ``capacity - 1``.
    """

    status: ReadStatus
    content: bytes
    length: int

    @property
    def has_terminator(self) -> bool:
        """True if the captured content ends with the line terminator."""
        return self.status is ReadStatus.FOUND


class LineReader:
    """Read lines from ``stream`` into a buffer of ``capacity`` bytes.

    Args:
        stream (BinaryIO): Binary input stream; only ``read(1)`` is used.
        capacity (int): Buffer capacity in bytes. At most ``capacity - 1``
            content bytes are captured per call.

    Raises:
        AlignConfigError: If ``capacity`` is zero or negative.
    """

    def __init__(self, stream: BinaryIO, capacity: int) -> None:
        if capacity <= 0:
            raise AlignConfigError(f"Zero-capacity buffer was given (capacity={capacity}).")
        self._stream = stream
        self._capacity = capacity
        self._buf = bytearray(capacity)
        self.bytes_read = 0

    @property
    def capacity(self) -> int:
        """Buffer capacity in bytes."""
        return self._capacity

    def read_line(self) -> ReadOutcome:
        """Read through the next ``\\n``, the end of the buffer, or the end of stream.

        Returns:
            ReadOutcome: The captured bytes and how reading stopped.

        Raises:
            AlignIOError: If reading from the stream fails.
        """
        if self._capacity == 1:
            # The reserved slot is the whole buffer.
            return ReadOutcome(ReadStatus.OVERFLOW, b"", 0)

        limit = self._capacity - 1
        n = 0
        while True:
            ch = try_read_byte(self._stream)
            if ch is None:
                return self._outcome(ReadStatus.END_OF_STREAM, n)

            self._buf[n] = ch[0]
            n += 1
            self.bytes_read += 1

            if ch == NEWLINE:
                return self._outcome(ReadStatus.FOUND, n)
            if n == limit:
                return self._outcome(ReadStatus.OVERFLOW, n)

    def _outcome(self, status: ReadStatus, n: int) -> ReadOutcome:
        outcome = ReadOutcome(status, bytes(self._buf[:n]), n)
        logger.trace("read_line: %s (%d bytes)", status.value, n)
        return outcome


def read_line(stream: BinaryIO, capacity: int) -> ReadOutcome:
    """Read a single line from ``stream`` with a one-off `LineReader`.

    Convenience wrapper for callers that do not loop; the engine keeps one
    `LineReader` (and thus one buffer) for the whole run.

    Args:
        stream (BinaryIO): Binary input stream.
        capacity (int): Buffer capacity in bytes.

    Returns:
        ReadOutcome: See `LineReader.read_line`.
    """
    return LineReader(stream, capacity).read_line()
