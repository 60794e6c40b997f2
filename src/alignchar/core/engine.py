# topmark:header:start
#
#   project      : AlignChar
#   file         : engine.py
#   file_relpath : src/alignchar/core/engine.py
#   license      : MIT
#   copyright    : (c) 2025 The AlignChar Authors
#
# topmark:header:end

"""Single-pass alignment engine.

`process` drives the bounded `LineReader` over the whole input and hands every
complete line to the transformer. When a line does not fit in the buffer, the
buffered part is written as-is and the rest of the line is copied byte by byte
up to and including its terminator (overflow passthrough), after which normal
reading resumes.

The engine never opens or closes streams. It reads and writes through the
handles it is given and raises `AlignIOError` on the first I/O failure, leaving
whatever was already written in place.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from alignchar.config.logging import get_logger
from alignchar.constants import NEWLINE
from alignchar.core.reader import LineReader, ReadStatus
from alignchar.core.streams import try_read_byte, write_all
from alignchar.core.transformer import LineAction, emit_line

if TYPE_CHECKING:
    from typing import BinaryIO

    from alignchar.config.logging import AlignCharLogger
    from alignchar.config.model import AlignConfig

logger: AlignCharLogger = get_logger(__name__)


@dataclass
class ProcessResult:
    """Counters collected during one `process` run.

    Attributes:
        lines (int): Lines seen, including a final line without terminator.
        aligned (int): Lines rewritten with fill bytes.
        unchanged (int): Lines that fit in the buffer and were written back unchanged.
        overflowed (int): Lines too long for the buffer (copied through).
        bytes_read (int): Bytes consumed from the input stream.
        bytes_written (int): Bytes written to the output stream.
    """

    lines: int = 0
    aligned: int = 0
    unchanged: int = 0
    overflowed: int = 0
    bytes_read: int = 0
    bytes_written: int = 0

    @property
    def changed(self) -> bool:
        """True if at least one line was aligned."""
        return self.aligned > 0


def transfer_through_newline(instream: BinaryIO, outstream: BinaryIO) -> tuple[bool, int]:
    """Copy single bytes from ``instream`` to ``outstream`` through the next ``\\n``.

    Args:
        instream (BinaryIO): Binary input stream.
        outstream (BinaryIO): Binary output stream.

    Returns:
        tuple[bool, int]: ``(found, copied)`` where ``found`` is False when the
        stream ended before a terminator, and ``copied`` counts the bytes copied.

    Raises:
        AlignIOError: If reading or writing fails.
    """
    copied = 0
    while True:
        ch = try_read_byte(instream)
        if ch is None:
            return False, copied
        write_all(outstream, ch)
        copied += 1
        if ch == NEWLINE:
            return True, copied


def process(instream: BinaryIO, outstream: BinaryIO, config: AlignConfig) -> ProcessResult:
    """Align every eligible line of ``instream`` and write the result to ``outstream``.

    Args:
        instream (BinaryIO): Binary input stream, read one byte at a time.
        outstream (BinaryIO): Binary output stream.
        config (AlignConfig): Alignment settings; validated before any byte is read.

    Returns:
        ProcessResult: Counters for the run.

    Raises:
        AlignConfigError: If ``config`` is invalid.
        AlignIOError: On the first read or write failure.
    """
    config.validate()
    logger.debug("process: %s", config)

    reader = LineReader(instream, config.buffer_capacity)
    result = ProcessResult()

    while True:
        outcome = reader.read_line()

        if outcome.status is ReadStatus.OVERFLOW:
            # Too long to examine: write the buffered part, then stream the rest through.
            result.lines += 1
            result.overflowed += 1
            result.bytes_written += write_all(outstream, outcome.content)
            found, copied = transfer_through_newline(instream, outstream)
            result.bytes_read += copied
            result.bytes_written += copied
            logger.trace("line %d: overflow (%d bytes)", result.lines, outcome.length + copied)
            if not found:
                break
            continue

        if outcome.status is ReadStatus.END_OF_STREAM and outcome.length == 0:
            break

        result.lines += 1
        action, written = emit_line(outcome.content, outstream, config)
        result.bytes_written += written
        if action is LineAction.ALIGN:
            result.aligned += 1
        else:
            result.unchanged += 1
        logger.trace("line %d: %s", result.lines, action.value)

        if outcome.status is ReadStatus.END_OF_STREAM:
            break

    result.bytes_read += reader.bytes_read
    logger.debug(
        "process: %d line(s), %d aligned, %d overflowed, %d byte(s) written",
        result.lines,
        result.aligned,
        result.overflowed,
        result.bytes_written,
    )
    return result
